def are_vertices_ccw_in_screen_space(v0, v1, v2):
    """ Check whether a screen space triangle is front facing.

    Screen space has y pointing down, which mirrors the winding: a triangle that
    is counter-clockwise in the mesh (y up) has a negative signed area here.
    Degenerate (zero area) triangles are not front facing. """
    dx01 = v1[0] - v0[0]
    dy01 = v1[1] - v0[1]
    dx02 = v2[0] - v0[0]
    dy02 = v2[1] - v0[1]

    return bool(dx01 * dy02 - dy01 * dx02 < 0)
