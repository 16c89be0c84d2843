""" Homogeneous camera transforms and projection of 3D points to pixel coordinates.

Matrices follow the OpenGL conventions (column vectors, camera looking down -z,
normalized device coordinates in [-1, 1]). Pixel coordinates have their origin
in the top left corner with y growing downwards. """

import math

import numpy


def _as_matrix(value, name):
    matrix = numpy.asarray(value, dtype=numpy.float64)
    if matrix.shape != (4, 4):
        raise ValueError("{} must be a 4x4 matrix, got shape {}".format(name, matrix.shape))
    return matrix


def _as_viewport(value):
    vp = numpy.asarray(value, dtype=numpy.float64)
    if vp.shape != (4,):
        raise ValueError("Viewport must have 4 items (x, y, width, height), got shape {}".format(vp.shape))
    return vp


def _normalized(v):
    length = numpy.linalg.norm(v)
    if length == 0:
        raise ValueError("Cannot normalize a zero vector")
    return v / length


def project_points(points, modelview, projection, viewport):
    """ Project an n x 3 array of points to screen space.

    Returns an n x 4 array of (x, y, depth, w), where x and y are pixel coordinates,
    depth is the normalized device z mapped to [0, 1] and w is the clip space w.
    Points with w == 0 come out as inf or nan. """
    points = numpy.asarray(points, dtype=numpy.float64)
    if points.size == 0:
        return numpy.empty((0, 4))
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError("Points must have shape (n, 3), got {}".format(points.shape))

    transform = _as_matrix(projection, "Projection") @ _as_matrix(modelview, "Model-view")
    vp = _as_viewport(viewport)

    homogeneous = numpy.hstack([points, numpy.ones((len(points), 1))])
    clip = homogeneous @ transform.T
    w = clip[:, 3]

    with numpy.errstate(divide="ignore", invalid="ignore"):
        ndc = clip[:, :3] / w[:, numpy.newaxis]

    ret = numpy.empty((len(points), 4))
    ret[:, 0] = vp[0] + (ndc[:, 0] + 1) / 2 * vp[2]
    ret[:, 1] = vp[1] + (1 - ndc[:, 1]) / 2 * vp[3]
    ret[:, 2] = (ndc[:, 2] + 1) / 2
    ret[:, 3] = w
    return ret


def project(point, modelview, projection, viewport):
    """ Project a single 3D point, see project_points. """
    return project_points([point], modelview, projection, viewport)[0]


def viewport(width, height, x=0, y=0):
    """ Viewport descriptor (x, y, width, height) as used by project. """
    return numpy.array([x, y, width, height], dtype=numpy.float64)


def ortho(left, right, bottom, top, z_near=-1, z_far=1):
    """ Orthographic projection matrix, same as glOrtho. """
    if left == right or bottom == top or z_near == z_far:
        raise ValueError("Orthographic projection volume must not be empty")

    ret = numpy.identity(4)
    ret[0, 0] = 2 / (right - left)
    ret[1, 1] = 2 / (top - bottom)
    ret[2, 2] = -2 / (z_far - z_near)
    ret[0, 3] = -(right + left) / (right - left)
    ret[1, 3] = -(top + bottom) / (top - bottom)
    ret[2, 3] = -(z_far + z_near) / (z_far - z_near)
    return ret


def perspective(fovy, aspect, z_near, z_far):
    """ Perspective projection matrix, same as gluPerspective.
    fovy is the vertical field of view in degrees. """
    if fovy <= 0 or fovy >= 180:
        raise ValueError("Field of view must be between 0 and 180 degrees")
    if aspect == 0:
        raise ValueError("Aspect ratio must not be zero")
    if z_near == z_far:
        raise ValueError("Near and far planes must differ")

    f = 1 / math.tan(math.radians(fovy) / 2)

    ret = numpy.zeros((4, 4))
    ret[0, 0] = f / aspect
    ret[1, 1] = f
    ret[2, 2] = (z_far + z_near) / (z_near - z_far)
    ret[2, 3] = 2 * z_far * z_near / (z_near - z_far)
    ret[3, 2] = -1
    return ret


def look_at(eye, centre, up):
    """ Model-view matrix of a camera at eye looking at centre, same as gluLookAt. """
    eye = numpy.asarray(eye, dtype=numpy.float64)
    centre = numpy.asarray(centre, dtype=numpy.float64)
    up = numpy.asarray(up, dtype=numpy.float64)

    if numpy.array_equal(eye, centre):
        raise ValueError("Eye and centre must be different points")

    forward = _normalized(centre - eye)
    side = numpy.cross(forward, up)
    if numpy.allclose(side, 0):
        raise ValueError("Up vector must not be parallel to the viewing direction")
    side = _normalized(side)
    up = numpy.cross(side, forward)

    ret = numpy.identity(4)
    ret[0, :3] = side
    ret[1, :3] = up
    ret[2, :3] = -forward
    ret[:3, 3] = -ret[:3, :3] @ eye
    return ret
