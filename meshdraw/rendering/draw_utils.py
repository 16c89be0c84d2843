""" Debug drawing of meshes: visible wireframe and texture coordinate layout. """

import logging

import numpy

from .. import config as config_
from .. import errors
from .. import mesh as mesh_
from .. import util
from . import canvas as canvas_
from . import matrix_projection
from . import utils

logger = logging.getLogger(__name__)


def _triangle_edges(points):
    yield points[0], points[1]
    yield points[1], points[2]
    yield points[2], points[0]


def draw_wireframe(canvas, mesh, modelview, projection, viewport, colour=None, config=None):
    """ Draw the mesh as wireframe into the canvas.

    Only triangles that are counter-clockwise on screen are drawn (backface
    culling). There is no depth test, so front facing triangles hidden behind
    other parts of the mesh get drawn as well.

    canvas -- Canvas to draw into, modified in place
    mesh -- the mesh to draw
    modelview, projection -- 4x4 matrices
    viewport -- (x, y, width, height)
    colour -- RGBA edge colour, defaults to config.colour
    config -- DrawConfig, defaults to DrawConfig.default()
    """
    if config is None:
        config = config_.DrawConfig.default()
    if colour is None:
        colour = config.colour
    else:
        colour = util.wrap_colour_like(colour)

    mesh = mesh_.wrap_mesh_like(mesh)
    mesh.check_indices("vertices")

    front_facing = 0
    degenerate = 0
    with util.status_block("drawing wireframe of {} triangles".format(mesh.triangle_count()), logger):
        screen = matrix_projection.project_points(mesh.vertices, modelview, projection, viewport)

        for i, triangle in enumerate(mesh.tvi):
            points = [(float(screen[j, 0]), float(screen[j, 1])) for j in triangle]

            if not numpy.isfinite(points).all():
                if config.strict:
                    raise errors.DegenerateTransform(i, points)
                logger.debug("Skipping triangle %d with non-finite projection %s", i, points)
                degenerate += 1
                continue

            if not utils.are_vertices_ccw_in_screen_space(*points):
                continue

            for a, b in _triangle_edges(points):
                canvas.line(a, b, colour)
            front_facing += 1

    logger.debug("Drew %d of %d triangles, %d degenerate",
                 front_facing, mesh.triangle_count(), degenerate)


def draw_texcoords(mesh, canvas=None, config=None):
    """ Draw the texture coordinate triangles of the mesh.

    If no canvas is given, a new one of config.canvas_size filled with
    config.background is created. All triangles are drawn, with config.texcoords_colour.
    Returns the canvas. """
    if config is None:
        config = config_.DrawConfig.default()

    mesh = mesh_.wrap_mesh_like(mesh)

    if canvas is None:
        canvas = canvas_.Canvas.new(config.canvas_size, config.background)

    mesh.check_indices("texcoords")

    with util.status_block("drawing texcoords of {} triangles".format(mesh.triangle_count()), logger):
        pixels = mesh.texcoords * numpy.array([canvas.width, canvas.height], dtype=numpy.float64)

        for triangle in mesh.tvi:
            points = [(float(pixels[j, 0]), float(pixels[j, 1])) for j in triangle]
            for a, b in _triangle_edges(points):
                canvas.line(a, b, config.texcoords_colour)

    return canvas
