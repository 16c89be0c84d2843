import argparse
import logging
import os

from .. import config
from .. import logging_config
from .. import mesh as mesh_
from . import canvas
from . import draw_utils
from . import matrix_projection
from . import utils

from .canvas import Canvas
from .draw_utils import draw_wireframe, draw_texcoords
from .matrix_projection import project, project_points, ortho, perspective, look_at
from .utils import are_vertices_ccw_in_screen_space

__all__ = [
    "Canvas",
    "draw_wireframe",
    "draw_texcoords",
    "project",
    "project_points",
    "ortho",
    "perspective",
    "look_at",
    "are_vertices_ccw_in_screen_space",
    "commandline_draw",
]

logger = logging.getLogger(__name__)


def commandline_draw(mesh, modelview=None, projection=None, viewport=None,
                     default_mode="wireframe", draw_config=None, argv=None):
    """ Reads commandline arguments, draws the mesh in the chosen mode and saves the image.

    viewport defaults to the whole canvas. Returns the output file name. """

    if draw_config is None:
        draw_config = config.DrawConfig.default()

    parser = argparse.ArgumentParser(description='Draw a mesh')
    parser.add_argument('--output', '-o', default='output.png',
                        help='File name of the output image.')
    parser.add_argument('--mode', '-m', choices=sorted(_modes), default=default_mode,
                        help='What to draw.')
    parser.add_argument('--size', '-s', nargs=2, type=int, metavar=('WIDTH', 'HEIGHT'),
                        default=draw_config.canvas_size,
                        help='Size of the output image in pixels.')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log timing and culling statistics.')

    mesh = mesh_.wrap_mesh_like(mesh)

    args = parser.parse_args(argv)

    logging_config.setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    draw_config = draw_config._replace(canvas_size=args.size)
    target = Canvas.new(draw_config.canvas_size, draw_config.background)

    if viewport is None:
        viewport = matrix_projection.viewport(target.width, target.height)

    _modes[args.mode](target, mesh, modelview, projection, viewport, draw_config)

    target.save(args.output)
    logger.info("Drew %s of %d triangles to %s",
                args.mode, mesh.triangle_count(), os.path.abspath(args.output))

    return args.output


def _draw_wireframe(target, mesh, modelview, projection, viewport, draw_config):
    if modelview is None or projection is None:
        raise ValueError("Wireframe mode needs model-view and projection matrices")
    draw_wireframe(target, mesh, modelview, projection, viewport, config=draw_config)


def _draw_texcoords(target, mesh, modelview, projection, viewport, draw_config):
    draw_texcoords(mesh, target, config=draw_config)


_modes = {
    "wireframe": _draw_wireframe,
    "texcoords": _draw_texcoords,
}
