import math

import numpy
import PIL.Image
import PIL.ImageDraw

from .. import util

# Extreme end points are pulled to this distance from the canvas before drawing
GUARD = 2 ** 15


def _clip_segment(a, b, x_min, y_min, x_max, y_max):
    """ Liang-Barsky clipping of segment a-b to a rectangle.
    Returns the clipped end points or None if nothing is left. """
    x0, y0 = a
    dx = b[0] - x0
    dy = b[1] - y0

    if not all(math.isfinite(v) for v in (x0, y0, dx, dy)):
        return None

    t0 = 0.0
    t1 = 1.0
    for p, q in ((-dx, x0 - x_min),
                 (dx, x_max - x0),
                 (-dy, y0 - y_min),
                 (dy, y_max - y0)):
        if p == 0:
            if q < 0:
                return None  # Parallel and outside
            continue

        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)

    start = (x0, y0) if t0 == 0 else (x0 + t0 * dx, y0 + t0 * dy)
    end = (b[0], b[1]) if t1 == 1 else (x0 + t1 * dx, y0 + t1 * dy)
    return start, end


class Canvas:
    """ RGBA pixel buffer that the drawing functions draw lines into.

    Wraps a PIL image, all drawing happens in place. """

    def __init__(self, image):
        if image.mode != "RGBA":
            raise ValueError("Canvas needs an RGBA image, got mode {}".format(image.mode))
        self._image = image
        self._draw = PIL.ImageDraw.Draw(image)

    @classmethod
    def new(cls, size=(512, 512), background=(0, 0, 0, 255)):
        return cls(PIL.Image.new("RGBA",
                                 util.wrap_size_like(size),
                                 util.wrap_colour_like(background)))

    @classmethod
    def from_array(cls, array):
        """ Create a canvas with a copy of a height x width x 4 (or 3) uint8 array. """
        array = numpy.asarray(array)
        if array.dtype != numpy.uint8 or array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError("Array must be uint8 with shape (height, width, 3 or 4), "
                             "got {} {}".format(array.dtype, array.shape))
        image = PIL.Image.fromarray(numpy.ascontiguousarray(array))
        return cls(image.convert("RGBA"))

    @property
    def image(self):
        return self._image

    @property
    def width(self):
        return self._image.width

    @property
    def height(self):
        return self._image.height

    @property
    def size(self):
        return self._image.size

    def as_array(self):
        """ Copy of the pixels as a height x width x 4 uint8 array. """
        return numpy.array(self._image)

    def copy(self):
        return self.__class__(self._image.copy())

    def line(self, a, b, colour):
        """ Draw a one pixel wide segment between two points in pixel coordinates.

        Segments that miss the canvas or have non-finite end points are ignored.
        Only end points further than GUARD pixels from the canvas are moved, so
        edges of reasonable length are rasterized exactly as given.
        Returns True if anything was drawn. """
        if _clip_segment(a, b, -1, -1, self.width, self.height) is None:
            return False

        (x0, y0), (x1, y1) = _clip_segment(a, b,
                                           -GUARD, -GUARD,
                                           self.width + GUARD, self.height + GUARD)
        self._draw.line([(round(x0), round(y0)), (round(x1), round(y1))],
                        fill=util.wrap_colour_like(colour),
                        width=1)
        return True

    def save(self, filename, **kwargs):
        self._image.save(filename, **kwargs)

    def __repr__(self):
        return "{}(size={})".format(self.__class__.__name__, self.size)
