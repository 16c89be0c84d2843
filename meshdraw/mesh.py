import collections

import numpy

from . import errors


def _as_array(value, columns, dtype, name):
    array = numpy.asarray(value, dtype=dtype)
    if array.size == 0:
        return array.reshape(0, columns)
    if array.ndim != 2 or array.shape[1] != columns:
        raise ValueError("{} must have shape (n, {}), got {}".format(name, columns, array.shape))
    return array


class Mesh(collections.namedtuple("Mesh", "vertices tvi texcoords")):
    """ Triangle mesh with optional per-vertex texture coordinates.

    vertices -- n x 3 array of vertex positions
    tvi -- m x 3 array of triangle vertex indices
    texcoords -- n x 2 array of uv coordinates, index aligned with vertices,
                 may be empty. """
    __slots__ = ()

    def __new__(cls, vertices, tvi, texcoords=()):
        vertices = _as_array(vertices, 3, numpy.float64, "vertices")
        tvi = numpy.asarray(tvi)
        if tvi.size and not numpy.issubdtype(tvi.dtype, numpy.integer):
            raise TypeError("Triangle indices must be integers, got {}".format(tvi.dtype))
        tvi = _as_array(tvi, 3, numpy.int64, "tvi")
        texcoords = _as_array(texcoords, 2, numpy.float64, "texcoords")
        return super().__new__(cls, vertices, tvi, texcoords)

    def triangle_count(self):
        return len(self.tvi)

    def check_indices(self, array_name="vertices"):
        """ Raise IndexOutOfRange for the first triangle that indexes outside
        of the given array ("vertices" or "texcoords"). """
        array_size = len(getattr(self, array_name))
        if not len(self.tvi):
            return

        bad = (self.tvi < 0) | (self.tvi >= array_size)
        if not bad.any():
            return

        triangle, corner = numpy.argwhere(bad)[0]
        raise errors.IndexOutOfRange(int(triangle),
                                     int(self.tvi[triangle, corner]),
                                     array_name,
                                     array_size)


def wrap_mesh_like(value):
    """ Use value as a Mesh.
    Mesh-like is anything with vertices, tvi and optionally texcoords attributes. """
    if isinstance(value, Mesh):
        return value
    try:
        return Mesh(value.vertices, value.tvi, getattr(value, "texcoords", ()))
    except AttributeError:
        raise TypeError("Value must have vertices and tvi attributes to be mesh-like")
