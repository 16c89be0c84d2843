class MeshdrawError(Exception):
    """ Base class for errors raised while drawing meshes. """
    pass


class IndexOutOfRange(MeshdrawError, IndexError):
    """ A triangle references a vertex or texture coordinate that doesn't exist. """

    def __init__(self, triangle, index, array_name, array_size):
        self.triangle = triangle
        self.index = index
        self.array_name = array_name
        self.array_size = array_size

    def __str__(self):
        return "Triangle {} references index {}, but {} has only {} items".format(
            self.triangle, self.index, self.array_name, self.array_size
        )


class DegenerateTransform(MeshdrawError, ArithmeticError):
    """ Projection produced a non-finite screen coordinate (typically w == 0). """

    def __init__(self, triangle, points):
        self.triangle = triangle
        self.points = points

    def __str__(self):
        return "Triangle {} projects to non-finite coordinates {}".format(
            self.triangle, [tuple(p) for p in self.points]
        )
