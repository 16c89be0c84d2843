import collections

from . import util


class DrawConfig(collections.namedtuple("DrawConfig",
                                        "colour canvas_size background texcoords_colour strict")):
    """ Explicit defaults for the drawing functions.

    colour -- RGBA colour of wireframe edges
    canvas_size -- (width, height) of canvases created by the drawing functions
    background -- RGBA colour of newly created canvases
    texcoords_colour -- RGBA colour of texture coordinate edges
    strict -- raise DegenerateTransform instead of skipping triangles that
              project to non-finite coordinates
    """
    __slots__ = ()

    def __new__(cls,
                colour=(0, 255, 0, 255),
                canvas_size=(512, 512),
                background=(0, 0, 0, 255),
                texcoords_colour=(0, 0, 255, 255),
                strict=False):
        return super().__new__(cls,
                               util.wrap_colour_like(colour),
                               util.wrap_size_like(canvas_size),
                               util.wrap_colour_like(background),
                               util.wrap_colour_like(texcoords_colour),
                               bool(strict))

    @classmethod
    def default(cls):
        return cls()

    def _replace(self, **kwargs):
        fields = self._asdict()
        fields.update(kwargs)
        return self.__class__(**fields)
