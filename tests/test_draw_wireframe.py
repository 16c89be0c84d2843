import collections
import logging

import numpy
import pytest

import meshdraw

import data
import tools

viewport = (0, 0, 100, 100)


def draw(mesh, canvas=None, modelview=data.identity, projection=data.identity, **kwargs):
    if canvas is None:
        canvas = tools.recording_canvas()
    meshdraw.draw_wireframe(canvas, mesh, modelview, projection, viewport, **kwargs)
    return canvas


def test_front_facing_triangle_draws_three_edges():
    canvas = draw(data.triangle)
    assert [(a, b) for a, b, colour in canvas.lines] == [
        ((50, 50), (75, 50)),
        ((75, 50), (50, 25)),
        ((50, 25), (50, 50)),
    ]


def test_back_facing_triangle_draws_nothing():
    canvas = draw(data.reversed_triangle)
    assert canvas.lines == []
    assert tools.painted_pixels(canvas, (0, 0, 0, 255)) == 100 * 100


def test_default_colour_is_green():
    canvas = draw(data.triangle)
    assert all(colour == (0, 255, 0, 255) for a, b, colour in canvas.lines)
    assert tuple(canvas.as_array()[50, 60]) == (0, 255, 0, 255)


def test_explicit_colour():
    canvas = draw(data.triangle, colour=(255, 0, 0))
    assert tuple(canvas.as_array()[50, 60]) == (255, 0, 0, 255)


def test_config_colour():
    config = meshdraw.DrawConfig(colour=(10, 20, 30, 255))
    canvas = draw(data.triangle, config=config)
    assert tuple(canvas.as_array()[40, 50]) == (10, 20, 30, 255)


def test_cube_from_front_shows_only_front_face():
    canvas = draw(data.cube, modelview=data.front_camera, projection=data.perspective_45)
    assert len(canvas.lines) == 6  # Two triangles of the +z face

    edges = collections.Counter(frozenset((a, b)) for a, b, colour in canvas.lines)
    assert sorted(edges.values()) == [1, 1, 1, 1, 2]  # Diagonal is shared


def test_cube_from_corner_shows_three_faces():
    modelview = meshdraw.look_at((4, 4, 4), (0, 0, 0), (0, 1, 0))
    canvas = draw(data.cube, modelview=modelview, projection=data.perspective_45)
    assert len(canvas.lines) == 3 * 2 * 3


def test_canvas_is_not_resized():
    canvas = tools.recording_canvas(30, 20)
    draw(data.cube, canvas=canvas, modelview=data.front_camera, projection=data.perspective_45)
    assert canvas.size == (30, 20)


def test_repeatable_on_copies():
    modelview = meshdraw.look_at((3, 2, 4), (0, 0, 0), (0, 1, 0))
    original = meshdraw.Canvas.new((100, 100), (20, 20, 20, 255))
    canvas1 = original.copy()
    canvas2 = original.copy()

    draw(data.cube, canvas=canvas1, modelview=modelview, projection=data.perspective_45)
    draw(data.cube, canvas=canvas2, modelview=modelview, projection=data.perspective_45)

    assert numpy.array_equal(canvas1.as_array(), canvas2.as_array())
    assert not numpy.array_equal(canvas1.as_array(), original.as_array())
    tools.assert_images_equal(canvas1, canvas2)


def test_empty_mesh_is_noop():
    canvas = draw(data.empty)
    assert canvas.lines == []


@pytest.mark.parametrize("tvi", [
    [(0, 1, 3)],
    [(0, 1, 2), (0, 5, 1)],
    [(-1, 0, 1)],
])
def test_index_out_of_range(tvi):
    mesh = meshdraw.Mesh(data.triangle.vertices, tvi)
    canvas = tools.recording_canvas()
    with pytest.raises(meshdraw.IndexOutOfRange) as excinfo:
        draw(mesh, canvas=canvas)
    assert excinfo.value.array_name == "vertices"
    assert excinfo.value.array_size == 3
    assert canvas.lines == []


def test_index_out_of_range_is_index_error():
    mesh = meshdraw.Mesh(data.triangle.vertices, [(0, 1, 7)])
    with pytest.raises(IndexError):
        draw(mesh)


def _w_from_z():
    projection = numpy.identity(4)
    projection[3] = (0, 0, 1, 0)
    return projection


degenerate_mesh = meshdraw.Mesh(
    vertices=[(0, 0, 0), (1, 0, 1), (0, 1, 1),
              (0, 0, 1), (0.5, 0, 1), (0, 0.5, 1)],
    tvi=[(0, 1, 2), (3, 4, 5)])


def test_degenerate_projection_is_skipped(caplog):
    with caplog.at_level(logging.DEBUG, logger="meshdraw"):
        canvas = draw(degenerate_mesh, projection=_w_from_z())
    assert len(canvas.lines) == 3
    assert any("non-finite" in record.getMessage() for record in caplog.records)


def test_degenerate_projection_strict():
    config = meshdraw.DrawConfig(strict=True)
    with pytest.raises(meshdraw.DegenerateTransform) as excinfo:
        draw(degenerate_mesh, projection=_w_from_z(), config=config)
    assert excinfo.value.triangle == 0


class _MeshLike:
    vertices = [(0, 0, 0), (0.5, 0, 0), (0, 0.5, 0)]
    tvi = [(0, 1, 2)]


def test_mesh_like_object():
    canvas = draw(_MeshLike())
    assert len(canvas.lines) == 3
