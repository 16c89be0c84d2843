import PIL.Image
import pytest

import meshdraw

import data


def test_wireframe(tmp_path):
    output = str(tmp_path / "wireframe.png")
    result = meshdraw.commandline_draw(data.cube, data.front_camera, data.perspective_45,
                                       argv=["--output", output, "--size", "64", "48"])
    assert result == output

    with PIL.Image.open(output) as image:
        assert image.size == (64, 48)
        pixels = list(image.convert("RGBA").getdata())
    assert (0, 255, 0, 255) in pixels


def test_texcoords(tmp_path):
    output = str(tmp_path / "uv.png")
    meshdraw.commandline_draw(data.cube, argv=["-o", output, "-m", "texcoords", "-s", "32", "32"])

    with PIL.Image.open(output) as image:
        assert image.size == (32, 32)
        pixels = list(image.convert("RGBA").getdata())
    assert (0, 0, 255, 255) in pixels


def test_default_mode(tmp_path):
    output = str(tmp_path / "uv.png")
    meshdraw.commandline_draw(data.triangle, default_mode="texcoords", argv=["-o", output])

    with PIL.Image.open(output) as image:
        assert image.size == (512, 512)


def test_wireframe_needs_matrices(tmp_path):
    with pytest.raises(ValueError):
        meshdraw.commandline_draw(data.cube, argv=["-o", str(tmp_path / "x.png")])


def test_unknown_mode(tmp_path):
    with pytest.raises(SystemExit):
        meshdraw.commandline_draw(data.cube, argv=["-m", "shaded"])
