#!/usr/bin/env python3

""" A wavy square grid with planar texture coordinates.
Try `--mode texcoords` to see the uv layout. """

import math

import numpy

import meshdraw


def grid(n, amplitude):
    u, v = numpy.meshgrid(numpy.linspace(0, 1, n + 1), numpy.linspace(0, 1, n + 1))
    x = 2 * u - 1
    y = 1 - 2 * v
    z = amplitude * numpy.sin(2 * math.pi * u) * numpy.cos(math.pi * v)

    vertices = numpy.stack([x.ravel(), y.ravel(), z.ravel()], axis=1)
    texcoords = numpy.stack([u.ravel(), v.ravel()], axis=1)

    tvi = []
    for row in range(n):
        for column in range(n):
            top_left = row * (n + 1) + column
            bottom_left = top_left + n + 1
            tvi.append((top_left, bottom_left, top_left + 1))
            tvi.append((top_left + 1, bottom_left, bottom_left + 1))

    return meshdraw.Mesh(vertices, tvi, texcoords)


o = grid(16, 0.3)
modelview = meshdraw.look_at((0, -2.5, 2.5), (0, 0, 0), (0, 1, 0))
projection = meshdraw.perspective(50, 1, 0.1, 100)

if __name__ == "__main__":
    meshdraw.commandline_draw(o, modelview, projection)
