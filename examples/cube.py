#!/usr/bin/env python3

""" Wireframe of a cube seen from a corner, only the three front faces are drawn """

import meshdraw

cube = meshdraw.Mesh(
    vertices=[(-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
              (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)],
    tvi=[(4, 5, 6), (4, 6, 7),
         (0, 2, 1), (0, 3, 2),
         (1, 2, 6), (1, 6, 5),
         (0, 4, 7), (0, 7, 3),
         (3, 7, 6), (3, 6, 2),
         (0, 1, 5), (0, 5, 4)],
    texcoords=[(0, 0), (0.5, 0), (0.5, 0.5), (0, 0.5),
               (0.5, 0.5), (1, 0.5), (1, 1), (0.5, 1)])

modelview = meshdraw.look_at((3, 2.5, 4), (0, 0, 0), (0, 1, 0))
projection = meshdraw.perspective(40, 1, 0.1, 100)

if __name__ == "__main__":
    meshdraw.commandline_draw(cube, modelview, projection)
