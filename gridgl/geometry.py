"""Vertex and index data for simple 2D and 3D shapes."""

from __future__ import annotations

from itertools import product

# Triangle corners (x, y): bottom-left, bottom-right, top-centre.
UNIT_TRIANGLE_2D: tuple[float, ...] = (
    -0.5, -0.5,
    0.5, -0.5,
    0.0, 0.5,
)

# Square corners (x, y): bottom-left, bottom-right, top-right, top-left.
UNIT_SQUARE_2D: tuple[float, ...] = (
    -0.5, -0.5,
    0.5, -0.5,
    0.5, 0.5,
    -0.5, 0.5,
)

# Eight cube corners A..H, three floats each.
UNIT_CUBE_GEOMETRY_3D: tuple[float, ...] = (
    -0.5, -0.5, -0.5,  # A 0
    0.5, -0.5, -0.5,  # B 1
    0.5, 0.5, -0.5,  # C 2
    -0.5, 0.5, -0.5,  # D 3
    -0.5, -0.5, 0.5,  # E 4
    0.5, -0.5, 0.5,  # F 5
    0.5, 0.5, 0.5,  # G 6
    -0.5, 0.5, 0.5,  # H 7
)

UNIT_CUBE_TOPOLOGY_3D: tuple[int, ...] = (
    0, 4, 5,  # AEF
    0, 5, 1,  # AFB
    1, 5, 6,  # BFG
    1, 6, 2,  # BGC
    2, 6, 7,  # CGH
    2, 7, 3,  # CHD
    3, 7, 4,  # DHE
    3, 4, 0,  # DEA
    4, 7, 6,  # EHG
    4, 6, 5,  # EGF
    0, 1, 2,  # ABC
    0, 2, 3,  # ACD
)

# 24 vertices, each a position followed by its face normal (six floats).
UNIT_CUBE_3D_24_WITH_NORMALS: tuple[float, ...] = (
    -0.5, -0.5, -0.5, -1.0, 0.0, 0.0,  # A 0
    -0.5, 0.5, -0.5, -1.0, 0.0, 0.0,  # D 1
    -0.5, -0.5, 0.5, -1.0, 0.0, 0.0,  # E 2
    -0.5, 0.5, 0.5, -1.0, 0.0, 0.0,  # H 3
    0.5, -0.5, -0.5, 1.0, 0.0, 0.0,  # B 4
    0.5, 0.5, -0.5, 1.0, 0.0, 0.0,  # C 5
    0.5, -0.5, 0.5, 1.0, 0.0, 0.0,  # F 6
    0.5, 0.5, 0.5, 1.0, 0.0, 0.0,  # G 7
    -0.5, -0.5, -0.5, 0.0, -1.0, 0.0,  # A 8
    0.5, -0.5, -0.5, 0.0, -1.0, 0.0,  # B 9
    -0.5, -0.5, 0.5, 0.0, -1.0, 0.0,  # E 10
    0.5, -0.5, 0.5, 0.0, -1.0, 0.0,  # F 11
    0.5, 0.5, -0.5, 0.0, 1.0, 0.0,  # C 12
    -0.5, 0.5, -0.5, 0.0, 1.0, 0.0,  # D 13
    0.5, 0.5, 0.5, 0.0, 1.0, 0.0,  # G 14
    -0.5, 0.5, 0.5, 0.0, 1.0, 0.0,  # H 15
    -0.5, -0.5, -0.5, 0.0, 0.0, -1.0,  # A 16
    0.5, -0.5, -0.5, 0.0, 0.0, -1.0,  # B 17
    0.5, 0.5, -0.5, 0.0, 0.0, -1.0,  # C 18
    -0.5, 0.5, -0.5, 0.0, 0.0, -1.0,  # D 19
    -0.5, -0.5, 0.5, 0.0, 0.0, 1.0,  # E 20
    0.5, -0.5, 0.5, 0.0, 0.0, 1.0,  # F 21
    0.5, 0.5, 0.5, 0.0, 0.0, 1.0,  # G 22
    -0.5, 0.5, 0.5, 0.0, 0.0, 1.0,  # H 23
)

UNIT_CUBE_3D_TOPOLOGY_TRIANGLES_24: tuple[int, ...] = (
    1, 0, 2,  # DAE
    1, 2, 3,  # DEH
    4, 5, 7,  # BCG
    4, 7, 6,  # BGF
    8, 9, 11,  # ABF
    8, 11, 10,  # AFE
    12, 13, 15,  # CDH
    12, 15, 14,  # CHG
    17, 16, 19,  # BAD
    17, 19, 18,  # BDC
    22, 23, 20,  # GHE
    22, 20, 21,  # GEF
)

_WHITE = (1.0, 1.0, 1.0, 1.0)
_BLACK = (0.0, 0.0, 0.0, 1.0)


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"grid dimensions must not be negative: {rows}x{cols}")


def unit_grid_geometry_2d(
    rows: int, cols: int, colors: bool = False, textures: bool = False
) -> list[float]:
    """Vertices of a grid spanning [-1, 1] on both axes.

    Each vertex is its position (2 floats), then optionally an alternating
    white/black colour (4 floats), then optionally texture coordinates
    (2 floats). Vertices run row by row from the bottom-left corner.
    An empty list is returned when either dimension is zero.
    """
    _check_dimensions(rows, cols)
    vertices: list[float] = []
    if rows == 0 or cols == 0:
        return vertices

    for index, (y, x) in enumerate(product(range(rows + 1), range(cols + 1))):
        vertices += (-1 + x * 2 / cols, -1 + y * 2 / rows)
        if colors:
            vertices += _WHITE if index % 2 == 0 else _BLACK
        if textures:
            vertices += (x / cols, y / rows)
    return vertices


def unit_grid_topology_triangles(rows: int, cols: int) -> list[int]:
    """Triangle indices for the grid made by :func:`unit_grid_geometry_2d`.

    Every cell gives two triangles: (a, b, c) and (a, d, c), where a is the
    cell's first corner, b the next along the row, d the one above a and c
    the one above b.
    """
    _check_dimensions(rows, cols)
    indices: list[int] = []
    if rows == 0 or cols == 0:
        return indices

    row_stride = cols + 1
    for row, col in product(range(rows), range(cols)):
        a = row_stride * row + col
        b = a + 1
        d = a + row_stride
        c = d + 1
        indices += (a, b, c, a, d, c)
    return indices