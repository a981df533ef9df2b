"""Stateless drawing commands."""

from __future__ import annotations

from typing import Sequence

from .shader import _gl_backend
from .vertex_array import VertexArray

GL_COLOR_BUFFER_BIT = 0x4000
GL_DEPTH_BUFFER_BIT = 0x0100
GL_TRIANGLES = 0x0004
GL_UNSIGNED_INT = 0x1405
GL_FRONT_AND_BACK = 0x0408
GL_LINE = 0x1B01
GL_FILL = 0x1B02


def clear(mode: int = GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT) -> None:
    _gl_backend().clear(mode)


def set_polygon_mode(face: int, mode: int) -> None:
    _gl_backend().polygon_mode(face, mode)


def draw_index(vertex_array: VertexArray, primitive: int) -> None:
    """Draw every index of the array's index buffer."""
    index_buffer = vertex_array.index_buffer
    if index_buffer is None:
        raise ValueError("vertex array has no index buffer")
    _gl_backend().draw_elements(primitive, index_buffer.count, GL_UNSIGNED_INT)


def set_clear_color(color: Sequence[float]) -> None:
    r, g, b, a = color
    _gl_backend().clear_color(float(r), float(g), float(b), float(a))


def set_wireframe_mode() -> None:
    set_polygon_mode(GL_FRONT_AND_BACK, GL_LINE)


def set_solid_mode() -> None:
    set_polygon_mode(GL_FRONT_AND_BACK, GL_FILL)