"""The chess-style board: an 8x8 grid drawn with one square highlighted."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from . import render_commands
from .buffer_layout import BufferLayout
from .buffers import IndexBuffer, VertexBuffer
from .geometry import unit_grid_geometry_2d, unit_grid_topology_triangles
from .shader import Shader
from .shader_types import ShaderDataType
from .transforms import identity, rotate
from .vertex_array import VertexArray

BOARD_ROWS = 8
BOARD_COLS = 8
BOARD_SQUARE_XSIZE = 2.0 / BOARD_COLS
BOARD_SQUARE_YSIZE = 2.0 / BOARD_ROWS

_VERTEX_SHADER = """
#version 430 core

layout(location = 0) in vec2 v_Position;

uniform mat4 u_Model;
uniform mat4 u_ViewProjection;

out vec2 vs_GridPosition;

void main()
{
    vs_GridPosition = (v_Position + 1.0) / 2.0;
    gl_Position = u_ViewProjection * u_Model * vec4(v_Position, 0.0, 1.0);
}
"""

_FRAGMENT_SHADER = """
#version 430 core

in vec2 vs_GridPosition;

uniform ivec2 u_markedSquare;
uniform ivec2 u_gridLayout;

out vec4 color;

void main()
{
    ivec2 cell = min(ivec2(floor(vs_GridPosition * vec2(u_gridLayout))), u_gridLayout - 1);
    if (cell == u_markedSquare)
        color = vec4(0.0, 1.0, 0.0, 1.0);
    else if ((cell.x + cell.y) % 2 == 0)
        color = vec4(0.0, 0.0, 0.0, 1.0);
    else
        color = vec4(1.0, 1.0, 1.0, 1.0);
}
"""


@dataclass(frozen=True)
class Pos:
    """A square on the board, counted in columns (x) and rows (y)."""

    x: int = 0
    y: int = 0


@dataclass
class _BoardGpu:
    vertex_array: VertexArray
    shader: Shader


class Board:
    """Grid geometry for the board; GPU resources are created on first draw."""

    def __init__(self) -> None:
        self.vertices = unit_grid_geometry_2d(BOARD_ROWS, BOARD_COLS)
        self.indices = unit_grid_topology_triangles(BOARD_ROWS, BOARD_COLS)
        self._model = rotate(identity(), math.radians(180.0), (0.0, 0.0, 1.0))
        self._gpu: Optional[_BoardGpu] = None

    @property
    def model_matrix(self) -> np.ndarray:
        return self._model.copy()

    def _ensure_gpu(self) -> _BoardGpu:
        if self._gpu is None:
            vertex_buffer = VertexBuffer(self.vertices)
            vertex_buffer.layout = BufferLayout([(ShaderDataType.FLOAT2, "v_Position")])
            index_buffer = IndexBuffer(self.indices)
            vertex_array = VertexArray()
            vertex_array.add_vertex_buffer(vertex_buffer)
            vertex_array.set_index_buffer(index_buffer)
            shader = Shader(_VERTEX_SHADER, _FRAGMENT_SHADER)
            self._gpu = _BoardGpu(vertex_array, shader)
        return self._gpu

    def draw(self, view_projection: np.ndarray, marked_square: Pos) -> None:
        """Draw the board with ``marked_square`` highlighted."""
        gpu = self._ensure_gpu()
        gpu.vertex_array.bind()
        gpu.shader.bind()
        gpu.shader.upload_uniform_matrix4("u_Model", self._model)
        gpu.shader.upload_uniform_matrix4("u_ViewProjection", view_projection)
        gpu.shader.upload_uniform_int2("u_markedSquare", marked_square.x, marked_square.y)
        gpu.shader.upload_uniform_int2("u_gridLayout", BOARD_COLS, BOARD_ROWS)
        render_commands.draw_index(gpu.vertex_array, render_commands.GL_TRIANGLES)