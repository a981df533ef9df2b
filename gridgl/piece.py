"""Game pieces drawn as small cubes standing on board squares."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from . import render_commands
from .board import BOARD_SQUARE_XSIZE, BOARD_SQUARE_YSIZE, Pos
from .buffer_layout import BufferLayout
from .buffers import IndexBuffer, VertexBuffer
from .geometry import UNIT_CUBE_GEOMETRY_3D, UNIT_CUBE_TOPOLOGY_3D
from .shader import Shader
from .shader_types import ShaderDataType
from .transforms import identity, scale, translate
from .vertex_array import VertexArray

_VERTEX_SHADER = """
#version 430 core

layout(location = 0) in vec3 a_Position;

uniform mat4 u_Model;
uniform mat4 u_ViewProjection;

void main()
{
    gl_Position = u_ViewProjection * u_Model * vec4(a_Position, 1.0);
}
"""

_FRAGMENT_SHADER = """
#version 430 core

uniform vec4 u_Color;

out vec4 color;

void main()
{
    color = u_Color;
}
"""

# Places a unit cube, scaled down, on the centre of square (0, 0).
_INITIAL_MODEL = translate(
    identity(), (1.0 - BOARD_SQUARE_XSIZE / 2.0, 1.0 - BOARD_SQUARE_YSIZE / 2.0, 0.10)
) @ scale(identity(), 0.10)


def piece_model_matrix(pos: Pos) -> np.ndarray:
    """Model matrix of a piece standing on square ``pos``."""
    offset = (-pos.x * BOARD_SQUARE_XSIZE, -pos.y * BOARD_SQUARE_YSIZE, 0.0)
    return translate(identity(), offset) @ _INITIAL_MODEL


def _rgba(color: Sequence[float]) -> tuple[float, float, float, float]:
    values = tuple(float(c) for c in color)
    if len(values) != 4:
        raise ValueError(f"expected an RGBA colour, got {len(values)} components")
    return values  # type: ignore[return-value]


@dataclass
class _PieceGpu:
    vertex_array: VertexArray
    shader: Shader


class Piece:
    """A coloured cube on the board; GPU resources are created on first draw."""

    def __init__(self, x: int, y: int, color: Sequence[float]) -> None:
        self.color = _rgba(color)
        self._gpu: Optional[_PieceGpu] = None
        self.position = Pos(x, y)

    @property
    def position(self) -> Pos:
        return self._position

    @position.setter
    def position(self, pos: Pos) -> None:
        self._position = pos
        self._model = piece_model_matrix(pos)

    @property
    def model_matrix(self) -> np.ndarray:
        return self._model.copy()

    def _ensure_gpu(self) -> _PieceGpu:
        if self._gpu is None:
            vertex_buffer = VertexBuffer(UNIT_CUBE_GEOMETRY_3D)
            vertex_buffer.layout = BufferLayout([(ShaderDataType.FLOAT3, "a_Position")])
            index_buffer = IndexBuffer(UNIT_CUBE_TOPOLOGY_3D)
            vertex_array = VertexArray()
            vertex_array.add_vertex_buffer(vertex_buffer)
            vertex_array.set_index_buffer(index_buffer)
            shader = Shader(_VERTEX_SHADER, _FRAGMENT_SHADER)
            self._gpu = _PieceGpu(vertex_array, shader)
        return self._gpu

    def draw(
        self, view_projection: np.ndarray, override_color: Optional[Sequence[float]] = None
    ) -> None:
        """Draw the piece, in ``override_color`` when one is given."""
        gpu = self._ensure_gpu()
        gpu.vertex_array.bind()
        gpu.shader.bind()
        gpu.shader.upload_uniform_matrix4("u_Model", self._model)
        gpu.shader.upload_uniform_matrix4("u_ViewProjection", view_projection)
        color = self.color if override_color is None else _rgba(override_color)
        gpu.shader.upload_uniform_float4("u_Color", color)
        render_commands.draw_index(gpu.vertex_array, render_commands.GL_TRIANGLES)