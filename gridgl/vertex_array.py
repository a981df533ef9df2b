"""Vertex array objects tying vertex buffers and an index buffer together."""

from __future__ import annotations

from typing import Optional

from .buffers import IndexBuffer, VertexBuffer
from .shader import _gl_backend


class VertexArray:
    """A vertex array whose attributes come from its buffers' layouts."""

    def __init__(self) -> None:
        self._gl = _gl_backend()
        self._id = self._gl.gen_vertex_array()
        self._vertex_buffers: list[VertexBuffer] = []
        self._index_buffer: Optional[IndexBuffer] = None

    @property
    def array_id(self) -> int:
        return self._id

    @property
    def vertex_buffers(self) -> tuple[VertexBuffer, ...]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffer(self) -> Optional[IndexBuffer]:
        return self._index_buffer

    def bind(self) -> None:
        self._gl.bind_vertex_array(self._id)

    def unbind(self) -> None:
        self._gl.bind_vertex_array(0)

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        """Attach a buffer, declaring one attribute per entry of its layout."""
        self.bind()
        vertex_buffer.bind()
        layout = vertex_buffer.layout
        for index, attribute in enumerate(layout):
            self._gl.vertex_attrib_pointer(
                index,
                attribute.count,
                attribute.data_type.gl_base_type(),
                attribute.normalized,
                layout.stride,
                attribute.offset,
            )
            self._gl.enable_vertex_attrib_array(index)
        self._vertex_buffers.append(vertex_buffer)
        self.unbind()
        vertex_buffer.unbind()

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        self.bind()
        index_buffer.bind()
        self._index_buffer = index_buffer
        self.unbind()
        index_buffer.unbind()

    def delete(self) -> None:
        self._gl.delete_vertex_array(self._id)