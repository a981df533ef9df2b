"""Vertex and index buffer objects on the GPU."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .buffer_layout import BufferLayout
from .shader import _gl_backend

GL_ARRAY_BUFFER = 0x8892
GL_ELEMENT_ARRAY_BUFFER = 0x8893

BufferData = Union[bytes, bytearray, memoryview, Sequence[float], np.ndarray]


def _as_bytes(data: BufferData, dtype: type) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    return np.ascontiguousarray(data, dtype=dtype).tobytes()


class VertexBuffer:
    """Vertex data uploaded once; floats are stored as 32-bit values."""

    def __init__(self, vertices: BufferData) -> None:
        self._gl = _gl_backend()
        data = _as_bytes(vertices, np.float32)
        self.size = len(data)
        self.layout = BufferLayout()
        self._id = self._gl.gen_buffer()
        self.bind()
        self._gl.buffer_data(GL_ARRAY_BUFFER, data)
        self.unbind()

    @property
    def buffer_id(self) -> int:
        return self._id

    def bind(self) -> None:
        self._gl.bind_buffer(GL_ARRAY_BUFFER, self._id)

    def unbind(self) -> None:
        self._gl.bind_buffer(GL_ARRAY_BUFFER, 0)

    def buffer_sub_data(self, offset: int, data: BufferData) -> None:
        """Overwrite part of the buffer starting at byte ``offset``."""
        raw = _as_bytes(data, np.float32)
        if offset < 0 or offset + len(raw) > self.size:
            raise ValueError("sub-data range lies outside the buffer")
        self.bind()
        self._gl.buffer_sub_data(GL_ARRAY_BUFFER, offset, raw)
        self.unbind()

    def delete(self) -> None:
        self._gl.delete_buffer(self._id)


class IndexBuffer:
    """Element indices stored as 32-bit unsigned integers."""

    def __init__(self, indices: BufferData) -> None:
        self._gl = _gl_backend()
        if isinstance(indices, (bytes, bytearray, memoryview)):
            data = bytes(indices)
        else:
            array = np.asarray(indices)
            if array.size and array.min() < 0:
                raise ValueError("indices must not be negative")
            data = np.ascontiguousarray(array, dtype=np.uint32).tobytes()
        self.count = len(data) // 4
        self._id = self._gl.gen_buffer()
        self.bind()
        self._gl.buffer_data(GL_ELEMENT_ARRAY_BUFFER, data)
        self.unbind()

    @property
    def buffer_id(self) -> int:
        return self._id

    def bind(self) -> None:
        self._gl.bind_buffer(GL_ELEMENT_ARRAY_BUFFER, self._id)

    def unbind(self) -> None:
        self._gl.bind_buffer(GL_ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        self._gl.delete_buffer(self._id)