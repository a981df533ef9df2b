"""Compiled and linked GLSL shader programs with uniform upload helpers."""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Iterator, Sequence

import numpy as np

GL_VERTEX_SHADER = 0x8B31
GL_FRAGMENT_SHADER = 0x8B30
GL_COMPILE_STATUS = 0x8B81
GL_LINK_STATUS = 0x8B82
GL_INFO_LOG_LENGTH = 0x8B84
GL_STATIC_DRAW = 0x88E4
GL_RGBA8 = 0x8058
GL_RGBA = 0x1908
GL_UNSIGNED_BYTE = 0x1401


class ShaderError(RuntimeError):
    """Raised when a shader fails to compile or a program fails to link."""


class _PygletGL:
    """Thin adapter from the calls the package makes to the OpenGL API."""

    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl

    def _cstring(self, text: str) -> Any:
        encoded = text.encode() + b"\0"
        return (self._gl.GLchar * len(encoded)).from_buffer_copy(encoded)

    # Buffers
    def gen_buffer(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenBuffers(1, handle)
        return handle.value

    def delete_buffer(self, buffer: int) -> None:
        self._gl.glDeleteBuffers(1, self._gl.GLuint(buffer))

    def bind_buffer(self, target: int, buffer: int) -> None:
        self._gl.glBindBuffer(target, buffer)

    def buffer_data(self, target: int, data: bytes) -> None:
        self._gl.glBufferData(target, len(data), bytes(data), GL_STATIC_DRAW)

    def buffer_sub_data(self, target: int, offset: int, data: bytes) -> None:
        self._gl.glBufferSubData(target, offset, len(data), bytes(data))

    # Vertex arrays
    def gen_vertex_array(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenVertexArrays(1, handle)
        return handle.value

    def delete_vertex_array(self, array: int) -> None:
        self._gl.glDeleteVertexArrays(1, self._gl.GLuint(array))

    def bind_vertex_array(self, array: int) -> None:
        self._gl.glBindVertexArray(array)

    def vertex_attrib_pointer(
        self, index: int, count: int, base_type: int, normalized: bool, stride: int, offset: int
    ) -> None:
        self._gl.glVertexAttribPointer(
            index, count, base_type, bool(normalized), stride, offset or None
        )

    def enable_vertex_attrib_array(self, index: int) -> None:
        self._gl.glEnableVertexAttribArray(index)

    # Shaders
    def create_shader(self, shader_type: int) -> int:
        return self._gl.glCreateShader(shader_type)

    def shader_source(self, shader: int, source: str) -> None:
        text = bytearray(source.encode() + b"\0")
        char_pointer = self._gl.glShaderSource.argtypes[2]._type_
        first = self._gl.GLchar.from_buffer(text)
        self._gl.glShaderSource(shader, 1, char_pointer(first), None)

    def compile_shader(self, shader: int) -> None:
        self._gl.glCompileShader(shader)

    def shader_compiled(self, shader: int) -> bool:
        status = self._gl.GLint()
        self._gl.glGetShaderiv(shader, GL_COMPILE_STATUS, status)
        return bool(status.value)

    def shader_info_log(self, shader: int) -> str:
        length = self._gl.GLint()
        self._gl.glGetShaderiv(shader, GL_INFO_LOG_LENGTH, length)
        if length.value <= 0:
            return ""
        log = (self._gl.GLchar * length.value)()
        self._gl.glGetShaderInfoLog(shader, length.value, None, log)
        return log.value.decode(errors="replace")

    def delete_shader(self, shader: int) -> None:
        self._gl.glDeleteShader(shader)

    def create_program(self) -> int:
        return self._gl.glCreateProgram()

    def attach_shader(self, program: int, shader: int) -> None:
        self._gl.glAttachShader(program, shader)

    def link_program(self, program: int) -> None:
        self._gl.glLinkProgram(program)

    def program_linked(self, program: int) -> bool:
        status = self._gl.GLint()
        self._gl.glGetProgramiv(program, GL_LINK_STATUS, status)
        return bool(status.value)

    def delete_program(self, program: int) -> None:
        self._gl.glDeleteProgram(program)

    def use_program(self, program: int) -> None:
        self._gl.glUseProgram(program)

    def uniform_location(self, program: int, name: str) -> int:
        return self._gl.glGetUniformLocation(program, self._cstring(name))

    def uniform_matrix4(self, location: int, values: Sequence[float]) -> None:
        self._gl.glUniformMatrix4fv(location, 1, False, (self._gl.GLfloat * 16)(*values))

    def uniform(self, kind: str, location: int, *values: Any) -> None:
        getattr(self._gl, f"glUniform{kind}")(location, *values)

    # Rendering
    def clear(self, mode: int) -> None:
        self._gl.glClear(mode)

    def clear_color(self, r: float, g: float, b: float, a: float) -> None:
        self._gl.glClearColor(r, g, b, a)

    def polygon_mode(self, face: int, mode: int) -> None:
        self._gl.glPolygonMode(face, mode)

    def draw_elements(self, primitive: int, count: int, index_type: int) -> None:
        self._gl.glDrawElements(primitive, count, index_type, None)

    # Textures
    def gen_texture(self) -> int:
        handle = self._gl.GLuint()
        self._gl.glGenTextures(1, handle)
        return handle.value

    def active_texture(self, texture_unit: int) -> None:
        self._gl.glActiveTexture(texture_unit)

    def bind_texture(self, target: int, texture: int) -> None:
        self._gl.glBindTexture(target, texture)

    def tex_image_2d(self, target: int, width: int, height: int, data: bytes) -> None:
        self._gl.glTexImage2D(
            target, 0, GL_RGBA8, width, height, 0, GL_RGBA, GL_UNSIGNED_BYTE, bytes(data)
        )

    def generate_mipmap(self, target: int) -> None:
        self._gl.glGenerateMipmap(target)

    def tex_parameter(self, target: int, name: int, value: int) -> None:
        self._gl.glTexParameteri(target, name, value)


_overrides: list[Any] = []


@lru_cache(maxsize=None)
def _default_backend() -> _PygletGL:
    return _PygletGL()


def _gl_backend() -> Any:
    """The OpenGL adapter currently in use."""
    if _overrides:
        return _overrides[-1]
    return _default_backend()


@contextmanager
def _use_gl(gl: Any) -> Iterator[Any]:
    """Route OpenGL calls made inside the block to ``gl``."""
    _overrides.append(gl)
    try:
        yield gl
    finally:
        _overrides.pop()


class Shader:
    """A linked program built from a vertex and a fragment shader source."""

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        self._gl = _gl_backend()
        vertex = self._compile(GL_VERTEX_SHADER, vertex_src, "vertex")
        fragment = self._compile(GL_FRAGMENT_SHADER, fragment_src, "fragment")

        self._program = self._gl.create_program()
        self._gl.attach_shader(self._program, vertex)
        self._gl.attach_shader(self._program, fragment)
        self._gl.link_program(self._program)
        if not self._gl.program_linked(self._program):
            raise ShaderError("linking of shaders failed")
        self._gl.delete_shader(vertex)
        self._gl.delete_shader(fragment)

    @property
    def program(self) -> int:
        return self._program

    def _compile(self, shader_type: int, source: str, label: str) -> int:
        shader = self._gl.create_shader(shader_type)
        self._gl.shader_source(shader, source)
        self._gl.compile_shader(shader)
        if not self._gl.shader_compiled(shader):
            log = self._gl.shader_info_log(shader)
            raise ShaderError(f"failed to compile {label} shader: {log}".rstrip(": "))
        return shader

    def bind(self) -> None:
        self._gl.use_program(self._program)

    def unbind(self) -> None:
        self._gl.use_program(0)

    def delete(self) -> None:
        self._gl.delete_program(self._program)

    def _location(self, name: str) -> int:
        return self._gl.uniform_location(self._program, name)

    def upload_uniform_matrix4(self, name: str, matrix: Any) -> None:
        """Upload a 4x4 matrix given in mathematical (row, column) layout."""
        values = np.asarray(matrix, dtype=float)
        if values.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {values.shape}")
        self._gl.uniform_matrix4(self._location(name), tuple(values.flatten(order="F")))

    def upload_uniform_float(self, name: str, value: float) -> None:
        self._gl.uniform("1f", self._location(name), float(value))

    def upload_uniform_float2(self, name: str, vector: Sequence[float]) -> None:
        x, y = vector
        self._gl.uniform("2f", self._location(name), float(x), float(y))

    def upload_uniform_float3(self, name: str, vector: Sequence[float]) -> None:
        x, y, z = vector
        self._gl.uniform("3f", self._location(name), float(x), float(y), float(z))

    def upload_uniform_float4(self, name: str, vector: Sequence[float]) -> None:
        x, y, z, w = vector
        self._gl.uniform("4f", self._location(name), float(x), float(y), float(z), float(w))

    def upload_uniform_int1(self, name: str, x: int) -> None:
        self._gl.uniform("1i", self._location(name), int(x))

    def upload_uniform_int2(self, name: str, x: int, y: int) -> None:
        self._gl.uniform("2i", self._location(name), int(x), int(y))

    def upload_uniform_uint1(self, name: str, x: int) -> None:
        if x < 0:
            raise ValueError("unsigned uniform value must not be negative")
        self._gl.uniform("1ui", self._location(name), int(x))