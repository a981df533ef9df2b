"""Loading of RGBA images into GPU textures, tracked by name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

from PIL import Image

from .shader import _gl_backend

GL_TEXTURE0 = 0x84C0
GL_TEXTURE_2D = 0x0DE1
GL_TEXTURE_CUBE_MAP = 0x8513
GL_TEXTURE_CUBE_MAP_POSITIVE_X = 0x8515
GL_TEXTURE_WRAP_S = 0x2802
GL_TEXTURE_WRAP_T = 0x2803
GL_TEXTURE_WRAP_R = 0x8072
GL_TEXTURE_MIN_FILTER = 0x2801
GL_TEXTURE_MAG_FILTER = 0x2800
GL_REPEAT = 0x2901
GL_LINEAR = 0x2601


class TextureType(Enum):
    TEXTURE_2D = "texture_2d"
    TEXTURE_3D = "texture_3d"
    CUBE_MAP = "cube_map"
    SKY_BOX = "sky_box"


@dataclass(frozen=True)
class Texture:
    name: str
    file_path: str
    unit: int
    type: TextureType
    width: int
    height: int
    mip_map: bool


class TextureManager:
    """Keeps the textures that have been loaded, each bound to a texture unit."""

    _instance: ClassVar[Optional["TextureManager"]] = None

    def __init__(self, *, gl: Any = None) -> None:
        self._gl = gl
        self._textures: list[Texture] = []

    @classmethod
    def instance(cls) -> "TextureManager":
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def textures(self) -> tuple[Texture, ...]:
        return tuple(self._textures)

    def _backend(self) -> Any:
        if self._gl is None:
            self._gl = _gl_backend()
        return self._gl

    @staticmethod
    def _load_image(file_path: str) -> tuple[int, int, bytes]:
        # Raises OSError when the file is missing or not an image.
        with Image.open(file_path) as image:
            rgba = image.convert("RGBA").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
            return rgba.width, rgba.height, rgba.tobytes()

    def _prepare(self, file_path: str, unit: int, target: int) -> tuple[Any, int, int, bytes]:
        width, height, data = self._load_image(file_path)
        gl = self._backend()
        texture = gl.gen_texture()
        gl.active_texture(GL_TEXTURE0 + unit)
        gl.bind_texture(target, texture)
        return gl, width, height, data

    def load_texture_2d_rgba(
        self, name: str, file_path: str, unit: int, mip_map: bool = True
    ) -> Texture:
        """Load an image as a 2D texture on ``unit``."""
        gl, width, height, data = self._prepare(file_path, unit, GL_TEXTURE_2D)
        gl.tex_image_2d(GL_TEXTURE_2D, width, height, data)
        if mip_map:
            gl.generate_mipmap(GL_TEXTURE_2D)
        for parameter, value in (
            (GL_TEXTURE_WRAP_S, GL_REPEAT),
            (GL_TEXTURE_WRAP_T, GL_REPEAT),
            (GL_TEXTURE_MIN_FILTER, GL_LINEAR),
            (GL_TEXTURE_MAG_FILTER, GL_LINEAR),
        ):
            gl.tex_parameter(GL_TEXTURE_2D, parameter, value)
        return self._register(name, file_path, unit, TextureType.TEXTURE_2D, width, height, mip_map)

    def load_cube_map_rgba(
        self, name: str, file_path: str, unit: int, mip_map: bool = True
    ) -> Texture:
        """Load one image onto all six faces of a cube map on ``unit``."""
        gl, width, height, data = self._prepare(file_path, unit, GL_TEXTURE_CUBE_MAP)
        for face in range(6):
            gl.tex_image_2d(GL_TEXTURE_CUBE_MAP_POSITIVE_X + face, width, height, data)
        if mip_map:
            gl.generate_mipmap(GL_TEXTURE_CUBE_MAP)
        for parameter, value in (
            (GL_TEXTURE_WRAP_S, GL_REPEAT),
            (GL_TEXTURE_WRAP_T, GL_REPEAT),
            (GL_TEXTURE_WRAP_R, GL_REPEAT),
            (GL_TEXTURE_MIN_FILTER, GL_LINEAR),
            (GL_TEXTURE_MAG_FILTER, GL_LINEAR),
        ):
            gl.tex_parameter(GL_TEXTURE_CUBE_MAP, parameter, value)
        return self._register(name, file_path, unit, TextureType.CUBE_MAP, width, height, mip_map)

    def _register(
        self,
        name: str,
        file_path: str,
        unit: int,
        texture_type: TextureType,
        width: int,
        height: int,
        mip_map: bool,
    ) -> Texture:
        texture = Texture(name, str(file_path), unit, texture_type, width, height, mip_map)
        self._textures.append(texture)
        return texture

    def unit_by_name(self, name: str) -> int:
        """Texture unit of the first texture loaded under ``name``."""
        for texture in self._textures:
            if texture.name == name:
                return texture.unit
        raise KeyError(name)