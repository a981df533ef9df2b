"""Shader attribute data types and their sizes."""

from __future__ import annotations

from enum import Enum

GL_INT = 0x1404
GL_FLOAT = 0x1406


class ShaderDataType(Enum):
    """Data type of a vertex attribute or uniform."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11

    def size(self) -> int:
        """Size of one value of this type in bytes."""
        return _SIZES[self]

    def component_count(self) -> int:
        """Number of scalar components in one value of this type."""
        return _COMPONENTS[self]

    def gl_base_type(self) -> int:
        """OpenGL enum of the scalar type the components are stored as."""
        return _BASE_TYPES[self]


_COMPONENTS = {
    ShaderDataType.NONE: 0,
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}

_SIZES = {
    data_type: 4 * count for data_type, count in _COMPONENTS.items()
}
_SIZES[ShaderDataType.BOOL] = 1

_BASE_TYPES = {
    ShaderDataType.NONE: GL_INT,
    ShaderDataType.FLOAT: GL_FLOAT,
    ShaderDataType.FLOAT2: GL_FLOAT,
    ShaderDataType.FLOAT3: GL_FLOAT,
    ShaderDataType.FLOAT4: GL_FLOAT,
    ShaderDataType.MAT3: GL_FLOAT,
    ShaderDataType.MAT4: GL_FLOAT,
    ShaderDataType.INT: GL_INT,
    ShaderDataType.INT2: GL_INT,
    ShaderDataType.INT3: GL_INT,
    ShaderDataType.INT4: GL_INT,
    ShaderDataType.BOOL: GL_INT,
}