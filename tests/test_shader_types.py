import pytest

from gridgl.shader_types import GL_FLOAT, GL_INT, ShaderDataType


@pytest.mark.parametrize(
    "data_type, size",
    [
        (ShaderDataType.FLOAT, 4),
        (ShaderDataType.FLOAT2, 4 * 2),
        (ShaderDataType.FLOAT3, 4 * 3),
        (ShaderDataType.FLOAT4, 4 * 4),
        (ShaderDataType.MAT3, 4 * 3 * 3),
        (ShaderDataType.MAT4, 4 * 4 * 4),
        (ShaderDataType.INT, 4),
        (ShaderDataType.INT2, 4 * 2),
        (ShaderDataType.INT3, 4 * 3),
        (ShaderDataType.INT4, 4 * 4),
        (ShaderDataType.BOOL, 1),
        (ShaderDataType.NONE, 0),
    ],
)
def test_size(data_type, size):
    assert data_type.size() == size


@pytest.mark.parametrize(
    "data_type, count",
    [
        (ShaderDataType.FLOAT, 1),
        (ShaderDataType.FLOAT2, 2),
        (ShaderDataType.FLOAT3, 3),
        (ShaderDataType.FLOAT4, 4),
        (ShaderDataType.MAT3, 3 * 3),
        (ShaderDataType.MAT4, 4 * 4),
        (ShaderDataType.INT, 1),
        (ShaderDataType.INT2, 2),
        (ShaderDataType.INT3, 3),
        (ShaderDataType.INT4, 4),
        (ShaderDataType.BOOL, 1),
        (ShaderDataType.NONE, 0),
    ],
)
def test_component_count(data_type, count):
    assert data_type.component_count() == count


@pytest.mark.parametrize(
    "data_type",
    [
        ShaderDataType.FLOAT,
        ShaderDataType.FLOAT2,
        ShaderDataType.FLOAT3,
        ShaderDataType.FLOAT4,
        ShaderDataType.MAT3,
        ShaderDataType.MAT4,
    ],
)
def test_float_types_use_gl_float(data_type):
    assert data_type.gl_base_type() == GL_FLOAT


@pytest.mark.parametrize(
    "data_type",
    [
        ShaderDataType.INT,
        ShaderDataType.INT2,
        ShaderDataType.INT3,
        ShaderDataType.INT4,
        ShaderDataType.BOOL,
        ShaderDataType.NONE,
    ],
)
def test_integer_types_use_gl_int(data_type):
    assert data_type.gl_base_type() == GL_INT


@pytest.mark.parametrize(
    "data_type",
    [
        ShaderDataType.FLOAT,
        ShaderDataType.FLOAT2,
        ShaderDataType.FLOAT3,
        ShaderDataType.FLOAT4,
        ShaderDataType.MAT3,
        ShaderDataType.MAT4,
        ShaderDataType.INT,
        ShaderDataType.INT2,
        ShaderDataType.INT3,
        ShaderDataType.INT4,
    ],
)
def test_four_byte_components(data_type):
    assert data_type.size() == 4 * data_type.component_count()