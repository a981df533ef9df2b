import numpy as np
import pytest

from gridgl.shader import Shader


def _unlinked_shader():
    # Uniform arguments are checked before anything reaches the GPU.
    return Shader.__new__(Shader)


def test_matrix_shape_checked():
    shader = _unlinked_shader()
    with pytest.raises(ValueError):
        shader.upload_uniform_matrix4("u_Model", np.eye(3))


def test_negative_unsigned_rejected():
    shader = _unlinked_shader()
    with pytest.raises(ValueError):
        shader.upload_uniform_uint1("u_flag", -1)