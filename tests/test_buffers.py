import pytest

from gridgl.buffers import IndexBuffer


def test_index_buffer_rejects_negative():
    with pytest.raises(ValueError):
        IndexBuffer([0, -1])


def test_index_buffer_rejects_single_negative():
    with pytest.raises(ValueError):
        IndexBuffer([-5])