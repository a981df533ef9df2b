from gridgl.vertex_array import VertexArray


def test_new_array_has_no_buffers():
    va = VertexArray()
    assert va.index_buffer is None
    assert va.vertex_buffers == ()