from types import SimpleNamespace

import pytest

from gridgl import render_commands as rc


def test_draw_index_without_index_buffer():
    vertex_array = SimpleNamespace(index_buffer=None)
    with pytest.raises(ValueError):
        rc.draw_index(vertex_array, rc.GL_TRIANGLES)