import pytest
from PIL import Image

from gridgl.shader import _use_gl
from gridgl.texture_manager import (
    GL_TEXTURE0,
    GL_TEXTURE_2D,
    GL_TEXTURE_CUBE_MAP_POSITIVE_X,
    TextureManager,
    TextureType,
)


class FakeGL:
    def __init__(self):
        self.calls = []
        self._next = 0

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))
            if name.startswith("gen_"):
                self._next += 1
                return self._next
            return None

        return record

    def find(self, name):
        return [args for n, args in self.calls if n == name]


@pytest.fixture
def image_path(tmp_path):
    image = Image.new("RGBA", (2, 3), (0, 0, 0, 255))
    image.putpixel((0, 0), (255, 0, 0, 255))
    path = tmp_path / "tex.png"
    image.save(path)
    return path


def test_load_2d_texture(image_path):
    gl = FakeGL()
    manager = TextureManager(gl=gl)
    texture = manager.load_texture_2d_rgba("cat", str(image_path), 1)
    assert (texture.width, texture.height) == (2, 3)
    assert texture.type is TextureType.TEXTURE_2D
    assert gl.find("active_texture") == [(GL_TEXTURE0 + 1,)]
    assert gl.find("generate_mipmap") == [(GL_TEXTURE_2D,)]
    assert manager.textures == (texture,)


def test_image_is_flipped_vertically(image_path):
    gl = FakeGL()
    TextureManager(gl=gl).load_texture_2d_rgba("cat", str(image_path), 0, mip_map=False)
    (target, width, height, data), = gl.find("tex_image_2d")
    last_row = data[(height - 1) * width * 4:]
    assert tuple(last_row[:4]) == (255, 0, 0, 255)
    assert gl.find("generate_mipmap") == []


def test_cube_map_uploads_six_faces(image_path):
    gl = FakeGL()
    texture = TextureManager(gl=gl).load_cube_map_rgba("sky", str(image_path), 2)
    targets = [args[0] for args in gl.find("tex_image_2d")]
    assert targets == [GL_TEXTURE_CUBE_MAP_POSITIVE_X + i for i in range(6)]
    assert texture.type is TextureType.CUBE_MAP


def test_unit_by_name(image_path):
    manager = TextureManager(gl=FakeGL())
    manager.load_texture_2d_rgba("dog", str(image_path), 3)
    assert manager.unit_by_name("dog") == 3
    with pytest.raises(KeyError):
        manager.unit_by_name("missing")


def test_missing_file_raises(tmp_path):
    manager = TextureManager(gl=FakeGL())
    with pytest.raises(OSError):
        manager.load_texture_2d_rgba("x", str(tmp_path / "none.png"), 0)
    assert manager.textures == ()


def test_instance_is_shared():
    with _use_gl(FakeGL()):
        first = TextureManager.instance()
        second = TextureManager.instance()
    assert second is first
    with pytest.raises(KeyError):
        second.unit_by_name("never-loaded")