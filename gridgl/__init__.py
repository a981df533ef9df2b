"""A small OpenGL framework (geometry, cameras, shaders, buffers, textures) and a board game built on it."""

__version__ = "1.0.0"