[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridgl"
version = "1.0.0"
description = "A small OpenGL framework and a 3D board game of movable pieces on an 8x8 grid"
requires-python = ">=3.10"
keywords = ["opengl", "board game", "chessboard", "camera", "pyglet", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridgl = "gridgl.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gridgl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
