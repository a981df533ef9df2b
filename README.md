# gridgl

gridgl is a small OpenGL framework with a board game built on it. The game
draws an 8x8 chequered board with two teams of cube pieces. You play it with
the keyboard.

## Installing

```
pip install .
```

You need Python 3.10 or later and a system that supports OpenGL 4.3. Windows
are created with pyglet, images are read with Pillow, and the matrix maths uses
numpy.

## Playing

```
gridgl
```

This opens an 800x600 window titled "Assignment Program". Red pieces start on
the first two rows and blue pieces on the last two. The square under the
marker is drawn in green on the board.

| Key                  | Action                                                              |
|----------------------|---------------------------------------------------------------------|
| Arrow keys / W A S D | Move the marker (it stays on the board)                             |
| Enter                | Select the piece under the marker, or move the selected piece there |
| H / L                | Rotate the camera around the board while held                       |
| O / P                | Widen / narrow the field of view while held (10° to 90°)            |
| Q                    | Quit                                                                |

A selected piece is drawn in yellow. A piece under the marker is drawn in
green. A piece cannot move onto a square that is already taken. If you try,
the selection is dropped and the piece stays where it is.

When Python runs without `-O`, the game prints "Running in debug mode." and
writes OpenGL debug messages to standard error, if the driver offers them.

## What the game does not do

The game only moves pieces from square to square. It has no turn order, no
captures, no per-piece movement rules and no win detection. It has no mouse
input, and it cannot save or load a game.

## Using the game logic without a window

`gridgl.game.GameState` holds the pieces, the marked square and the selected
piece. It needs no OpenGL context:

```python
from gridgl.board import Pos
from gridgl.game import GameState

state = GameState()
state.enter()                  # select the red piece at (0, 0)
state.move_marked_square(0, 3)
state.enter()                  # move it to (0, 3)
assert state.piece_at(Pos(0, 3)) is not None
```

`GameState` provides these methods:

- `move_marked_square(dx, dy)` moves the marker and clamps it to the board.
- `select_piece()` selects the piece on the marked square.
- `move_piece()` moves the selected piece to the marked square.
- `piece_at(pos)` returns the piece on a square, or `None` if the square is empty.
- `enter()` moves the selected piece if there is one, and selects otherwise.

## The framework

You can use these modules on their own.

- `gridgl.geometry` provides `unit_grid_geometry_2d(rows, cols, colors=False, textures=False)`
  and `unit_grid_topology_triangles(rows, cols)`. Both cover a grid that spans
  [-1, 1]. The module also holds constants for a unit triangle, a unit square
  and a unit cube (with and without normals).
- `gridgl.shader_types.ShaderDataType` gives the byte size, the component count
  and the OpenGL base type of each attribute type.
- `gridgl.buffer_layout` provides `BufferAttribute` and `BufferLayout`. A
  `BufferLayout` computes the offsets and the stride of interleaved attributes.
- `gridgl.transforms` provides numpy 4x4 matrices: `identity`, `translate`,
  `rotate`, `scale`, `ortho`, `perspective` and `look_at`. Angles are given in
  radians.
- `gridgl.camera` provides `OrthographicCamera` and `PerspectiveCamera`, which
  are configured with `OrthographicFrustum` and `PerspectiveFrustum`. When you
  set a property, the projection, view and view-projection matrices are
  recomputed.
- `gridgl.shader.Shader` compiles and links a program and uploads uniforms.
  If compiling or linking fails, it raises `ShaderError`.
- `gridgl.buffers` provides `VertexBuffer` and `IndexBuffer`.
  `gridgl.vertex_array.VertexArray` sets up attribute pointers from each
  buffer's layout.
- `gridgl.render_commands` provides `clear`, `set_clear_color`, `draw_index`,
  `set_polygon_mode`, `set_wireframe_mode` and `set_solid_mode`.
- `gridgl.texture_manager.TextureManager` loads images as 2D textures or cube
  maps. `TextureManager.instance()` returns a shared manager. `unit_by_name`
  raises `KeyError` for a name that has not been loaded.
- `gridgl.application.Application` is a base class for windowed programs. It
  provides `init()`, an abstract `run()` and `close()`, and it works as a
  context manager. `init()` raises `ApplicationError` if the window cannot be
  created.

Everything in the list that talks to OpenGL needs a current context. That
covers shaders, buffers, vertex arrays, render commands and textures.

## Running the tests

```
pip install .[test]
pytest
```