"""The board game application: moving pieces around an 8x8 board."""

from __future__ import annotations

import math
import sys
import time as _time
from dataclasses import replace
from enum import IntEnum
from typing import Any, Optional, Sequence

from . import render_commands
from .application import Application, ApplicationError
from .board import BOARD_COLS, BOARD_ROWS, Board, Pos
from .camera import PerspectiveCamera, PerspectiveFrustum
from .piece import Piece

RED = (1.0, 0.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)
YELLOW = (1.0, 1.0, 0.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)

MIN_FIELD_OF_VIEW = 0.1745329  # 10 degrees
MAX_FIELD_OF_VIEW = 1.570796  # 90 degrees

GL_DEBUG_TYPE_ERROR = 0x824C


class Key(IntEnum):
    """Key symbols as reported by the windowing layer."""

    ENTER = 65293
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    A = 97
    D = 100
    H = 104
    L = 108
    O = 111
    P = 112
    Q = 113
    S = 115
    W = 119


_MARKER_MOVES = {
    Key.UP: (0, 1),
    Key.W: (0, 1),
    Key.DOWN: (0, -1),
    Key.S: (0, -1),
    Key.LEFT: (-1, 0),
    Key.A: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.D: (1, 0),
}


class GameState:
    """Pieces, the marked square and the selected piece."""

    def __init__(self) -> None:
        self.pieces: list[Piece] = [
            Piece(col, row, RED) for row in range(2) for col in range(BOARD_COLS)
        ]
        self.pieces += [
            Piece(col, row, BLUE)
            for row in range(BOARD_ROWS - 2, BOARD_ROWS)
            for col in range(BOARD_COLS)
        ]
        self.marked_square = Pos(0, 0)
        self.selected_piece: Optional[Piece] = None

    def move_marked_square(self, dx: int, dy: int) -> None:
        """Move the marker, keeping it on the board."""
        x = min(max(self.marked_square.x + dx, 0), BOARD_COLS - 1)
        y = min(max(self.marked_square.y + dy, 0), BOARD_ROWS - 1)
        self.marked_square = Pos(x, y)

    def select_piece(self) -> None:
        """Select the piece on the marked square, if none is selected yet."""
        if self.selected_piece is None:
            self.selected_piece = self.piece_at(self.marked_square)

    def move_piece(self) -> None:
        """Move the selected piece to the marked square if it is free, then deselect."""
        if self.selected_piece is None:
            return
        if self.piece_at(self.marked_square) is None:
            self.selected_piece.position = self.marked_square
        self.selected_piece = None

    def piece_at(self, pos: Pos) -> Optional[Piece]:
        return next((piece for piece in self.pieces if piece.position == pos), None)

    def enter(self) -> None:
        """Move the selected piece if there is one, otherwise select."""
        if self.selected_piece is not None:
            self.move_piece()
        else:
            self.select_piece()


def _highlight(state: GameState, piece: Piece) -> Optional[tuple[float, ...]]:
    if state.selected_piece is not None and piece.position == state.selected_piece.position:
        return YELLOW
    if piece.position == state.marked_square:
        return GREEN
    return None


def _format_debug_message(message_type: int, severity: int, message: str) -> str:
    error = "** GL ERROR **" if message_type == GL_DEBUG_TYPE_ERROR else ""
    return f"GL CALLBACK:{error}type = 0x{message_type:x}, severity = 0x{severity:x}, message ={message}"


def _message_text(message: Any) -> str:
    value = getattr(message, "value", message)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(errors="replace")
    return str(value)


class Assignment(Application):
    """Windowed board game driven by the keyboard."""

    camera_distance = 3.0

    def __init__(self, name: str, version: str, screen_width: int, screen_height: int) -> None:
        super().__init__(name, version, screen_width, screen_height)
        self.state = GameState()
        self.board = Board()
        self.keys_down: list[int] = []
        self.camera_rotation = 0.0
        self.time = 0.0
        self.dtime = 0.0
        self.should_close = False
        self._debug_callback: Any = None
        frustum = PerspectiveFrustum(
            angle=math.radians(45.0),
            width=float(screen_width),
            height=float(screen_height),
            near=1.0,
            far=-10.0,
        )
        # x, y and the up vector are set by rotate_camera; z is the height.
        self.camera = PerspectiveCamera(frustum, (0.0, 0.0, 2.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
        self.rotate_camera(0)

    def init(self) -> None:
        super().init()
        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)
        self.window.push_handlers(
            on_key_press=lambda symbol, modifiers: self.key_pressed(symbol),
            on_key_release=lambda symbol, modifiers: self.key_released(symbol),
        )
        if __debug__:
            print("Running in debug mode.")
            self._install_debug_output(gl)

    def _install_debug_output(self, gl: Any) -> None:
        callback_type = getattr(gl, "GLDEBUGPROC", None)
        if callback_type is None:
            return

        def on_message(source, message_type, ident, severity, length, message, user):
            text = _message_text(message)
            print(_format_debug_message(message_type, severity, text), file=sys.stderr)

        self._debug_callback = callback_type(on_message)
        gl.glEnable(gl.GL_DEBUG_OUTPUT)
        gl.glEnable(gl.GL_DEBUG_OUTPUT_SYNCHRONOUS)
        gl.glDebugMessageCallback(self._debug_callback, None)
        gl.glDebugMessageControl(gl.GL_DONT_CARE, gl.GL_DONT_CARE, gl.GL_DONT_CARE, 0, None, True)

    def _closing(self) -> bool:
        return self.should_close or self.window is None or self.window.has_exit

    def run(self) -> None:
        if self.window is None:
            raise ApplicationError("init() must be called before run()")
        render_commands.set_clear_color((0.5, 0.5, 0.5, 1.0))
        start = _time.perf_counter() - self.time
        while not self._closing():
            now = _time.perf_counter() - start
            self.dtime = now - self.time
            self.time = now

            self.window.dispatch_events()
            self.parse_input()
            if self._closing():
                break

            render_commands.clear()
            view_projection = self.camera.view_projection_matrix
            self.board.draw(view_projection, self.state.marked_square)
            for piece in self.state.pieces:
                piece.draw(view_projection, _highlight(self.state, piece))
            self.window.flip()

    def key_pressed(self, key: int) -> None:
        if key not in self.keys_down:
            self.keys_down.append(key)

    def key_released(self, key: int) -> None:
        if key in self.keys_down:
            self.keys_down.remove(key)

    def _handle_key(self, key: int) -> bool:
        """Act on one key; return whether it stays held for the next frame."""
        if key in _MARKER_MOVES:
            self.state.move_marked_square(*_MARKER_MOVES[key])
        elif key == Key.ENTER:
            self.state.enter()
        elif key == Key.Q:
            self.should_close = True
            if self.window is not None:
                self.window.has_exit = True
        elif key == Key.H:
            self.rotate_camera(-90)
            return True
        elif key == Key.L:
            self.rotate_camera(90)
            return True
        elif key == Key.P:
            self.zoom_camera(-15)
            return True
        elif key == Key.O:
            self.zoom_camera(15)
            return True
        return False

    def parse_input(self) -> None:
        """Apply held keys; single-press keys are consumed, camera keys repeat."""
        self.keys_down = [key for key in list(self.keys_down) if self._handle_key(key)]

    def rotate_camera(self, delta_degrees: float) -> None:
        """Turn the camera around the board's centre at ``delta_degrees`` per second."""
        self.camera_rotation += self.dtime * -delta_degrees
        angle = math.radians(self.camera_rotation)
        position = self.camera.position
        position[0] = math.sin(angle) * self.camera_distance
        position[1] = math.cos(angle) * self.camera_distance
        self.camera.position = position
        position[2] += 1
        self.camera.up_vector = position

    def zoom_camera(self, delta_degrees: float) -> None:
        """Widen or narrow the field of view at ``delta_degrees`` per second."""
        frustum = self.camera.frustum
        angle = frustum.angle + math.radians(self.dtime * delta_degrees)
        angle = min(max(angle, MIN_FIELD_OF_VIEW), MAX_FIELD_OF_VIEW)
        self.camera.frustum = replace(frustum, angle=angle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    app = Assignment("Assignment Program", "1.0", 800, 600)
    try:
        app.init()
    except ApplicationError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        app.run()
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())