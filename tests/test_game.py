import math

import numpy as np
import pytest

from gridgl.application import ApplicationError
from gridgl.board import BOARD_COLS, BOARD_ROWS, Pos
from gridgl.game import (
    BLUE,
    GREEN,
    MAX_FIELD_OF_VIEW,
    MIN_FIELD_OF_VIEW,
    RED,
    YELLOW,
    Assignment,
    GameState,
    Key,
    _highlight,
)


def make_app():
    return Assignment("Assignment Program", "1.0", 800, 600)


def test_initial_pieces():
    state = GameState()
    assert len(state.pieces) == 4 * BOARD_COLS
    red_rows = {p.position.y for p in state.pieces if p.color == RED}
    blue_rows = {p.position.y for p in state.pieces if p.color == BLUE}
    assert red_rows == {0, 1}
    assert blue_rows == {BOARD_ROWS - 2, BOARD_ROWS - 1}
    assert state.marked_square == Pos(0, 0)
    assert state.selected_piece is None


def test_marker_is_clamped_to_board():
    state = GameState()
    state.move_marked_square(-1, -1)
    assert state.marked_square == Pos(0, 0)
    state.move_marked_square(100, 100)
    assert state.marked_square == Pos(BOARD_COLS - 1, BOARD_ROWS - 1)


def test_select_and_move_to_free_square():
    state = GameState()
    state.enter()
    piece = state.selected_piece
    assert piece is state.piece_at(Pos(0, 0))
    state.move_marked_square(0, 3)
    state.enter()
    assert piece.position == Pos(0, 3)
    assert state.piece_at(Pos(0, 0)) is None
    assert state.selected_piece is None


def test_move_to_occupied_square_only_deselects():
    state = GameState()
    state.select_piece()
    piece = state.selected_piece
    state.move_marked_square(1, 0)
    state.move_piece()
    assert piece.position == Pos(0, 0)
    assert state.selected_piece is None


def test_select_on_empty_square_selects_nothing():
    state = GameState()
    state.move_marked_square(0, 3)
    state.select_piece()
    assert state.selected_piece is None


def test_highlight_colours():
    state = GameState()
    first = state.piece_at(Pos(0, 0))
    second = state.piece_at(Pos(1, 0))
    assert _highlight(state, first) == GREEN
    assert _highlight(state, second) is None
    state.select_piece()
    state.move_marked_square(1, 0)
    assert _highlight(state, first) == YELLOW
    assert _highlight(state, second) == GREEN


def test_key_press_and_release():
    app = make_app()
    app.key_pressed(Key.H)
    app.key_pressed(Key.H)
    assert app.keys_down == [Key.H]
    app.key_released(Key.H)
    assert app.keys_down == []


def test_single_press_keys_are_consumed():
    app = make_app()
    app.key_pressed(Key.RIGHT)
    app.key_pressed(Key.W)
    app.parse_input()
    assert app.state.marked_square == Pos(1, 1)
    assert app.keys_down == []


def test_camera_keys_stay_held():
    app = make_app()
    app.dtime = 1.0
    app.key_pressed(Key.H)
    app.key_pressed(Key.UP)
    app.parse_input()
    assert app.keys_down == [Key.H]
    assert app.camera_rotation == pytest.approx(90.0)


def test_quit_key_requests_close():
    app = make_app()
    app.key_pressed(Key.Q)
    app.parse_input()
    assert app.should_close is True


def test_rotate_camera_moves_on_circle():
    app = make_app()
    app.dtime = 1.0
    app.rotate_camera(-90)
    assert app.camera.position == pytest.approx([3.0, 0.0, 2.0], abs=1e-9)
    assert app.camera.up_vector == pytest.approx([3.0, 0.0, 3.0], abs=1e-9)


def test_initial_camera_keeps_distance_and_height():
    app = make_app()
    position = app.camera.position
    assert math.hypot(position[0], position[1]) == pytest.approx(app.camera_distance)
    assert position[2] == pytest.approx(2.0)
    assert np.all(np.isfinite(app.camera.view_projection_matrix))


def test_zoom_is_clamped():
    app = make_app()
    app.dtime = 100.0
    app.zoom_camera(15)
    assert app.camera.frustum.angle == pytest.approx(MAX_FIELD_OF_VIEW)
    app.zoom_camera(-15)
    assert app.camera.frustum.angle == pytest.approx(MIN_FIELD_OF_VIEW)


def test_zoom_without_elapsed_time_keeps_angle():
    app = make_app()
    before = app.camera.frustum.angle
    app.zoom_camera(15)
    assert app.camera.frustum.angle == pytest.approx(before)


def test_run_before_init_raises():
    app = make_app()
    with pytest.raises(ApplicationError):
        app.run()