import numpy as np
import pytest

from gridgl.board import BOARD_SQUARE_XSIZE, BOARD_SQUARE_YSIZE, Pos
from gridgl.piece import Piece, piece_model_matrix

ORIGIN = np.array([0.0, 0.0, 0.0, 1.0])


def test_piece_on_first_square_sits_at_its_centre():
    centre = piece_model_matrix(Pos(0, 0)) @ ORIGIN
    assert centre == pytest.approx([0.875, 0.875, 0.10, 1.0])


def test_moving_one_square_shifts_by_square_size():
    start = piece_model_matrix(Pos(0, 0)) @ ORIGIN
    moved = piece_model_matrix(Pos(1, 2)) @ ORIGIN
    assert (moved - start)[:2] == pytest.approx([-BOARD_SQUARE_XSIZE, -2 * BOARD_SQUARE_YSIZE])
    assert moved[2] == pytest.approx(start[2])


def test_cube_is_scaled_down():
    matrix = piece_model_matrix(Pos(0, 0))
    corner = matrix @ np.array([0.5, 0.5, 0.5, 1.0])
    centre = matrix @ ORIGIN
    assert (corner - centre)[:3] == pytest.approx([0.05, 0.05, 0.05])


def test_last_square_sits_at_opposite_corner():
    centre = piece_model_matrix(Pos(7, 7)) @ ORIGIN
    assert centre == pytest.approx([-0.875, -0.875, 0.10, 1.0])


def test_position_setter_updates_model_matrix():
    piece = Piece(0, 0, (1.0, 0.0, 0.0, 1.0))
    piece.position = Pos(5, 6)
    assert piece.position == Pos(5, 6)
    assert np.allclose(piece.model_matrix, piece_model_matrix(Pos(5, 6)))


def test_new_piece_starts_at_given_square():
    piece = Piece(3, 4, (0.0, 0.0, 1.0, 1.0))
    assert piece.position == Pos(3, 4)
    assert np.allclose(piece.model_matrix, piece_model_matrix(Pos(3, 4)))


def test_colour_must_have_four_components():
    with pytest.raises(ValueError):
        Piece(0, 0, (1.0, 0.0, 0.0))