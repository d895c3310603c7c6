"""Tests for Othello board geometry."""

import numpy as np
import pytest

from othello_engine.errors import InvalidDirectionError, InvalidPlayerError, OutOfRangeError
from othello_engine.games.othello.board import (
    DIRECTION_STEPS,
    NUM_CELLS,
    CellState,
    Direction,
    check_player,
    direction_step,
    index_from_row_col,
    initial_board,
    next_cell,
    on_board,
    player_to_cell,
    row_col_from_index,
)


def test_on_board_bounds():
    assert on_board(0, 0)
    assert on_board(7, 7)
    assert not on_board(-1, 0)
    assert not on_board(0, -1)
    assert not on_board(8, 0)
    assert not on_board(0, 8)


def test_index_conversions():
    assert row_col_from_index(0) == (0, 0)
    assert row_col_from_index(19) == (2, 3)
    assert row_col_from_index(63) == (7, 7)
    for index in range(NUM_CELLS):
        assert index_from_row_col(*row_col_from_index(index)) == index


@pytest.mark.parametrize("index", [-1, 64, 100])
def test_row_col_from_index_rejects_out_of_range(index):
    with pytest.raises(OutOfRangeError):
        row_col_from_index(index)


@pytest.mark.parametrize("row, col", [(0, 8), (8, 0), (-1, 3), (3, -1), (1, 9)])
def test_index_from_row_col_checks_row_and_col(row, col):
    # (0, 8) and (1, 9) would slip through a row * col product check.
    with pytest.raises(OutOfRangeError):
        index_from_row_col(row, col)


def test_direction_table():
    assert len(DIRECTION_STEPS) == len(Direction) == 8
    assert len(set(DIRECTION_STEPS)) == 8
    assert direction_step(Direction.UP) == (-1, 0)
    assert direction_step(Direction.DOWN_LEFT) == (1, -1)
    assert next_cell(3, 3, Direction.UP_RIGHT) == (2, 4)
    assert next_cell(3, 3, Direction.DOWN_RIGHT) == (4, 4)


@pytest.mark.parametrize("direction", [-1, 8, 42])
def test_unknown_direction_fails_fast(direction):
    with pytest.raises(InvalidDirectionError):
        direction_step(direction)


def test_player_colours():
    assert player_to_cell(0) == CellState.BLACK
    assert player_to_cell(1) == CellState.WHITE
    with pytest.raises(InvalidPlayerError):
        player_to_cell(2)
    with pytest.raises(InvalidPlayerError):
        check_player(-1)
    assert check_player(np.int64(1)) == 1


def test_initial_board():
    board = initial_board()
    assert board.shape == (64,)
    assert board[27] == CellState.WHITE
    assert board[28] == CellState.BLACK
    assert board[35] == CellState.BLACK
    assert board[36] == CellState.WHITE
    assert np.sum(board == CellState.EMPTY) == 60
