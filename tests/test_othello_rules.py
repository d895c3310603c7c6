"""Tests for capture detection and move legality."""

import pytest

from othello_engine.errors import InternalConsistencyError, OutOfRangeError
from othello_engine.games.othello.board import CellState, Direction, initial_board
from othello_engine.games.othello.utils import (
    can_capture,
    capture,
    count_captured_in_direction,
    count_pieces,
    get_flips,
    is_legal_move,
    legal_regular_actions,
)


def test_initial_capture_counts():
    board = initial_board()
    # d3 (19) captures the white disc at d4 by looking down.
    assert count_captured_in_direction(board, 0, 19, Direction.DOWN) == 1
    for direction in Direction:
        if direction != Direction.DOWN:
            assert count_captured_in_direction(board, 0, 19, direction) == 0
    assert get_flips(board, 0, 19) == {Direction.DOWN: 1}


def test_run_ending_in_empty_captures_nothing(make_board):
    board = make_board(
        "........",
        ".WW.....",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    )
    assert count_captured_in_direction(board, 0, 8, Direction.RIGHT) == 0
    assert not can_capture(board, 0, 8)


def test_run_reaching_edge_captures_nothing(make_board):
    board = make_board(
        ".WWWWWWW",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    )
    assert count_captured_in_direction(board, 0, 0, Direction.RIGHT) == 0
    board[7] = CellState.BLACK
    assert count_captured_in_direction(board, 0, 0, Direction.RIGHT) == 6


def test_adjacent_own_disc_captures_zero(make_board):
    board = make_board(
        ".B......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    )
    assert count_captured_in_direction(board, 0, 0, Direction.RIGHT) == 0


def test_multi_direction_flips(make_board):
    board = make_board(
        "B.B.B...",
        ".WWW....",
        "BW.WB...",
        ".WWW....",
        "B.B.B...",
        "........",
        "........",
        "........",
    )
    flips = get_flips(board, 0, 18)
    assert len(flips) == 8
    assert all(steps == 1 for steps in flips.values())


def test_occupied_cell_is_never_legal():
    board = initial_board()
    for index in (27, 28, 35, 36):
        assert not can_capture(board, 0, index)
        assert not is_legal_move(board, 0, index)
        assert not is_legal_move(board, 1, index)


def test_initial_legal_actions():
    board = initial_board()
    assert legal_regular_actions(board, 0) == [19, 26, 37, 44]
    assert legal_regular_actions(board, 1) == [20, 29, 34, 43]


def test_is_legal_move_rejects_bad_index():
    board = initial_board()
    with pytest.raises(OutOfRangeError):
        is_legal_move(board, 0, 64)
    with pytest.raises(OutOfRangeError):
        is_legal_move(board, 0, -1)


def test_capture_flips_run():
    board = initial_board()
    board[19] = CellState.BLACK
    capture(board, 0, 19, Direction.DOWN, 1)
    assert board[27] == CellState.BLACK
    assert count_pieces(board) == (4, 1)


def test_capture_with_wrong_count_is_internal_error():
    board = initial_board()
    board[19] = CellState.BLACK
    with pytest.raises(InternalConsistencyError):
        capture(board, 0, 19, Direction.DOWN, 2)
    with pytest.raises(InternalConsistencyError):
        capture(board, 0, 19, Direction.UP, 1)
