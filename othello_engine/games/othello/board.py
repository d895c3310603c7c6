"""Othello board geometry: cells, players and the eight directions."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np

from othello_engine.errors import InvalidDirectionError, InvalidPlayerError, OutOfRangeError

NUM_ROWS = 8
NUM_COLS = 8
NUM_CELLS = NUM_ROWS * NUM_COLS
NUM_PLAYERS = 2
PASS_ACTION = NUM_CELLS


class CellState(IntEnum):
    # Values double as tensor plane indices for player 0's view.
    EMPTY = 0
    WHITE = 1
    BLACK = 2


NUM_CELL_STATES = len(CellState)


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    UP_RIGHT = 4
    UP_LEFT = 5
    DOWN_RIGHT = 6
    DOWN_LEFT = 7


# (d_row, d_col) per direction, indexed by Direction value.
DIRECTION_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
)


def on_board(row: int, col: int) -> bool:
    return 0 <= row < NUM_ROWS and 0 <= col < NUM_COLS


def direction_step(direction: int) -> Tuple[int, int]:
    """Return the (d_row, d_col) step of ``direction``."""
    try:
        return DIRECTION_STEPS[Direction(direction)]
    except ValueError as exc:
        raise InvalidDirectionError(
            f"Unknown direction {direction!r}", context={"direction": direction}
        ) from exc


def next_cell(row: int, col: int, direction: int) -> Tuple[int, int]:
    d_row, d_col = direction_step(direction)
    return row + d_row, col + d_col


def row_col_from_index(index: int) -> Tuple[int, int]:
    """
    Convert a flat cell index into (row, col).

    Args:
        index: Flat index, row * 8 + col.

    Returns:
        Tuple of (row, col), both zero-based from the top-left corner.
    """
    if index < 0 or index >= NUM_CELLS:
        raise OutOfRangeError(f"Cell index out of range: {index}", context={"index": index})
    return index // NUM_COLS, index % NUM_COLS


def index_from_row_col(row: int, col: int) -> int:
    if not on_board(row, col):
        raise OutOfRangeError(
            f"Invalid cell ({row}, {col})", context={"row": row, "col": col}
        )
    return row * NUM_COLS + col


def player_to_cell(player: int) -> CellState:
    """Disc colour of ``player``: 0 plays Black, 1 plays White."""
    if player == 0:
        return CellState.BLACK
    if player == 1:
        return CellState.WHITE
    raise InvalidPlayerError(f"Invalid player id {player}", context={"player": player})


def check_player(player: int) -> int:
    if not isinstance(player, (int, np.integer)) or not 0 <= player < NUM_PLAYERS:
        raise InvalidPlayerError(f"Invalid player id {player}", context={"player": player})
    return int(player)


def initial_board() -> np.ndarray:
    """Flat board with the standard four-disc opening (d4/e5 White, e4/d5 Black)."""
    board = np.full(NUM_CELLS, CellState.EMPTY, dtype=np.int8)

    mid_row = NUM_ROWS // 2
    mid_col = NUM_COLS // 2
    board[index_from_row_col(mid_row - 1, mid_col - 1)] = CellState.WHITE
    board[index_from_row_col(mid_row - 1, mid_col)] = CellState.BLACK
    board[index_from_row_col(mid_row, mid_col - 1)] = CellState.BLACK
    board[index_from_row_col(mid_row, mid_col)] = CellState.WHITE
    return board
