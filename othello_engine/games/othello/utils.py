"""Shared utilities for Othello capture detection and move legality."""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from othello_engine.errors import InternalConsistencyError
from .board import (
    NUM_CELLS,
    NUM_COLS,
    CellState,
    Direction,
    next_cell,
    on_board,
    player_to_cell,
    row_col_from_index,
)


def count_captured_in_direction(
    board: np.ndarray,
    player: int,
    index: int,
    direction: int,
) -> int:
    """
    Count opponent discs captured along one ray from ``index``.

    The walk starts at the neighbour of ``index`` in ``direction``. A run of
    opponent discs counts only when it ends on one of the player's own
    discs; a run that reaches an empty cell or the edge captures nothing.

    Args:
        board: Flat board array of 64 cells.
        player: Player id (0 or 1).
        index: Flat index of the cell the disc is placed on.
        direction: One of the eight :class:`Direction` values.

    Returns:
        Number of opponent discs that would be flipped in this direction.
    """
    row, col = row_col_from_index(index)
    row, col = next_cell(row, col, direction)
    own = player_to_cell(player)

    count = 0
    while on_board(row, col):
        cell = board[row * NUM_COLS + col]
        if cell == own:
            return count
        if cell == CellState.EMPTY:
            return 0
        count += 1
        row, col = next_cell(row, col, direction)

    return 0


def get_flips(board: np.ndarray, player: int, index: int) -> Dict[Direction, int]:
    """
    Capture counts for every direction that captures at least one disc.

    Args:
        board: Flat board array.
        player: Player id (0 or 1).
        index: Flat index of the candidate cell.

    Returns:
        Mapping of direction to number of discs captured in that direction.
    """
    flips = {}
    for direction in Direction:
        steps = count_captured_in_direction(board, player, index, direction)
        if steps > 0:
            flips[direction] = steps
    return flips


def can_capture(board: np.ndarray, player: int, index: int) -> bool:
    row_col_from_index(index)
    if board[index] != CellState.EMPTY:
        return False

    return any(
        count_captured_in_direction(board, player, index, direction) != 0
        for direction in Direction
    )


def is_legal_move(board: np.ndarray, player: int, index: int) -> bool:
    """
    Check if ``player`` may place a disc at ``index``.

    Args:
        board: Flat board array.
        player: Player id (0 or 1).
        index: Flat cell index.

    Returns:
        True if the cell is empty and the placement captures in some direction.
    """
    row_col_from_index(index)
    return board[index] == CellState.EMPTY and can_capture(board, player, index)


def legal_regular_actions(board: np.ndarray, player: int) -> List[int]:
    """All cell indices where ``player`` can place a disc, ascending."""
    return [cell for cell in range(NUM_CELLS) if is_legal_move(board, player, cell)]


def capture(
    board: np.ndarray,
    player: int,
    index: int,
    direction: int,
    steps: int,
) -> None:
    """
    Recolour ``steps`` opponent discs next to ``index`` in ``direction``.

    The board is modified in place. Meeting an empty or own-coloured cell
    before ``steps`` discs are flipped means the count was wrong.
    """
    row, col = row_col_from_index(index)
    row, col = next_cell(row, col, direction)
    own = player_to_cell(player)

    for _ in range(steps):
        if not on_board(row, col):
            raise InternalConsistencyError(
                f"Capture ran off the board at ({row}, {col})",
                context={"index": index, "direction": Direction(direction).name, "steps": steps},
            )
        cell_index = row * NUM_COLS + col
        if board[cell_index] == CellState.EMPTY or board[cell_index] == own:
            raise InternalConsistencyError(
                f"Cannot capture cell ({row}, {col})",
                context={"index": index, "direction": Direction(direction).name, "steps": steps},
            )
        board[cell_index] = own
        row, col = next_cell(row, col, direction)


def disc_count(board: np.ndarray, player: int) -> int:
    return int(np.sum(board == player_to_cell(player)))


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count discs for each player.

    Args:
        board: Flat board array.

    Returns:
        Tuple of (player0_count, player1_count): Black discs, then White discs.
    """
    return disc_count(board, 0), disc_count(board, 1)
