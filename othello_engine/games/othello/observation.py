"""Text and tensor renderings of an Othello board from one player's view."""

from __future__ import annotations

import re
from typing import Optional

import numpy as np

from othello_engine.errors import OutOfRangeError
from .board import (
    NUM_CELL_STATES,
    NUM_CELLS,
    NUM_COLS,
    NUM_ROWS,
    PASS_ACTION,
    CellState,
    check_player,
    index_from_row_col,
    player_to_cell,
    row_col_from_index,
)

OBSERVATION_SHAPE = (NUM_CELL_STATES, NUM_ROWS, NUM_COLS)
OBSERVATION_SIZE = NUM_CELL_STATES * NUM_CELLS

EMPTY_GLYPH = "-"
OWN_GLYPH = "x"
OPPONENT_GLYPH = "o"
COL_LABELS = "  " + " ".join(chr(ord("a") + col) for col in range(NUM_COLS)) + "  "

# Plane of each CellState value in player 1's view: Black and White swap.
_PLAYER1_PLANES = np.array(
    [CellState.EMPTY, CellState.BLACK, CellState.WHITE], dtype=np.intp
)

_ACTION_PATTERN = re.compile(r"([a-h])([1-8])(?:\s*\([xo]\))?")


def cell_glyph(player: int, cell: int) -> str:
    """Glyph of ``cell`` as seen by ``player``: own discs are x, the opponent's o."""
    if cell == CellState.EMPTY:
        return EMPTY_GLYPH
    if cell == player_to_cell(player):
        return OWN_GLYPH
    return OPPONENT_GLYPH


def cell_name(index: int) -> str:
    row, col = row_col_from_index(index)
    return f"{chr(ord('a') + col)}{chr(ord('1') + row)}"


def render_text(board: np.ndarray, player: int) -> str:
    """
    Render the board as an 8x8 grid with a-h / 1-8 labels on every side.

    Args:
        board: Flat board array of 64 cells.
        player: Viewing player (0 or 1), which decides the x / o glyphs.

    Returns:
        Multi-line board string.
    """
    player = check_player(player)
    lines = [COL_LABELS]
    for row in range(NUM_ROWS):
        label = chr(ord("1") + row)
        cells = "".join(
            cell_glyph(player, board[row * NUM_COLS + col]) + " " for col in range(NUM_COLS)
        )
        lines.append(f"{label} {cells}{label}")
    lines.append(COL_LABELS)
    return "\n".join(lines)


def encode_tensor(
    board: np.ndarray,
    player: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    One-hot encode the board into 3 planes of 64 cells.

    Player 0 sees Empty / White / Black on planes 0 / 1 / 2; player 1 sees
    Empty / Black / White. Every plane is zeroed before writing.

    Args:
        board: Flat board array of 64 cells.
        player: Viewing player (0 or 1).
        out: Optional C-contiguous buffer of exactly 192 cells, filled in place.

    Returns:
        The filled buffer, or a new float32 array of shape (3, 8, 8).
    """
    player = check_player(player)

    if out is None:
        out = np.zeros(OBSERVATION_SHAPE, dtype=np.float32)
    else:
        if out.size != OBSERVATION_SIZE:
            raise ValueError(
                f"Observation buffer must hold {OBSERVATION_SIZE} values, got {out.size}"
            )
        if not out.flags.c_contiguous:
            raise ValueError("Observation buffer must be C-contiguous")
        out.fill(0)

    view = out.reshape(NUM_CELL_STATES, NUM_CELLS)
    planes = board.astype(np.intp)
    if player == 1:
        planes = _PLAYER1_PLANES[planes]
    view[planes, np.arange(NUM_CELLS)] = 1
    return out


def action_to_string(player: int, action: int) -> str:
    """
    Format an action: ``"d3 (x)"`` for a placement, ``"x(pass)"`` for a pass.

    The glyph is the mover's own glyph from the mover's point of view.
    """
    glyph = cell_glyph(player, player_to_cell(player))
    if action == PASS_ACTION:
        return f"{glyph}(pass)"
    return f"{cell_name(action)} ({glyph})"


def string_to_action(player: int, text: str) -> int:
    """
    Parse a coordinate such as ``"d3"`` or ``"d3 (x)"``, or ``"pass"``.

    Args:
        player: Player the action belongs to.
        text: Action text, case-insensitive.

    Returns:
        Flat cell index, or the pass action.
    """
    check_player(player)
    text = text.strip().lower()
    if text == "pass" or text.endswith("(pass)"):
        return PASS_ACTION

    match = _ACTION_PATTERN.fullmatch(text)
    if match is None:
        raise OutOfRangeError(f"Cannot parse action {text!r}", context={"text": text})
    col = ord(match.group(1)) - ord("a")
    row = int(match.group(2)) - 1
    return index_from_row_col(row, col)
