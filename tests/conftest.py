"""Shared fixtures for Othello tests."""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from othello_engine.games.othello import CellState

_SYMBOLS = {".": CellState.EMPTY, "B": CellState.BLACK, "W": CellState.WHITE}


@pytest.fixture
def make_board() -> Callable[..., np.ndarray]:
    """Build a flat board from 8 row strings of '.', 'B' and 'W', top row first."""

    def _make(*rows: str) -> np.ndarray:
        assert len(rows) == 8
        board = np.zeros(64, dtype=np.int8)
        for r, row in enumerate(rows):
            assert len(row) == 8
            for c, symbol in enumerate(row):
                board[r * 8 + c] = _SYMBOLS[symbol]
        return board

    return _make
