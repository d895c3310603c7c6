"""Othello/Reversi rule engine."""

from .errors import OthelloError
from .games.othello import (
    PASS_ACTION,
    CellState,
    OthelloGame,
    OthelloState,
    Outcome,
    load_game,
)

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "OthelloError",
    "OthelloGame",
    "OthelloState",
    "Outcome",
    "PASS_ACTION",
    "load_game",
]
