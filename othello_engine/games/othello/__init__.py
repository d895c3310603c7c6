"""Othello game package."""

from .board import PASS_ACTION, CellState, Direction
from .game import OthelloGame, load_game
from .observation import action_to_string, string_to_action
from .state import Outcome, OthelloState

__all__ = [
    "CellState",
    "Direction",
    "OthelloGame",
    "OthelloState",
    "Outcome",
    "PASS_ACTION",
    "action_to_string",
    "load_game",
    "string_to_action",
]
