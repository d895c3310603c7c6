"""Othello game facts and factory (no global registry)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from othello_engine.errors import ConfigurationError
from othello_engine.games.turn_based_game import TurnBasedGame
from .board import NUM_CELLS, NUM_PLAYERS
from .observation import OBSERVATION_SHAPE
from .state import NUM_DISTINCT_ACTIONS, OthelloState

logger = logging.getLogger(__name__)


class OthelloGame(TurnBasedGame[OthelloState]):
    """
    Static description of Othello: sequential, deterministic, perfect
    information, zero-sum, two players, terminal rewards only.
    """

    short_name = "othello"
    long_name = "Othello"

    def __init__(self, params: Optional[Dict[str, Any]] = None) -> None:
        params = dict(params or {})
        unknown = sorted(set(params) - set(self.parameter_specification()))
        if unknown:
            raise ConfigurationError(
                f"Unknown parameter(s) for {self.short_name}: {', '.join(unknown)}",
                context={"game": self.short_name},
            )
        self.params = params

    @staticmethod
    def parameter_specification() -> Dict[str, Any]:
        return {}

    def new_initial_state(self) -> OthelloState:
        return OthelloState()

    def num_players(self) -> int:
        return NUM_PLAYERS

    def num_distinct_actions(self) -> int:
        return NUM_DISTINCT_ACTIONS

    def max_game_length(self) -> int:
        return NUM_CELLS

    def observation_tensor_shape(self) -> Tuple[int, ...]:
        return OBSERVATION_SHAPE

    def __repr__(self) -> str:
        return f"{self.short_name}()"


def load_game(name: str = OthelloGame.short_name, **params: Any) -> OthelloGame:
    """
    Build a game by short name.

    Args:
        name: Game short name; only ``"othello"`` is known.
        **params: Game parameters (Othello takes none).

    Returns:
        New game instance.
    """
    if name != OthelloGame.short_name:
        raise ConfigurationError(f"Unknown game '{name}'", context={"known": OthelloGame.short_name})
    logger.debug("Loading game %s with params %s", name, params)
    return OthelloGame(params)
