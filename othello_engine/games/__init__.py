from __future__ import annotations

from .turn_based_game import Action, GameState, TurnBasedGame

__all__ = ["Action", "GameState", "TurnBasedGame"]
