"""Config package exports."""

from .schema import GameConfig, ReplayConfig, load_config, make_game_from_config

__all__ = [
    "GameConfig",
    "ReplayConfig",
    "load_config",
    "make_game_from_config",
]
