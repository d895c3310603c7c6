"""Configuration schema for games and replay runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

import yaml

from othello_engine.errors import ConfigurationError
from othello_engine.games.othello import OthelloGame, load_game

Perspective = Literal["current", "black", "white"]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GameConfig:
    id: str = "othello"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ReplayConfig:
    game: GameConfig = field(default_factory=GameConfig)
    moves: List[str] = field(default_factory=list)
    perspective: Perspective = "current"
    show_boards: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReplayConfig":
        game_data = data.get("game", {})
        if not isinstance(game_data, dict):
            raise ConfigurationError("game must be a mapping")
        game = GameConfig(
            id=str(game_data.get("id", "othello")),
            params=dict(game_data.get("params") or {}),
        )

        moves = data.get("moves", [])
        if isinstance(moves, str):
            moves = moves.split()
        if not isinstance(moves, list):
            raise ConfigurationError(f"moves must be a list, got {type(moves).__name__}")

        perspective = str(data.get("perspective", "current"))
        if perspective not in ("current", "black", "white"):
            raise ConfigurationError(f"Unknown perspective '{perspective}'")

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{log_level}'")

        return cls(
            game=game,
            moves=[str(move) for move in moves],
            perspective=perspective,  # type: ignore[arg-type]
            show_boards=bool(data.get("show_boards", True)),
            log_level=log_level,
        )


def load_config(path: Union[str, Path]) -> ReplayConfig:
    """Load ReplayConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a YAML mapping, got {type(data)}")
    return ReplayConfig.from_dict(data)


def make_game_from_config(cfg: Optional[GameConfig] = None) -> OthelloGame:
    cfg = cfg or GameConfig()
    return load_game(cfg.id, **cfg.params)
