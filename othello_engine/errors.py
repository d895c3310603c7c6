"""
Othello engine error hierarchy.

Every fault raised by the rules engine derives from :class:`OthelloError`,
so a harness can catch the whole family at once. Each class also derives
from the matching builtin (``ValueError``, ``RuntimeError``,
``NotImplementedError``) so callers that only know the builtins keep working.

Usage:
    from othello_engine.errors import InvalidMoveError

    try:
        state.apply_action(action)
    except InvalidMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ConfigurationError",
    "GameOverError",
    "InternalConsistencyError",
    "InvalidDirectionError",
    "InvalidMoveError",
    "InvalidPlayerError",
    "OthelloError",
    "OutOfRangeError",
    "UnsupportedOperationError",
]


class OthelloError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "OTHELLO_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class OutOfRangeError(OthelloError, ValueError):
    """Cell or action index outside the board."""
    code: str = "OUT_OF_RANGE"


class InvalidMoveError(OthelloError, ValueError):
    """Move that cannot be applied to the current state.

    Raised for a placement on an occupied cell, or on an empty cell that
    captures nothing in any direction.
    """
    code: str = "INVALID_MOVE"


class GameOverError(InvalidMoveError):
    """Action applied after the game has ended."""
    code: str = "GAME_OVER"


class InvalidPlayerError(OthelloError, ValueError):
    """Player id outside {0, 1}."""
    code: str = "INVALID_PLAYER"


class InvalidDirectionError(OthelloError, ValueError):
    """Direction outside the eight board directions (programming error)."""
    code: str = "INVALID_DIRECTION"


class ConfigurationError(OthelloError, ValueError):
    """Unknown game name, unknown parameter or malformed config file."""
    code: str = "CONFIGURATION_ERROR"


class UnsupportedOperationError(OthelloError, NotImplementedError):
    """Operation the engine deliberately does not provide."""
    code: str = "UNSUPPORTED_OPERATION"


class InternalConsistencyError(OthelloError, RuntimeError):
    """Engine invariant broken.

    Raised when a capture run being flipped does not match the count the
    capture detector reported. Never expected with a correct engine.
    """
    code: str = "INTERNAL_CONSISTENCY"
