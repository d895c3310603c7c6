from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

S = TypeVar("S", bound="GameState")
Action = int  # actions are flat integer ids


class GameState(ABC):
    """
    Mutable state of a deterministic two-player game with perfect information.
    Only rules live here: no agents, no rewards shaping, no I/O.
    """

    @abstractmethod
    def current_player(self) -> int:
        """Index (0 or 1) of the player to move."""

    @abstractmethod
    def legal_actions(self) -> Sequence[Action]:
        """All actions available to the player to move, ascending."""

    @abstractmethod
    def apply_action(self, action: Action) -> None:
        """Apply ``action`` for the player to move, in place."""

    @abstractmethod
    def is_terminal(self) -> bool:
        """Whether the game has ended."""

    @abstractmethod
    def returns(self) -> Tuple[float, float]:
        """Utility of each player; all zeros while the game is running."""

    @abstractmethod
    def history(self) -> List[Action]:
        """Actions applied so far, oldest first."""

    @abstractmethod
    def clone(self: S) -> S:
        """Independent deep copy of the state."""

    @abstractmethod
    def action_to_string(self, player: int, action: Action) -> str:
        """Human-readable form of ``action`` taken by ``player``."""

    @abstractmethod
    def observation_string(self, player: int) -> str:
        """Text rendering of the state from ``player``'s point of view."""

    @abstractmethod
    def observation_tensor(self, player: int, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Numeric rendering of the state from ``player``'s point of view."""

    def information_state_string(self, player: int) -> str:
        return ", ".join(str(action) for action in self.history())

    def undo_action(self, player: int, action: Action) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not support undo")

    def player_return(self, player: int) -> float:
        return self.returns()[player]

    def legal_actions_mask(self, num_actions: int) -> np.ndarray:
        mask = np.zeros(num_actions, dtype=bool)
        for action in self.legal_actions():
            mask[action] = True
        return mask


class TurnBasedGame(ABC, Generic[S]):
    """
    Static facts about a game and the entry point for new states.
    """

    short_name: str = ""
    long_name: str = ""

    @abstractmethod
    def new_initial_state(self) -> S:
        """Fresh state at the start of the game."""

    @abstractmethod
    def num_players(self) -> int:
        """Number of players."""

    @abstractmethod
    def num_distinct_actions(self) -> int:
        """Size of the action id space."""

    @abstractmethod
    def observation_tensor_shape(self) -> Tuple[int, ...]:
        """Shape of :meth:`GameState.observation_tensor`."""

    def observation_tensor_size(self) -> int:
        return int(np.prod(self.observation_tensor_shape()))

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> float:
        return 0.0
