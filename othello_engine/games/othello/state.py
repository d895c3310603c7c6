"""Othello game state: board, player to move, outcome and history."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Tuple

import numpy as np

from othello_engine.errors import (
    GameOverError,
    InvalidMoveError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from othello_engine.games.turn_based_game import Action, GameState
from .board import (
    NUM_CELLS,
    PASS_ACTION,
    CellState,
    Direction,
    check_player,
    initial_board,
    player_to_cell,
    row_col_from_index,
)
from .observation import action_to_string, encode_tensor, render_text
from .utils import (
    capture,
    count_captured_in_direction,
    count_pieces,
    disc_count,
    is_legal_move,
    legal_regular_actions,
)

logger = logging.getLogger(__name__)

NUM_DISTINCT_ACTIONS = NUM_CELLS + 1

OutcomeKind = Literal["in_progress", "won", "draw"]


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    winner: Optional[int] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls("in_progress")

    @classmethod
    def won_by(cls, player: int) -> "Outcome":
        return cls("won", check_player(player))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls("draw")

    @property
    def is_terminal(self) -> bool:
        return self.kind != "in_progress"


def score_outcome(board: np.ndarray) -> Outcome:
    """Outcome of a finished game: more discs wins, equal counts draw."""
    black, white = count_pieces(board)
    if black > white:
        return Outcome.won_by(0)
    if white > black:
        return Outcome.won_by(1)
    return Outcome.draw()


def no_valid_actions(board: np.ndarray) -> bool:
    return not legal_regular_actions(board, 0) and not legal_regular_actions(board, 1)


class OthelloState(GameState):
    """
    Authoritative Othello position.

    Player 0 always plays Black and moves first; player 1 plays White. The
    state changes only through :meth:`apply_action`. Once both players are
    out of capturing moves the outcome is fixed and the state is terminal.
    """

    def __init__(self) -> None:
        self._board = initial_board()
        self._current_player = 0
        self._outcome = Outcome.in_progress()
        self._history: List[Action] = []

    @classmethod
    def from_board(cls, cells: Sequence[int], current_player: int = 0) -> "OthelloState":
        """
        Build a state from an arbitrary position.

        Args:
            cells: 64 cell values (flat or 8x8) using :class:`CellState` values.
            current_player: Player to move.

        Returns:
            New state with an empty history. It is terminal right away when
            neither player can capture.
        """
        board = np.asarray(cells, dtype=np.int8).reshape(-1).copy()
        if board.size != NUM_CELLS:
            raise ValueError(f"Board must have {NUM_CELLS} cells, got {board.size}")
        if not np.isin(board, [int(cell) for cell in CellState]).all():
            raise ValueError("Board cells must be CellState values")

        state = cls()
        state._board = board
        state._current_player = check_player(current_player)
        if no_valid_actions(board):
            state._outcome = score_outcome(board)
        return state

    # Turn/terminal control

    def current_player(self) -> int:
        return self._current_player

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def winner(self) -> Optional[int]:
        return self._outcome.winner

    def is_terminal(self) -> bool:
        return self._outcome.is_terminal

    def returns(self) -> Tuple[float, float]:
        if self._outcome.winner == 0:
            return 1.0, -1.0
        if self._outcome.winner == 1:
            return -1.0, 1.0
        return 0.0, 0.0

    def player_return(self, player: int) -> float:
        return self.returns()[check_player(player)]

    # Move validation

    def is_legal_move(self, player: int, index: int) -> bool:
        return is_legal_move(self._board, check_player(player), index)

    def legal_regular_actions(self, player: int) -> List[Action]:
        return legal_regular_actions(self._board, check_player(player))

    def legal_actions(self) -> List[Action]:
        if self.is_terminal():
            return []

        moves = legal_regular_actions(self._board, self._current_player)
        if not moves:
            moves.append(PASS_ACTION)
        return moves

    def legal_actions_mask(self, num_actions: int = NUM_DISTINCT_ACTIONS) -> np.ndarray:
        return super().legal_actions_mask(num_actions)

    # Move application

    def apply_action(self, action: Action) -> None:
        if self.is_terminal():
            raise GameOverError(
                f"Cannot apply action {action} in terminal state", context={"action": action}
            )

        action = int(action)
        player = self._current_player

        if action == PASS_ACTION:
            logger.debug("Player %d passes", player)
            self._history.append(action)
            self._current_player = 1 - player
            return

        if action < 0 or action > PASS_ACTION:
            raise OutOfRangeError(f"Action out of range: {action}", context={"action": action})

        if not is_legal_move(self._board, player, action):
            raise InvalidMoveError(
                f"Invalid move {action}", context={"action": action, "player": player}
            )

        # Flips go to a copy so a failed capture leaves the state untouched.
        board = self._board.copy()
        board[action] = player_to_cell(player)
        for direction in Direction:
            steps = count_captured_in_direction(board, player, action, direction)
            if steps > 0:
                capture(board, player, action, direction, steps)

        self._board = board
        self._history.append(action)
        logger.debug("Player %d plays %s", player, self.action_to_string(player, action))

        if no_valid_actions(board):
            self._outcome = score_outcome(board)
            logger.debug("Game over: %s (black=%d, white=%d)", self._outcome, *count_pieces(board))
        else:
            self._current_player = 1 - player

    def undo_action(self, player: int, action: Action) -> None:
        raise UnsupportedOperationError(
            "Undo not implemented for this game.", context={"player": player, "action": action}
        )

    # Board access

    def board(self) -> np.ndarray:
        """Read-only copy of the 64 cells."""
        board = self._board.copy()
        board.flags.writeable = False
        return board

    def cell(self, index: int) -> CellState:
        row_col_from_index(index)
        return CellState(int(self._board[index]))

    def disc_count(self, player: int) -> int:
        return disc_count(self._board, check_player(player))

    def history(self) -> List[Action]:
        return list(self._history)

    def clone(self) -> "OthelloState":
        return copy.deepcopy(self)

    # Rendering

    def action_to_string(self, player: int, action: Action) -> str:
        return action_to_string(player, action)

    def to_string(self) -> str:
        return render_text(self._board, self._current_player)

    def observation_string(self, player: int) -> str:
        return render_text(self._board, check_player(player))

    def information_state_string(self, player: int) -> str:
        check_player(player)
        return super().information_state_string(player)

    def observation_tensor(self, player: int, out: Optional[np.ndarray] = None) -> np.ndarray:
        return encode_tensor(self._board, player, out)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"OthelloState(current_player={self._current_player}, "
            f"outcome={self._outcome}, history={self._history})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OthelloState):
            return NotImplemented
        return (
            np.array_equal(self._board, other._board)
            and self._current_player == other._current_player
            and self._outcome == other._outcome
            and self._history == other._history
        )
