"""Replay an Othello game in the console, one board per move."""

import logging
import sys
from typing import Literal, Optional, Tuple

import tyro

from othello_engine.config import ReplayConfig, load_config, make_game_from_config
from othello_engine.errors import OthelloError
from othello_engine.games.othello import OthelloState, string_to_action

logger = logging.getLogger(__name__)


def _render(state: OthelloState, perspective: str) -> str:
    if perspective == "black":
        return state.observation_string(0)
    if perspective == "white":
        return state.observation_string(1)
    return state.to_string()


def _describe_result(state: OthelloState) -> str:
    black = state.disc_count(0)
    white = state.disc_count(1)
    if not state.is_terminal():
        return f"Black: {black}, White: {white} (game in progress)"
    if state.winner == 0:
        verdict = "Black wins!"
    elif state.winner == 1:
        verdict = "White wins!"
    else:
        verdict = "Draw!"
    return f"Black: {black}, White: {white}. {verdict}"


def replay(
    moves: Tuple[str, ...] = (),
    config: Optional[str] = None,
    perspective: Literal["current", "black", "white"] = "current",
    show_boards: bool = True,
    log_level: str = "WARNING",
) -> OthelloState:
    """
    Replay a move list and print the board after every move.

    Args:
        moves: Moves as coordinates (e.g. d3 c5 f6), "pass" for a pass
        config: Optional YAML replay config; moves given here replace its moves
        perspective: Whose glyphs to print: the player to move, black or white
        show_boards: Print the board after each move
        log_level: Logging level for the engine
    """
    if config is not None:
        cfg = load_config(config)
        if moves:
            cfg.moves = list(moves)
    else:
        cfg = ReplayConfig.from_dict(
            {
                "moves": list(moves),
                "perspective": perspective,
                "show_boards": show_boards,
                "log_level": log_level,
            }
        )

    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    game = make_game_from_config(cfg.game)
    state = game.new_initial_state()

    print("=" * 19)
    print(f"{game.long_name} replay ({len(cfg.moves)} moves)")
    print("=" * 19)
    if cfg.show_boards:
        print(_render(state, cfg.perspective))
        print()

    for ply, text in enumerate(cfg.moves, start=1):
        player = state.current_player()
        try:
            action = string_to_action(player, text)
            state.apply_action(action)
        except OthelloError as e:
            logger.error("Move %d (%s) rejected: %s", ply, text, e)
            print(f"Error: move {ply} ({text}) rejected: {e.message}")
            sys.exit(1)

        print(f"Move {ply}: {state.action_to_string(player, action)} by {'black' if player == 0 else 'white'}")
        if cfg.show_boards:
            print(_render(state, cfg.perspective))
            print()

    print(_describe_result(state))
    print(f"Returns: {state.returns()}")
    return state


def main() -> None:
    tyro.cli(replay)


if __name__ == "__main__":
    main()
