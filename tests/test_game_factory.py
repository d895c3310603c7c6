"""Tests for the game factory and game-level facts."""

from __future__ import annotations

import pytest

from othello_engine import OthelloError, load_game
from othello_engine.errors import ConfigurationError
from othello_engine.games.othello import OthelloGame, OthelloState


def test_load_game_defaults():
    game = load_game()
    assert isinstance(game, OthelloGame)
    assert game.short_name == "othello"
    assert game.long_name == "Othello"
    assert game.num_players() == 2
    assert game.num_distinct_actions() == 65
    assert game.max_game_length() == 64
    assert game.observation_tensor_shape() == (3, 8, 8)
    assert game.observation_tensor_size() == 192
    assert (game.min_utility(), game.max_utility(), game.utility_sum()) == (-1.0, 1.0, 0.0)
    assert game.parameter_specification() == {}


def test_new_initial_states_are_independent():
    game = load_game("othello")
    first = game.new_initial_state()
    second = game.new_initial_state()
    assert isinstance(first, OthelloState)

    first.apply_action(19)
    assert second == OthelloState()


def test_load_game_missing_entries():
    with pytest.raises(ConfigurationError):
        load_game("chess")
    with pytest.raises(ConfigurationError):
        load_game("othello", board_size=10)
    with pytest.raises(ValueError):
        load_game("connect4")


def test_errors_carry_code_and_context():
    with pytest.raises(OthelloError) as excinfo:
        load_game("chess")
    err = excinfo.value
    assert err.code == "CONFIGURATION_ERROR"
    assert err.to_dict()["message"] == "Unknown game 'chess'"
    assert str(err).startswith("[CONFIGURATION_ERROR] Unknown game 'chess'")
