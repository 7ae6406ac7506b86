"""Shared test fixtures for tictactoe_history."""

import pytest

from tictactoe_history.game.controller import GameController
from tictactoe_history.game.state import new_game, place_mark


@pytest.fixture
def controller():
    return GameController()


@pytest.fixture
def state():
    return new_game()


@pytest.fixture
def play():
    """Return a helper that places marks at each cell in order."""

    def _play(game_state, cells):
        for cell in cells:
            game_state = place_mark(game_state, cell)
        return game_state

    return _play
