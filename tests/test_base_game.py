"""Tests for the BaseGame interface."""

from typing import List

import pytest

from rally.games import BaseGame, GameState


class DummyGame(BaseGame):
    """Minimal concrete game."""

    NAME = "Dummy"
    DESCRIPTION = "Does nothing"
    ARGUMENTS = [
        {'name': '--speed', 'type': int, 'default': 1, 'help': 'Speed'},
        {'name': '--log-level', 'type': str, 'default': 'DEBUG', 'help': 'Override'},
    ]

    def __init__(self):
        self.game_over = False

    def _get_internal_state(self) -> GameState:
        return GameState.GAME_OVER if self.game_over else GameState.PLAYING

    def get_score(self) -> int:
        return 0

    def handle_input(self, events: List) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, screen) -> None:
        pass


class TestBaseGame:
    """Metadata and defaults."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseGame()

    def test_game_arguments_take_precedence(self):
        """Game arguments come first and shadow base ones by name."""
        args = DummyGame.get_arguments()
        assert [a['name'] for a in args] == ['--speed', '--log-level']
        assert args[1]['default'] == 'DEBUG'

    def test_base_arguments_added(self):
        names = [a['name'] for a in BaseGame.get_arguments()]
        assert names == ['--log-level']

    def test_get_info(self):
        info = DummyGame.get_info()
        assert info['name'] == "Dummy"
        assert info['version'] == "1.0.0"

    def test_state_uses_internal_state(self):
        game = DummyGame()
        assert game.state == GameState.PLAYING
        game.game_over = True
        assert game.state == GameState.GAME_OVER

    def test_default_actions(self):
        game = DummyGame()
        assert game.get_available_actions() == []
        assert game.execute_action('anything') is False
