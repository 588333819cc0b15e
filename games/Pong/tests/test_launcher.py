"""Tests for the standalone launcher's argument parsing and key handling."""

import pygame
import pytest

from games.Pong.game.events import MatchPhase
from games.Pong.game.match import Match
from games.Pong.game_mode import PongMode
from games.Pong.main import build_parser, handle_key


@pytest.fixture
def game(geometry, centered_rng):
    return PongMode(match=Match(geometry=geometry, rng=centered_rng))


class TestParser:
    """CLI built from the game's arguments."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.difficulty is None
        assert args.seed is None
        assert args.skin == 'classic'
        assert args.log_level == 'INFO'

    def test_game_options(self):
        args = build_parser().parse_args(['--difficulty', 'hard', '--seed', '9', '--log-level', 'DEBUG'])
        assert args.difficulty == 'hard'
        assert args.seed == 9
        assert args.log_level == 'DEBUG'

    def test_rejects_unknown_difficulty(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--difficulty', 'insane'])


class TestKeys:
    """Keyboard shortcuts."""

    def test_escape_quits(self, game):
        assert handle_key(game, pygame.K_ESCAPE) is False

    def test_number_keys_pick_difficulty(self, game):
        assert handle_key(game, pygame.K_2)
        assert game.match.state.profile.name == 'medium'

    def test_number_keys_ignored_mid_match(self, game):
        handle_key(game, pygame.K_3)
        handle_key(game, pygame.K_1)
        assert game.match.state.profile.name == 'hard'

    def test_p_toggles_pause(self, game):
        handle_key(game, pygame.K_1)
        handle_key(game, pygame.K_p)
        assert game.phase == MatchPhase.PAUSED
        handle_key(game, pygame.K_p)
        assert game.phase == MatchPhase.RUNNING

    def test_r_returns_to_menu(self, game):
        handle_key(game, pygame.K_1)
        handle_key(game, pygame.K_r)
        assert game.phase == MatchPhase.IDLE
