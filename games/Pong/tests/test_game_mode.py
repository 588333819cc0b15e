"""Tests for PongMode: platform states, input, actions and rendering."""

import pygame
import pytest

from models import Vector2D
from rally.games import GameState
from rally.games.input import InputEvent, InputEventType

from games.Pong.difficulty import UnknownDifficultyError
from games.Pong.game.events import MatchPhase, Side
from games.Pong.game.match import Match
from games.Pong.game.skins import ClassicSkin
from games.Pong.game_info import get_game_mode
from games.Pong.game_mode import PongMode


class RecordingSkin(ClassicSkin):
    """Classic skin that records sound hook calls."""

    NAME = "recording"

    def __init__(self):
        super().__init__()
        self.sounds = []

    def play_paddle_hit_sound(self):
        self.sounds.append('paddle')

    def play_wall_hit_sound(self):
        self.sounds.append('wall')

    def play_point_sound(self, scorer):
        self.sounds.append(('point', scorer))

    def play_match_end_sound(self, winner):
        self.sounds.append(('end', winner))


def click(x, y):
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=0.0, event_type=InputEventType.SELECT)


def move(x, y):
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=0.0, event_type=InputEventType.MOVE)


@pytest.fixture
def game(geometry, centered_rng):
    """PongMode on the difficulty menu with a deterministic match."""
    return PongMode(width=800, height=500, match=Match(geometry=geometry, rng=centered_rng))


def finish_match(game, winner):
    """Drive the match to a win for the given side."""
    state = game.match.state
    ball = game.match.ball
    if winner == Side.PLAYER:
        state.player_score = 2
        ball.set_position(789.0, 50.0)
        ball.set_velocity(6.0, 0.0)
    else:
        state.opponent_score = 2
        ball.set_position(11.0, 50.0)
        ball.set_velocity(-6.0, 0.0)
    game.update(1 / 60)


class TestMetadata:
    """Class-level game info."""

    def test_arguments_include_difficulty_and_log_level(self):
        names = [arg['name'] for arg in PongMode.get_arguments()]
        assert names[0] == '--difficulty'
        assert '--seed' in names
        assert '--log-level' in names

    def test_difficulty_choices(self):
        arg = PongMode.get_arguments()[0]
        assert arg['choices'] == ['easy', 'medium', 'hard']

    def test_get_info(self):
        info = PongMode.get_info()
        assert info['name'] == "Pong"
        assert info['arguments'] == PongMode.get_arguments()

    def test_factory_builds_mode(self):
        """game_info factory passes options through."""
        game = get_game_mode(difficulty='hard', seed=1)
        assert isinstance(game, PongMode)
        assert game.phase == MatchPhase.RUNNING


class TestConstruction:
    """Constructor options."""

    def test_starts_on_menu(self, game):
        assert game.phase == MatchPhase.IDLE
        assert game.state == GameState.PLAYING
        assert game.get_score() == 0

    def test_difficulty_starts_match(self):
        game = PongMode(difficulty='easy', seed=3)
        assert game.phase == MatchPhase.RUNNING
        assert game.match.state.profile.name == 'easy'

    def test_unknown_difficulty_raises(self):
        with pytest.raises(UnknownDifficultyError):
            PongMode(difficulty='extreme')

    def test_seed_is_reproducible(self):
        """Same seed, same serve."""
        first = PongMode(difficulty='medium', seed=42)
        second = PongMode(difficulty='medium', seed=42)
        assert first.match.ball.vx == second.match.ball.vx
        assert first.match.ball.vy == second.match.ball.vy

    def test_unknown_skin_falls_back_to_classic(self):
        game = PongMode(skin='neon')
        assert isinstance(game._skin, ClassicSkin)


class TestStateMapping:
    """Internal phases map to platform states."""

    def test_paused(self, game):
        game.start_match('medium')
        game.stop_match()
        assert game.state == GameState.PAUSED

    def test_won(self, game):
        game.start_match('medium')
        finish_match(game, Side.PLAYER)
        assert game.state == GameState.WON
        assert game.get_score() == 3
        assert game.last_result.winner == Side.PLAYER

    def test_lost(self, game):
        game.start_match('medium')
        finish_match(game, Side.OPPONENT)
        assert game.state == GameState.GAME_OVER
        assert game.last_result.difficulty == 'medium'


class TestInput:
    """Pointer events."""

    def test_click_difficulty_button(self, game):
        """Clicking a menu button starts that tier."""
        center = game.difficulty_buttons()['hard'].center
        game.handle_input([click(center.x, center.y)])
        assert game.phase == MatchPhase.RUNNING
        assert game.match.state.profile.name == 'hard'

    def test_click_outside_buttons(self, game):
        game.handle_input([click(5.0, 5.0)])
        assert game.phase == MatchPhase.IDLE

    def test_move_on_menu_is_ignored(self, game):
        y = game.match.player.y
        game.handle_input([move(100.0, 20.0)])
        assert game.match.player.y == y

    def test_move_drives_paddle(self, game):
        game.start_match('medium')
        game.handle_input([move(100.0, 120.0)])
        assert game.match.player.center_y == 120.0

    def test_latest_move_wins(self, game):
        game.start_match('medium')
        game.handle_input([move(0.0, 100.0), move(0.0, 300.0)])
        assert game.match.player.center_y == 300.0

    def test_move_while_paused_is_ignored(self, game):
        game.start_match('medium')
        game.stop_match()
        y = game.match.player.y
        game.handle_input([move(0.0, 60.0)])
        assert game.match.player.y == y

    def test_click_resumes(self, game):
        game.start_match('medium')
        game.stop_match()
        game.handle_input([click(1.0, 1.0)])
        assert game.phase == MatchPhase.RUNNING

    def test_click_after_match_returns_to_menu(self, game):
        game.start_match('medium')
        finish_match(game, Side.OPPONENT)
        game.handle_input([click(400.0, 250.0)])
        assert game.phase == MatchPhase.IDLE
        assert game.match.state.opponent_score == 0

    def test_menu_buttons_do_not_overlap(self, game):
        buttons = list(game.difficulty_buttons().values())
        assert len(buttons) == 3
        for left, right in zip(buttons, buttons[1:]):
            assert left.right < right.x
        assert buttons[0].x >= 0
        assert buttons[-1].right <= 800


class TestUpdate:
    """One update is one tick."""

    def test_update_moves_ball_one_tick(self, game):
        game.start_match('medium')
        x, vx = game.match.ball.x, game.match.ball.vx
        game.update(0.5)
        assert game.match.ball.x == pytest.approx(x + vx)

    def test_update_on_menu_does_nothing(self, game):
        game.update(1 / 60)
        assert game.match.ticks == 0

    def test_sound_hooks(self, monkeypatch, geometry, centered_rng):
        """Skins hear paddle hits, points and the match end."""
        monkeypatch.setitem(PongMode.SKINS, 'recording', RecordingSkin)
        game = PongMode(skin='recording', match=Match(geometry=geometry, rng=centered_rng))
        skin = game._skin
        game.start_match('easy')

        game.match.ball.set_position(45.0, 250.0)
        game.match.ball.set_velocity(-4.0, 0.0)
        game.update(1 / 60)
        assert skin.sounds == ['paddle']

        finish_match(game, Side.PLAYER)
        assert skin.sounds[1:] == [('point', Side.PLAYER), ('end', Side.PLAYER)]


class TestActions:
    """Controller actions."""

    def test_menu_actions(self, game):
        ids = [a['id'] for a in game.get_available_actions()]
        assert ids == ['start_easy', 'start_medium', 'start_hard']

    def test_start_action(self, game):
        assert game.execute_action('start_medium')
        assert game.phase == MatchPhase.RUNNING
        assert [a['id'] for a in game.get_available_actions()] == ['pause']

    def test_unavailable_action_rejected(self, game):
        assert not game.execute_action('pause')
        assert not game.execute_action('start_impossible')
        assert game.phase == MatchPhase.IDLE

    def test_pause_resume_quit(self, game):
        game.execute_action('start_hard')
        assert game.execute_action('pause')
        assert game.phase == MatchPhase.PAUSED
        assert game.execute_action('resume')
        assert game.phase == MatchPhase.RUNNING
        game.execute_action('pause')
        assert game.execute_action('quit_match')
        assert game.phase == MatchPhase.IDLE

    def test_play_again(self, game):
        game.execute_action('start_easy')
        finish_match(game, Side.PLAYER)
        assert [a['id'] for a in game.get_available_actions()] == ['play_again']
        assert game.execute_action('play_again')
        assert game.phase == MatchPhase.IDLE


class TestRender:
    """Smoke tests on an off-screen surface."""

    @pytest.fixture
    def screen(self):
        pygame.init()
        yield pygame.Surface((800, 500))
        pygame.quit()

    def test_render_menu(self, game, screen):
        game.render(screen)
        assert tuple(screen.get_at((5, 5)))[:3] == (17, 17, 17)

    def test_render_running_and_paused(self, game, screen):
        game.start_match('medium')
        game.update(1 / 60)
        game.render(screen)
        game.stop_match()
        game.render(screen)

    def test_render_result(self, game, screen):
        game.start_match('medium')
        finish_match(game, Side.OPPONENT)
        game.render(screen)
