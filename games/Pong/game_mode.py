"""Pong - player paddle against a scripted opponent.

Features:
- Three difficulty tiers (easy, medium, hard) chosen from an in-game menu
- Player paddle follows the pointer, opponent tracks the ball
- First side to the win score takes the match

The match core lives in game/match.py; this module wires it to the
platform input events, the skin and the controller actions.
"""

from typing import Any, Dict, List, Optional

import pygame

from models import Rectangle
from rally.games import BaseGame, GameState
from rally.games.input import InputEvent, InputEventType
from rally.logging import get_logger

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, FieldGeometry
from .difficulty import get_difficulty_names
from .game.events import FrameSnapshot, MatchEnded, MatchEvent, MatchPhase, PointScored, Side
from .game.match import Match
from .game.random_source import create_random_source
from .game.skins import ClassicSkin, PongSkin

log = get_logger('pong_mode')

MENU_BUTTON_WIDTH = 180.0
MENU_BUTTON_HEIGHT = 56.0
MENU_BUTTON_GAP = 24.0


class PongMode(BaseGame):
    """Pong game mode.

    Internal phases map to the platform states: the difficulty menu and
    running rallies are PLAYING, a stopped match is PAUSED, and a
    finished match is WON or GAME_OVER depending on who won.
    """

    # Game metadata
    NAME = "Pong"
    DESCRIPTION = "Beat the computer paddle to three points."
    VERSION = "1.0.0"
    AUTHOR = "Rally Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--difficulty',
            'type': str,
            'default': None,
            'choices': get_difficulty_names(),
            'help': 'Start straight into a match at this difficulty (default: show menu)'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible serves and opponent aim'
        },
        {
            'name': '--skin',
            'type': str,
            'default': 'classic',
            'choices': ['classic'],
            'help': 'Visual skin'
        },
    ]

    # Skin registry
    SKINS: Dict[str, type] = {
        'classic': ClassicSkin,
    }

    def __init__(
        self,
        difficulty: Optional[str] = None,
        seed: Optional[int] = None,
        skin: str = 'classic',
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        match: Optional[Match] = None,
        **kwargs,
    ):
        """Initialize Pong.

        Args:
            difficulty: Start a match immediately at this tier
            seed: Random seed (None = unseeded)
            skin: Visual skin to use
            width: Screen width
            height: Screen height
            match: Pre-built match (tests inject one with a fixed random source)
            **kwargs: Unused launcher options (log level, etc.)
        """
        self._screen_width = width
        self._screen_height = height

        if match is None:
            match = Match(
                geometry=FieldGeometry.from_screen(width, height),
                rng=create_random_source(seed),
            )
        self._match = match
        self._match.add_listener(self._on_match_event)

        skin_class = self.SKINS.get(skin, ClassicSkin)
        self._skin: PongSkin = skin_class()

        self._last_result: Optional[MatchEnded] = None

        if difficulty is not None:
            self.start_match(difficulty)

    # =========================================================================
    # Match control
    # =========================================================================

    @property
    def match(self) -> Match:
        """The underlying match core."""
        return self._match

    @property
    def phase(self) -> MatchPhase:
        """Internal match phase."""
        return self._match.phase

    @property
    def last_result(self) -> Optional[MatchEnded]:
        """Result of the most recently finished match."""
        return self._last_result

    def start_match(self, difficulty: str) -> None:
        """Start a new match, discarding any match in progress.

        Raises:
            UnknownDifficultyError: If difficulty is not a known tier
        """
        log.info("Difficulty selected: %s", difficulty)
        self._match.start(difficulty)
        self._last_result = None

    def stop_match(self) -> None:
        """Pause the running match without resetting it."""
        self._match.stop()

    def resume_match(self) -> None:
        """Continue a paused match."""
        self._match.resume()

    def snapshot(self) -> FrameSnapshot:
        """Renderable state of the current frame."""
        return self._match.snapshot()

    def difficulty_buttons(self) -> Dict[str, Rectangle]:
        """Clickable regions of the difficulty menu, keyed by difficulty."""
        names = get_difficulty_names()
        total_width = len(names) * MENU_BUTTON_WIDTH + (len(names) - 1) * MENU_BUTTON_GAP
        start_x = (self._screen_width - total_width) / 2
        y = (self._screen_height - MENU_BUTTON_HEIGHT) / 2

        return {
            name: Rectangle(
                x=start_x + i * (MENU_BUTTON_WIDTH + MENU_BUTTON_GAP),
                y=y,
                width=MENU_BUTTON_WIDTH,
                height=MENU_BUTTON_HEIGHT,
            )
            for i, name in enumerate(names)
        }

    def _on_match_event(self, event: MatchEvent) -> None:
        if isinstance(event, PointScored):
            self._skin.play_point_sound(event.side)
        elif isinstance(event, MatchEnded):
            self._last_result = event
            self._skin.play_match_end_sound(event.winner)

    # =========================================================================
    # BaseGame interface
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        """Map match phase to the standard game state."""
        phase = self._match.phase
        if phase == MatchPhase.PAUSED:
            return GameState.PAUSED
        if phase == MatchPhase.ENDED:
            if self._match.state.winner == Side.PLAYER:
                return GameState.WON
            return GameState.GAME_OVER
        return GameState.PLAYING

    def get_score(self) -> int:
        """Get the player's points."""
        return self._match.state.player_score

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events.

        - Menu: a click on a difficulty button starts a match
        - Running: pointer movement drives the player paddle
        - Paused: a click resumes
        - Ended: a click returns to the menu

        Args:
            events: List of input events
        """
        for event in events:
            phase = self._match.phase

            if phase == MatchPhase.RUNNING:
                if event.event_type == InputEventType.MOVE:
                    self._match.set_player_target(event.position.y)

            elif event.event_type != InputEventType.SELECT:
                continue

            elif phase == MatchPhase.IDLE:
                for name, button in self.difficulty_buttons().items():
                    if button.contains_point(event.position):
                        self.start_match(name)
                        break

            elif phase == MatchPhase.PAUSED:
                self.resume_match()

            elif phase == MatchPhase.ENDED:
                self.reset()

    def update(self, dt: float) -> None:
        """Run one simulation tick.

        The simulation advances by ticks, not by elapsed time, so dt is
        not used: one call is one tick.

        Args:
            dt: Delta time in seconds (ignored)
        """
        result = self._match.tick()

        if result.wall_bounce:
            self._skin.play_wall_hit_sound()
        if result.paddle_hit is not None:
            self._skin.play_paddle_hit_sound()

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render_field(screen)

        phase = self._match.phase
        if phase == MatchPhase.IDLE:
            self._skin.render_difficulty_menu(self.difficulty_buttons(), screen)
            return

        snapshot = self._match.snapshot()
        self._skin.render_frame(snapshot, screen)
        self._skin.render_hud(snapshot, screen)

        if phase == MatchPhase.PAUSED:
            self._skin.render_paused(screen)
        elif phase == MatchPhase.ENDED and snapshot.winner is not None:
            self._skin.render_result(snapshot.winner, screen)

    def reset(self) -> None:
        """Return to the difficulty menu with a fresh match."""
        super().reset()
        self._match.reset()
        log.info("Back to difficulty menu")

    # =========================================================================
    # Controller actions
    # =========================================================================

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Get actions for the current phase."""
        phase = self._match.phase
        if phase == MatchPhase.IDLE:
            return [
                {'id': f'start_{name}', 'label': name.capitalize(), 'style': 'primary'}
                for name in get_difficulty_names()
            ]
        if phase == MatchPhase.RUNNING:
            return [{'id': 'pause', 'label': 'Pause', 'style': 'secondary'}]
        if phase == MatchPhase.PAUSED:
            return [
                {'id': 'resume', 'label': 'Resume', 'style': 'primary'},
                {'id': 'quit_match', 'label': 'Quit Match', 'style': 'danger'},
            ]
        return [{'id': 'play_again', 'label': 'Play Again', 'style': 'primary'}]

    def execute_action(self, action_id: str) -> bool:
        """Execute a controller action by ID.

        Args:
            action_id: One of the ids from get_available_actions()

        Returns:
            True if the action was handled
        """
        available = {action['id'] for action in self.get_available_actions()}
        if action_id not in available:
            return False

        log.debug("Action: %s", action_id)
        if action_id.startswith('start_'):
            self.start_match(action_id[len('start_'):])
        elif action_id == 'pause':
            self.stop_match()
        elif action_id == 'resume':
            self.resume_match()
        elif action_id in ('play_again', 'quit_match'):
            self.reset()
        return True
