"""Game contract for the Rally platform.

A launcher only ever talks to a game through this class: it builds the
command line from ARGUMENTS, forwards input events, calls update/render
once per frame and reads the platform-level `state`.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from rally.games.game_state import GameState


class BaseGame(ABC):
    """Abstract base for Rally games.

    Metadata lives in class attributes so launchers can describe a game
    without instantiating it:

        NAME, DESCRIPTION, VERSION, AUTHOR: shown in menus and --help
        ARGUMENTS: argparse definitions, one dict per option with keys
            name, type, default, help and optionally choices/action

    A game maps its own phases onto GameState in _get_internal_state()
    and implements get_score, handle_input, update and render. reset()
    and the controller actions are optional.
    """

    NAME: str = "Untitled"
    DESCRIPTION: str = ""
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    ARGUMENTS: List[Dict[str, Any]] = []

    # Options every game accepts
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--log-level',
            'type': str,
            'default': 'INFO',
            'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Console log level'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Game options followed by the platform options.

        A game may redeclare a platform option; its own definition wins
        and the platform one is dropped.
        """
        merged: Dict[str, Dict[str, Any]] = {}
        for arg in cls.ARGUMENTS + cls._BASE_ARGUMENTS:
            name = arg.get('name')
            if name:
                merged.setdefault(name, arg)
        return list(merged.values())

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Describe the game for launchers."""
        return dict(
            name=cls.NAME,
            description=cls.DESCRIPTION,
            version=cls.VERSION,
            author=cls.AUTHOR,
            arguments=cls.get_arguments(),
        )

    @property
    def state(self) -> GameState:
        """Platform-level state, derived from _get_internal_state()."""
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Translate the game's own phase into a GameState."""

    @abstractmethod
    def get_score(self) -> int:
        """Score shown by launchers."""

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Consume this frame's InputEvents."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the game by one frame.

        Args:
            dt: Seconds since the previous frame
        """

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Draw the current frame onto screen."""

    def reset(self) -> None:
        """Go back to the game's starting point. No-op by default."""

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Actions a controller may offer right now.

        Each action is a dict with 'id', 'label' and a 'style' hint
        ('primary', 'secondary' or 'danger'). None by default.
        """
        return []

    def execute_action(self, action_id: str) -> bool:
        """Run a controller action.

        Returns:
            Whether the action was accepted
        """
        return False
