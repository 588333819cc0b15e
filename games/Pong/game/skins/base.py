"""Base class for Pong skins.

Skins handle ALL rendering - the game only manages state. They draw
from FrameSnapshots and never touch the match itself.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict

import pygame

if TYPE_CHECKING:
    from models import Rectangle
    from ..events import FrameSnapshot, Side


class PongSkin(ABC):
    """Base class for game skins (visuals + audio)."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_field(self, screen: pygame.Surface) -> None:
        """Render background and center net.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_frame(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render paddles and ball.

        Args:
            snapshot: State of the frame to draw
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Render the hit counter and scores."""
        pass

    def render_difficulty_menu(
        self,
        buttons: Dict[str, 'Rectangle'],
        screen: pygame.Surface,
    ) -> None:
        """Render the difficulty chooser.

        Args:
            buttons: Difficulty key -> clickable button region
            screen: Pygame surface to draw on
        """
        pass

    def render_paused(self, screen: pygame.Surface) -> None:
        """Render the paused overlay."""
        pass

    def render_result(self, winner: 'Side', screen: pygame.Surface) -> None:
        """Render the end-of-match overlay."""
        pass

    def play_paddle_hit_sound(self) -> None:
        """Play sound when ball hits a paddle."""
        pass

    def play_wall_hit_sound(self) -> None:
        """Play sound when ball hits a wall."""
        pass

    def play_point_sound(self, scorer: 'Side') -> None:
        """Play sound when a point is scored."""
        pass

    def play_match_end_sound(self, winner: 'Side') -> None:
        """Play sound when the match is over."""
        pass
