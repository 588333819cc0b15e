"""Classic skin - dark table, dashed net, blue player and red opponent."""

from typing import TYPE_CHECKING, Dict, Optional

import pygame

from .base import PongSkin
from ..events import Side
from ...config import (
    BACKGROUND_COLOR, BALL_COLOR, DEFEAT_COLOR, HUD_COLOR, NET_COLOR,
    OPPONENT_COLOR, PLAYER_COLOR, VICTORY_COLOR,
)

if TYPE_CHECKING:
    from models import Rectangle
    from ..events import FrameSnapshot


class ClassicSkin(PongSkin):
    """Flat arcade look.

    - Net: dashed white line down the middle
    - Player paddle: blue, opponent paddle: red
    - Ball: white circle
    - HUD: "Hits: N | You: A  AI: B" above the net
    """

    NAME = "classic"
    DESCRIPTION = "Dark table with colored paddles"

    NET_DASH = 18
    NET_GAP = 12
    NET_WIDTH = 2

    BUTTON_COLOR = (50, 50, 60)
    BUTTON_OUTLINE = (255, 255, 255)

    def __init__(self):
        """Initialize classic skin."""
        self._font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 32)
            self._title_font = pygame.font.Font(None, 64)

    def _blit_centered(
        self,
        screen: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        color,
        center,
    ) -> None:
        surface = font.render(text, True, color)
        screen.blit(surface, surface.get_rect(center=center))

    def render_field(self, screen: pygame.Surface) -> None:
        """Fill background and draw the dashed net."""
        screen.fill(BACKGROUND_COLOR.as_rgb_tuple)

        net_x = screen.get_width() // 2 - self.NET_WIDTH // 2
        for y in range(0, screen.get_height(), self.NET_DASH + self.NET_GAP):
            pygame.draw.rect(
                screen,
                NET_COLOR.as_rgb_tuple,
                (net_x, y, self.NET_WIDTH, self.NET_DASH),
            )

    def render_frame(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Draw both paddles and the ball."""
        pygame.draw.rect(
            screen,
            PLAYER_COLOR.as_rgb_tuple,
            (snapshot.player_x, snapshot.player_y, snapshot.paddle_width, snapshot.paddle_height),
        )
        pygame.draw.rect(
            screen,
            OPPONENT_COLOR.as_rgb_tuple,
            (snapshot.opponent_x, snapshot.opponent_y, snapshot.paddle_width, snapshot.paddle_height),
        )
        pygame.draw.circle(
            screen,
            BALL_COLOR.as_rgb_tuple,
            (int(snapshot.ball_x), int(snapshot.ball_y)),
            int(snapshot.ball_radius),
        )

    def render_hud(self, snapshot: 'FrameSnapshot', screen: pygame.Surface) -> None:
        """Draw the counter line at the top center."""
        self._ensure_font()
        text = self._font.render(snapshot.counter_text, True, HUD_COLOR.as_rgb_tuple)
        rect = text.get_rect()
        rect.midtop = (screen.get_width() // 2, 10)
        screen.blit(text, rect)

    def render_difficulty_menu(
        self,
        buttons: Dict[str, 'Rectangle'],
        screen: pygame.Surface,
    ) -> None:
        """Draw the title and one button per difficulty."""
        self._ensure_font()
        width, height = screen.get_size()
        self._blit_centered(
            screen, self._title_font, "Choose difficulty",
            HUD_COLOR.as_rgb_tuple, (width // 2, height // 4),
        )

        for key, button in buttons.items():
            pygame.draw.rect(screen, self.BUTTON_COLOR, button.as_tuple)
            pygame.draw.rect(screen, self.BUTTON_OUTLINE, button.as_tuple, 2)
            center = button.center
            self._blit_centered(
                screen, self._font, key.capitalize(),
                self.BUTTON_OUTLINE, (center.x, center.y),
            )

    def render_paused(self, screen: pygame.Surface) -> None:
        """Draw the paused banner."""
        self._ensure_font()
        width, height = screen.get_size()
        self._blit_centered(
            screen, self._title_font, "Paused",
            HUD_COLOR.as_rgb_tuple, (width // 2, height // 2),
        )

    def render_result(self, winner: Side, screen: pygame.Surface) -> None:
        """Draw the victory/defeat banner and the play-again prompt."""
        self._ensure_font()
        width, height = screen.get_size()

        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        screen.blit(overlay, (0, 0))

        if winner == Side.PLAYER:
            title, color = "Victory! You Win!", VICTORY_COLOR
        else:
            title, color = "Defeat! AI Wins.", DEFEAT_COLOR

        self._blit_centered(
            screen, self._title_font, title,
            color.as_rgb_tuple, (width // 2, height // 2),
        )
        self._blit_centered(
            screen, self._font, "Click to play again",
            HUD_COLOR.as_rgb_tuple, (width // 2, height // 2 + 50),
        )
