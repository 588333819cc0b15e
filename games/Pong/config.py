"""Configuration for Pong.

Contains screen dimensions, field geometry, and color definitions.
Screen size and frame rate can be overridden from the environment or a
.env file next to this module.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from models import Color

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display settings
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 500)
FPS = _get_int('FPS', 60)  # One simulation tick per frame

# Field geometry (pixels)
PADDLE_WIDTH: float = 12.0
PADDLE_HEIGHT: float = 100.0
PADDLE_INSET: float = _get_float('PADDLE_INSET', 20.0)  # Gap between paddle and its goal line
BALL_RADIUS: float = 10.0

# Rebound angle at the very edge of a paddle
MAX_BOUNCE_ANGLE_DEGREES: float = 45.0

# Colors
BACKGROUND_COLOR = Color(r=17, g=17, b=17)
PLAYER_COLOR = Color(r=33, g=150, b=243)    # Blue for user
OPPONENT_COLOR = Color(r=229, g=57, b=53)   # Red for AI
BALL_COLOR = Color(r=255, g=255, b=255)
NET_COLOR = Color(r=255, g=255, b=255)
HUD_COLOR = Color(r=220, g=220, b=220)
VICTORY_COLOR = Color(r=100, g=255, b=100)
DEFEAT_COLOR = Color(r=255, g=100, b=100)


@dataclass(frozen=True)
class FieldGeometry:
    """Playing field dimensions and fixed paddle placement.

    The player paddle sits `paddle_inset` from the left edge and the
    opponent paddle mirrors it on the right.
    """

    width: float = float(SCREEN_WIDTH)
    height: float = float(SCREEN_HEIGHT)
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_inset: float = PADDLE_INSET
    ball_radius: float = BALL_RADIUS

    @property
    def player_x(self) -> float:
        """Left edge of the player paddle."""
        return self.paddle_inset

    @property
    def opponent_x(self) -> float:
        """Left edge of the opponent paddle."""
        return self.width - self.paddle_inset - self.paddle_width

    @property
    def max_paddle_y(self) -> float:
        """Largest valid paddle top coordinate."""
        return self.height - self.paddle_height

    @property
    def center(self) -> tuple:
        """Field center (x, y)."""
        return (self.width / 2, self.height / 2)

    @classmethod
    def from_screen(cls, width: float, height: float) -> 'FieldGeometry':
        """Build geometry for a given screen size with default paddle sizes."""
        return cls(width=float(width), height=float(height))
