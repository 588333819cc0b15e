"""Paddle entity.

Paddles slide vertically only. The top edge is always kept inside
[0, field_height - height].
"""

from typing import Tuple


class Paddle:
    """Vertical paddle at a fixed horizontal position."""

    def __init__(
        self,
        x: float,
        width: float,
        height: float,
        field_height: float,
        y: float = 0.0,
    ):
        """Initialize paddle.

        Args:
            x: Left edge X position (fixed)
            width: Paddle width
            height: Paddle height
            field_height: Height of the playing field
            y: Initial top Y position (clamped)
        """
        self._x = x
        self._width = width
        self._height = height
        self._field_height = field_height
        self._y = self._clamp(y)

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def width(self) -> float:
        """Get paddle width."""
        return self._width

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._height

    @property
    def left(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def right(self) -> float:
        """Get paddle right edge X."""
        return self._x + self._width

    @property
    def top(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def bottom(self) -> float:
        """Get paddle bottom Y."""
        return self._y + self._height

    @property
    def center_y(self) -> float:
        """Get paddle center Y."""
        return self._y + self._height / 2

    @property
    def max_y(self) -> float:
        """Get largest allowed top Y."""
        return self._field_height - self._height

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def _clamp(self, y: float) -> float:
        return max(0.0, min(self._field_height - self._height, y))

    def move_to(self, y: float) -> None:
        """Place the paddle top at y, clamped to the field."""
        self._y = self._clamp(y)

    def center_on(self, target_y: float) -> None:
        """Center the paddle on target_y, clamped to the field."""
        self.move_to(target_y - self._height / 2)

    def move_by(self, dy: float) -> None:
        """Shift the paddle by dy without clamping.

        Callers moving the paddle several times in a tick clamp once
        at the end with clamp().
        """
        self._y += dy

    def clamp(self) -> None:
        """Pull the paddle back inside the field."""
        self._y = self._clamp(self._y)

    def contains_y(self, y: float) -> bool:
        """Check if y lies strictly inside the paddle's vertical span."""
        return self._y < y < self._y + self._height

    def center_vertically(self) -> None:
        """Move paddle to the vertical middle of the field."""
        self._y = self._clamp((self._field_height - self._height) / 2)
