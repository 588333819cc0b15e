"""Ball entity with tick-based movement.

Velocity is in pixels per tick. Whenever the ball is served or deflected
its velocity is re-derived from `speed` and an angle, so the velocity
magnitude always equals `speed` afterwards.
"""

import math


class Ball:
    """Ball with constant speed and direction set by angle."""

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        speed: float = 0.0,
        vx: float = 0.0,
        vy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            x: Center X position
            y: Center Y position
            radius: Ball radius
            speed: Scalar speed (pixels/tick)
            vx: X velocity (pixels/tick)
            vy: Y velocity (pixels/tick)
        """
        self._x = x
        self._y = y
        self._radius = radius
        self._speed = speed
        self._vx = vx
        self._vy = vy

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def vx(self) -> float:
        """Get X velocity."""
        return self._vx

    @property
    def vy(self) -> float:
        """Get Y velocity."""
        return self._vy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._radius

    @property
    def speed(self) -> float:
        """Get scalar speed the velocity is derived from."""
        return self._speed

    @property
    def velocity_magnitude(self) -> float:
        """Get actual length of the velocity vector."""
        return math.hypot(self._vx, self._vy)

    @property
    def left(self) -> float:
        """Get ball left edge X."""
        return self._x - self._radius

    @property
    def right(self) -> float:
        """Get ball right edge X."""
        return self._x + self._radius

    @property
    def top(self) -> float:
        """Get ball top edge Y."""
        return self._y - self._radius

    @property
    def bottom(self) -> float:
        """Get ball bottom edge Y."""
        return self._y + self._radius

    def move(self) -> None:
        """Advance position by one tick of velocity."""
        self._x += self._vx
        self._y += self._vy

    def set_position(self, x: float, y: float) -> None:
        """Place the ball center at (x, y)."""
        self._x = x
        self._y = y

    def set_velocity(self, vx: float, vy: float) -> None:
        """Set raw velocity components."""
        self._vx = vx
        self._vy = vy

    def bounce_vertical(self) -> None:
        """Bounce off horizontal surface (reverse Y velocity)."""
        self._vy = -self._vy

    def launch(self, angle_radians: float, direction: int) -> None:
        """Set velocity from speed and angle.

        Args:
            angle_radians: Angle from horizontal (positive = downward)
            direction: +1 to travel right, -1 to travel left
        """
        self._vx = direction * self._speed * math.cos(angle_radians)
        self._vy = self._speed * math.sin(angle_radians)

    def serve(self, x: float, y: float, speed: float, angle_radians: float, direction: int) -> None:
        """Re-center the ball and launch it at a new speed.

        Args:
            x: Center X position
            y: Center Y position
            speed: New scalar speed
            angle_radians: Launch angle from horizontal
            direction: +1 to travel right, -1 to travel left
        """
        self._x = x
        self._y = y
        self._speed = speed
        self.launch(angle_radians, direction)

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
                f"vx={self._vx:.2f}, vy={self._vy:.2f}, speed={self._speed:.2f})")
