"""
Geometric and color primitives shared by the platform and the games.

All of them are frozen pydantic models: pointer positions travel inside
input events, colors and button regions are module-level constants.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class Point2D(BaseModel):
    """Screen position in pixels, y growing downward.

    Examples:
        >>> pointer = Point2D(x=400.0, y=250.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


# Input events call positions vectors
Vector2D = Point2D


class Color(BaseModel):
    """RGBA color, each channel 0-255.

    Examples:
        >>> Color(r=33, g=150, b=243).as_rgb_tuple
        (33, 150, 243)
    """
    r: int
    g: int
    b: int
    a: int = 255

    model_config = ConfigDict(frozen=True)

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def check_channel(cls, value: int) -> int:
        if value < 0 or value > 255:
            raise ValueError(f'color channel out of range 0-255: {value}')
        return value

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """(r, g, b) as pygame.draw expects it."""
        return self.r, self.g, self.b


class Rectangle(BaseModel):
    """Axis-aligned box from its top-left corner, used for clickable regions.

    Examples:
        >>> button = Rectangle(x=10.0, y=10.0, width=180.0, height=56.0)
        >>> button.contains_point(Point2D(x=20.0, y=30.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def check_size(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f'rectangle size must be positive: {value}')
        return value

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height) for pygame.draw.rect."""
        return self.x, self.y, self.width, self.height

    def contains_point(self, point: Point2D) -> bool:
        """True if point is inside the box or on its edge."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom
