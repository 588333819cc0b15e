"""
Shared models library for the Rally platform.

Pydantic primitives used across the platform and games:
- Point2D / Vector2D: positions
- Color: validated RGBA colors
- Rectangle: clickable regions

Usage:
    >>> from models import Point2D, Rectangle
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Color,
    Rectangle,
)

__all__ = [
    "Point2D",
    "Vector2D",
    "Color",
    "Rectangle",
]
