"""Pong skins for rendering."""

from .base import PongSkin
from .classic import ClassicSkin

__all__ = [
    'PongSkin',
    'ClassicSkin',
]
