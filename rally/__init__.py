"""
Rally - arcade platform for paddle games.

Shared layer between input devices and games: logging, the game base
class, the standard game states and the input abstraction.
"""

from rally.logging import get_logger

__all__ = ['get_logger']
