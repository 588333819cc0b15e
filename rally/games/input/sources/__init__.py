"""
Input source implementations.
"""

from rally.games.input.sources.base import InputSource
from rally.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
