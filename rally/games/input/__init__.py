"""
Input abstraction layer for Rally games.

Provides unified input handling so games see the same events whether
they come from a mouse, a touch screen or a scripted source.
"""

from rally.games.input.input_event import InputEvent, InputEventType
from rally.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputEventType', 'InputManager']
