"""
Input manager.

Sits between the main loop and the active InputSource so the source can
be swapped (mouse, touch, a test script) without the game noticing.
"""
from typing import List, Optional

from rally.games.input.input_event import InputEvent
from rally.games.input.sources.base import InputSource


class InputManager:
    """Forwards update/poll calls to the current input source."""

    def __init__(self, source: Optional[InputSource] = None):
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Replace the active source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Let the source read its device for this frame."""
        if self._source:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events queued since the last call (empty without a source)."""
        return self._source.poll_events() if self._source else []

    def clear_events(self) -> None:
        """Drop whatever the source has queued."""
        self.get_events()
