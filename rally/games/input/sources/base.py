"""
Input source interface.

A source turns one device's raw events into InputEvents. Games never see
the device, only what poll_events() hands back.
"""
from abc import ABC, abstractmethod
from typing import List

from rally.games.input.input_event import InputEvent


class InputSource(ABC):
    """A device (or script) producing pointer events."""

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Hand over the events gathered so far and forget them."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Read the device and queue any new events.

        Args:
            dt: Seconds since the previous update
        """
