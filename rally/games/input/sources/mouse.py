"""
Mouse input source for pygame windows.
"""
import time
from typing import List, Tuple

import pygame

from models import Vector2D
from rally.games.input.input_event import InputEvent, InputEventType
from rally.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Mouse input source.

    Converts pygame mouse motion into MOVE events and left clicks into
    SELECT events. Non-mouse events are re-posted to the pygame event
    queue for the main loop.
    """

    def __init__(self):
        """Initialize the mouse input source."""
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect mouse input."""
        for event in pygame.event.get():
            if event.type == pygame.MOUSEMOTION:
                self._queue(event.pos, InputEventType.MOVE)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left mouse button only
                    self._queue(event.pos, InputEventType.SELECT)
            elif event.type != pygame.MOUSEBUTTONUP:
                # Re-post non-mouse events for the main loop to handle
                pygame.event.post(event)

    def _queue(self, pos: Tuple[int, int], event_type: InputEventType) -> None:
        pos_x, pos_y = pos
        self._event_queue.append(InputEvent(
            position=Vector2D(x=float(pos_x), y=float(pos_y)),
            timestamp=time.monotonic(),
            event_type=event_type,
        ))
