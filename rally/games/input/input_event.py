"""
Input events: the device-independent form of pointer input.

Sources emit MOVE while the pointer travels and SELECT on a click.
"""
from dataclasses import dataclass
from enum import Enum

from models import Vector2D


class InputEventType(str, Enum):
    """Types of input events.

    Attributes:
        MOVE: The pointer moved (continuous position signal)
        SELECT: A click/press at a position
    """
    MOVE = "move"
    SELECT = "select"


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    All input sources must convert their events to this common format.

    Attributes:
        position: The 2D position where the input occurred (screen coordinates)
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        event_type: Type of event (MOVE or SELECT)
    """
    position: Vector2D
    timestamp: float
    event_type: InputEventType = InputEventType.SELECT

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, type={self.event_type.value})")
