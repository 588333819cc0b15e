"""
Pong Event Types

Defines what the match core hands to its collaborators:
- PointScored / MatchEnded: discrete events produced by a tick
- FrameSnapshot: everything needed to draw one frame

These types are the contract between the simulation and presentation.
The core never reaches into rendering state; renderers and HUDs only
read snapshots and events.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Side(str, Enum):
    """The two sides of the table."""
    PLAYER = "player"
    OPPONENT = "opponent"


class MatchPhase(str, Enum):
    """Lifecycle of a match.

    IDLE -> RUNNING on start, RUNNING <-> PAUSED on stop/resume,
    RUNNING -> ENDED when a side reaches the win score.
    """
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class PointScored(BaseModel):
    """A side won a point."""
    side: Side = Field(..., description="Side that scored")
    player_score: int = Field(..., ge=0)
    opponent_score: int = Field(..., ge=0)
    hit_count: int = Field(default=0, ge=0, description="Paddle hits in the finished rally")

    model_config = ConfigDict(frozen=True)


class MatchEnded(BaseModel):
    """A side reached the win score."""
    winner: Side
    player_score: int = Field(..., ge=0)
    opponent_score: int = Field(..., ge=0)
    difficulty: str = Field(..., description="Difficulty key the match was played at")

    model_config = ConfigDict(frozen=True)


MatchEvent = Union[PointScored, MatchEnded]


class FrameSnapshot(BaseModel):
    """Renderable state of one frame."""
    ball_x: float
    ball_y: float
    ball_radius: float
    player_x: float
    player_y: float
    opponent_x: float
    opponent_y: float
    paddle_width: float
    paddle_height: float
    player_score: int = Field(..., ge=0)
    opponent_score: int = Field(..., ge=0)
    hit_count: int = Field(..., ge=0)
    phase: MatchPhase
    difficulty: Optional[str] = None
    winner: Optional[Side] = None

    model_config = ConfigDict(frozen=True)

    @property
    def counter_text(self) -> str:
        """HUD counter line."""
        return f"Hits: {self.hit_count} | You: {self.player_score}  AI: {self.opponent_score}"
