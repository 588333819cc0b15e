"""Difficulty profiles for Pong.

Each tier bundles the tuning constants for one match: ball speed, how
fast and how accurately the opponent tracks the ball, and the score
needed to win. Tracking behavior is data, not code: the opponent policy
reads the deadband and reaction flags from the profile.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

WIN_SCORE: int = 3  # Points needed to win, same for every tier


class UnknownDifficultyError(ValueError):
    """Raised when a difficulty key is not one of the known tiers."""

    def __init__(self, key: str):
        self.key = key
        valid = ', '.join(DIFFICULTY_PROFILES)
        super().__init__(f"Unknown difficulty {key!r} (expected one of: {valid})")


class DifficultyProfile(BaseModel):
    """Immutable tuning constants for one difficulty tier.

    Speeds are in pixels per tick; error and deadband in pixels.

    Attributes:
        name: Tier key ('easy', 'medium', 'hard')
        ball_speed: Ball speed, constant for the whole match
        opponent_speed: Opponent paddle movement per tick
        opponent_error: Width of the uniform aiming noise around the ball
        win_score: Points needed to win the match
        tracking_deadband: Distance from the target inside which the
            opponent does not move
        reacts_when_approaching_only: Opponent holds position while the
            ball travels away from it
        noisy_tracking: Whether aiming noise is added to the target
    """
    name: str
    ball_speed: float = Field(..., gt=0)
    opponent_speed: float = Field(..., gt=0)
    opponent_error: float = Field(..., ge=0)
    win_score: int = Field(default=WIN_SCORE, gt=0)
    tracking_deadband: float = Field(..., ge=0)
    reacts_when_approaching_only: bool = False
    noisy_tracking: bool = True

    model_config = ConfigDict(frozen=True)


DIFFICULTY_PROFILES: Dict[str, DifficultyProfile] = {
    'easy': DifficultyProfile(
        name='easy',
        ball_speed=4,
        opponent_speed=2,
        opponent_error=120,
        tracking_deadband=20,
        reacts_when_approaching_only=True,
    ),
    'medium': DifficultyProfile(
        name='medium',
        ball_speed=6,
        opponent_speed=5,
        opponent_error=28,
        tracking_deadband=12,
    ),
    'hard': DifficultyProfile(
        name='hard',
        ball_speed=12,
        opponent_speed=8,
        opponent_error=2,
        tracking_deadband=2,       # Tight margin instead of noise
        noisy_tracking=False,
    ),
}


def get_difficulty_profile(key: str) -> DifficultyProfile:
    """Resolve a difficulty key to its profile.

    Args:
        key: One of 'easy', 'medium', 'hard'

    Returns:
        The matching DifficultyProfile

    Raises:
        UnknownDifficultyError: If key is not a known tier
    """
    try:
        return DIFFICULTY_PROFILES[key]
    except (KeyError, TypeError):
        raise UnknownDifficultyError(key) from None


def get_difficulty_names() -> List[str]:
    """Get difficulty keys in menu order."""
    return list(DIFFICULTY_PROFILES.keys())
