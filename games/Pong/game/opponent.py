"""Opponent paddle tracking policy.

Each tick the opponent picks a target height near the ball and steps
toward it at a fixed speed. How it aims comes from the difficulty
profile:

- reacts_when_approaching_only: hold position while the ball moves away
- noisy_tracking: add uniform noise of width `opponent_error` to the
  target, re-sampled every tick
- tracking_deadband: do not move while the paddle center is within this
  distance of the target
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..difficulty import DifficultyProfile
    from .entities.ball import Ball
    from .entities.paddle import Paddle
    from .random_source import RandomSource


def tracking_target(
    ball: 'Ball',
    profile: 'DifficultyProfile',
    rng: 'RandomSource',
) -> Optional[float]:
    """Pick the height the opponent aims its paddle center at.

    Args:
        ball: Ball being tracked
        profile: Active difficulty profile
        rng: Source of aiming noise

    Returns:
        Target Y, or None if the opponent does not react this tick
    """
    if profile.reacts_when_approaching_only and ball.vx <= 0:
        return None

    target = ball.y
    if profile.noisy_tracking and profile.opponent_error > 0:
        half_error = profile.opponent_error / 2
        target += rng.uniform(-half_error, half_error)
    return target


def track_ball(
    paddle: 'Paddle',
    ball: 'Ball',
    profile: 'DifficultyProfile',
    rng: 'RandomSource',
) -> float:
    """Move the opponent paddle one tick toward the ball.

    The paddle is clamped to the field afterwards.

    Args:
        paddle: Opponent paddle (mutated)
        ball: Ball being tracked
        profile: Active difficulty profile
        rng: Source of aiming noise

    Returns:
        Vertical displacement applied this tick
    """
    before = paddle.y
    target = tracking_target(ball, profile, rng)

    if target is not None:
        center = paddle.center_y
        if center < target - profile.tracking_deadband:
            paddle.move_by(profile.opponent_speed)
        elif center > target + profile.tracking_deadband:
            paddle.move_by(-profile.opponent_speed)

    paddle.clamp()
    return paddle.y - before
