"""Collision detection and physics for Pong.

Handles ball-wall and ball-paddle collisions and goal-line crossings.
All functions work on one tick's state and mutate the ball in place.
"""

import math
from typing import Optional, TYPE_CHECKING

from ...config import MAX_BOUNCE_ANGLE_DEGREES
from ..events import Side

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle

MAX_BOUNCE_ANGLE = math.radians(MAX_BOUNCE_ANGLE_DEGREES)


def reflect_off_walls(ball: 'Ball', field_height: float) -> bool:
    """Bounce the ball off the top and bottom walls.

    Only the vertical velocity is reversed; the ball is not pushed back
    out of the wall, so it may overlap it for a tick. A ball that already
    travels away from the wall it overlaps is left alone so it cannot
    get stuck flipping back and forth.

    Args:
        ball: Ball to check
        field_height: Field height in pixels

    Returns:
        True if the ball bounced
    """
    if ball.top < 0 and ball.vy < 0:
        ball.bounce_vertical()
        return True
    if ball.bottom > field_height and ball.vy > 0:
        ball.bounce_vertical()
        return True
    return False


def check_player_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball touches the left (player) paddle.

    The ball's left edge must be past the paddle's right edge and the
    ball center must be inside the paddle's vertical span.
    """
    return ball.left < paddle.right and paddle.contains_y(ball.y)


def check_opponent_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball touches the right (opponent) paddle."""
    return ball.right > paddle.left and paddle.contains_y(ball.y)


def rebound_angle(ball_y: float, paddle: 'Paddle') -> float:
    """Rebound angle for a hit at ball_y.

    The collide point is the offset of the ball from the paddle center,
    normalized to [-1, 1] over half the paddle height. Center hits go
    straight back, edge hits leave at 45 degrees.

    Args:
        ball_y: Ball center Y at contact
        paddle: Paddle that was hit

    Returns:
        Angle in radians, positive = downward
    """
    collide_point = (ball_y - paddle.center_y) / (paddle.height / 2)
    collide_point = max(-1.0, min(1.0, collide_point))
    return collide_point * MAX_BOUNCE_ANGLE


def deflect_off_player_paddle(ball: 'Ball', paddle: 'Paddle') -> None:
    """Snap the ball in front of the player paddle and send it right."""
    ball.set_position(paddle.right + ball.radius, ball.y)
    ball.launch(rebound_angle(ball.y, paddle), direction=1)


def deflect_off_opponent_paddle(ball: 'Ball', paddle: 'Paddle') -> None:
    """Snap the ball in front of the opponent paddle and send it left."""
    ball.set_position(paddle.left - ball.radius, ball.y)
    ball.launch(rebound_angle(ball.y, paddle), direction=-1)


def check_goal(ball: 'Ball', field_width: float) -> Optional[Side]:
    """Check if the ball crossed a goal line.

    Args:
        ball: Ball to check
        field_width: Field width in pixels

    Returns:
        The side that scored, or None
    """
    if ball.left < 0:
        return Side.OPPONENT
    if ball.right > field_width:
        return Side.PLAYER
    return None
