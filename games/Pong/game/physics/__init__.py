"""Pong physics and collision detection."""

from .collision import (
    reflect_off_walls,
    check_player_paddle_collision,
    check_opponent_paddle_collision,
    deflect_off_player_paddle,
    deflect_off_opponent_paddle,
    rebound_angle,
    check_goal,
)

__all__ = [
    'reflect_off_walls',
    'check_player_paddle_collision',
    'check_opponent_paddle_collision',
    'deflect_off_player_paddle',
    'deflect_off_opponent_paddle',
    'rebound_angle',
    'check_goal',
]
