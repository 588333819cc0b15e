"""Shared fixtures for Pong tests."""

import os
from typing import Iterable, List

import pytest

# Headless pygame for render tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from games.Pong.config import FieldGeometry
from games.Pong.game.entities import Ball, Paddle


class SequenceRandom:
    """Deterministic random source.

    Each uniform(a, b) call consumes the next fraction from the sequence
    (cycling) and maps it into [a, b]. Every call is recorded.
    """

    def __init__(self, fractions: Iterable[float] = (0.5,)):
        self._fractions: List[float] = list(fractions)
        self._index = 0
        self.calls: List[tuple] = []

    def uniform(self, a: float, b: float) -> float:
        fraction = self._fractions[self._index % len(self._fractions)]
        self._index += 1
        self.calls.append((a, b))
        return a + (b - a) * fraction


@pytest.fixture
def geometry():
    """Default 800x500 field."""
    return FieldGeometry(width=800.0, height=500.0)


@pytest.fixture
def make_rng():
    """Factory for SequenceRandom sources."""
    return SequenceRandom


@pytest.fixture
def centered_rng():
    """Random source that always returns the middle of the range."""
    return SequenceRandom([0.5])


@pytest.fixture
def make_ball():
    """Factory for balls with default radius 10."""
    def _make(x=400.0, y=250.0, vx=0.0, vy=0.0, speed=6.0, radius=10.0):
        return Ball(x, y, radius, speed=speed, vx=vx, vy=vy)
    return _make


@pytest.fixture
def player_paddle(geometry):
    paddle = Paddle(geometry.player_x, geometry.paddle_width, geometry.paddle_height, geometry.height)
    paddle.center_vertically()
    return paddle


@pytest.fixture
def opponent_paddle(geometry):
    paddle = Paddle(geometry.opponent_x, geometry.paddle_width, geometry.paddle_height, geometry.height)
    paddle.center_vertically()
    return paddle
