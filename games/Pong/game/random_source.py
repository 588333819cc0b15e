"""Injectable source of randomness for the match core.

Anything with a `uniform(a, b)` method works; `random.Random` does.
Tests pass deterministic sources to get exact trajectories.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Uniform random number source."""

    def uniform(self, a: float, b: float) -> float:
        """Return a number N with a <= N <= b."""
        ...


def create_random_source(seed: Optional[int] = None) -> RandomSource:
    """Create the default random source, optionally seeded."""
    return random.Random(seed)
