"""
Random Source
==============
Injectable integer random source used by every game rule.
"""

import random
from typing import Optional


class RandomSource:
    """Uniform integer draws backed by a process-local generator."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def range(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high). Raises ValueError if empty."""
        return self._rng.randrange(low, high)
