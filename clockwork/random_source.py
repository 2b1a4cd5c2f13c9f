"""
Random source used by the tree builder.

Anything with ``integer``, ``die`` and ``pick`` works, so tests can
pass a scripted stub instead of a real generator.
"""

from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar('T')


class RandomSource(Protocol):
    def integer(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""

    def die(self, sides: int) -> int:
        """Uniform integer in [1, sides]."""

    def pick(self, options: Sequence[T]) -> T:
        """Uniform choice among options."""


class NumpyRandomSource:
    """RandomSource backed by numpy's Generator."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def integer(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high))

    def die(self, sides: int) -> int:
        return int(self._rng.integers(1, sides, endpoint=True))

    def pick(self, options: Sequence[T]) -> T:
        return options[int(self._rng.integers(0, len(options)))]

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"
