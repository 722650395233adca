"""
Injectable randomness for simulations.

Every random draw in a simulation goes through a RandomSource so runs can be
reproduced from a seed or scripted in tests.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class RandomSource(ABC):
    """
    Abstract source of uniform random draws.

    Subclasses provide random() and integers(); uniform() is derived.
    """

    @abstractmethod
    def random(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""
        pass

    @abstractmethod
    def integers(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from [low, high], both inclusive."""
        pass

    def uniform(self, low: float, high: float) -> float:
        """Return a float uniformly drawn from [low, high)."""
        return low + self.random() * (high - low)


class NumpyRandomSource(RandomSource):
    """
    RandomSource backed by a numpy Generator.

    Usage:
        rng = NumpyRandomSource(seed=42)
        rng.integers(0, 10)
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the random source.

        Args:
            seed: Optional seed; the same seed replays the same draws
        """
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())

    def integers(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))
