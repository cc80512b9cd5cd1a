"""
Random number source shared by the recombinators and strategies.

Every component takes an optional RandomSource. When none is given the
module-level ``rng`` is used, so seeding it with ``seed()`` makes a whole
run reproducible. The source is not thread-safe.
"""

from typing import Optional, Union, Tuple
import numpy as np

Size = Optional[Union[int, Tuple[int, ...]]]


class RandomSource:
    """
    Thin wrapper over ``numpy.random.RandomState`` exposing the draws the
    optimizers need.

    Args:
        seed: Random seed for reproducible results. None seeds from the OS.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._state = np.random.RandomState(seed)

    @property
    def state(self) -> np.random.RandomState:
        return self._state

    def seed(self, seed: Optional[int] = None):
        """Reseed the source, restarting its stream."""
        self._seed = seed
        self._state = np.random.RandomState(seed)

    def rand(self, scale: float = 1.0, size: Size = None):
        """Uniform real in [0, scale)."""
        return scale * self._state.random_sample(size)

    def rand_exc(self) -> float:
        """Uniform real in [0, 1), 1 excluded."""
        return float(self._state.random_sample())

    def rand_int(self, max_inclusive: int) -> int:
        """Uniform integer in [0, max_inclusive]."""
        return int(self._state.randint(0, max_inclusive + 1))

    def rand_norm(self, mean=0.0, stddev=1.0, size: Size = None):
        """Normal deviate(s). ``mean`` and ``stddev`` may be arrays."""
        return self._state.normal(mean, stddev, size)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"


# Shared default source
rng = RandomSource()


def seed(value: Optional[int] = None):
    """Reseed the shared default source."""
    rng.seed(value)


def resolve(random_source: Optional[RandomSource]) -> RandomSource:
    return random_source if random_source is not None else rng
