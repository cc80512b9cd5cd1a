"""
Pytest configuration and shared fixtures for opti tests.
"""

import pytest
import numpy as np

from opti.problems.base import Problem
from opti.problems.sphere import SphereProblem
from opti.utils.random_source import RandomSource


@pytest.fixture
def random_source():
    """Seeded random source so every test run draws the same numbers."""
    return RandomSource(seed=42)


@pytest.fixture
def sphere_2d():
    """Sum of squares over two dimensions, bounds [-1, 1]."""
    return SphereProblem(num_dimensions=2, low=-1.0, high=1.0)


class ShiftedSquaresProblem(Problem):
    """Sum of squared distances to a target, with a configurable weight that can change at runtime."""

    def __init__(self, target, low=-5.0, high=5.0):
        self.target = np.asarray(target, dtype=float)
        self.weight = 1.0
        self.low = low
        self.high = high
        self.calls = 0

    def get_num_dimensions(self):
        return len(self.target)

    def get_min(self):
        return np.full(len(self.target), self.low)

    def get_max(self):
        return np.full(len(self.target), self.high)

    def cost_function(self, params, compare):
        self.calls += 1
        d = params - self.target
        return self.weight * float(np.dot(d, d))


@pytest.fixture
def shifted_problem():
    return ShiftedSquaresProblem([0.5, -0.25, 1.0, 2.0])
