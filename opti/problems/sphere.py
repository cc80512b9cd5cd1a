import numpy as np

from opti.configs.base import build_config
from opti.configs.problems import SphereConfig
from .base import Problem
from .registry import problem


@problem(name="sphere")
class SphereProblem(Problem):
    """
    Sum of squared parameters, minimum 0 at the origin. The standard smoke test
    for an optimizer; the evaluation stops as soon as the partial sum reaches
    the compare value.
    """

    def __init__(self, num_dimensions: int, low: float = -1.0, high: float = 1.0):
        self.config = build_config(SphereConfig, num_dimensions=num_dimensions, low=low, high=high)
        self._min = np.full(self.config.num_dimensions, self.config.low)
        self._max = np.full(self.config.num_dimensions, self.config.high)
        self.num_evaluations = 0

    def get_num_dimensions(self) -> int:
        return self.config.num_dimensions

    def get_min(self) -> np.ndarray:
        return self._min

    def get_max(self) -> np.ndarray:
        return self._max

    def cost_function(self, params: np.ndarray, compare: float) -> float:
        self.num_evaluations += 1
        total = 0.0
        for value in params:
            total += value * value
            if total >= compare:
                break
        return total
