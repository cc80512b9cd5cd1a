"""
Odd polynomial approximation of the constant function 1.

The parameter vector holds one (x, x^3, x^5) coefficient triple per stage.
Stages are chained, each one fed the output of the previous:

    y <- a*y + b*y^3 + c*y^5

starting from y = x. The cost blends the RMS error and the maximum absolute
error of the chain's output against 1 over the sample nodes, with ``ramp``
moving from pure RMS (0) to pure max-abs (1). Runs usually start on RMS,
whose landscape is smoother, and ramp towards max-abs once close.
"""

from typing import List, Optional
import numpy as np

from opti.configs.base import build_config
from opti.configs.problems import PolynomialFitConfig
from .base import Problem
from .registry import problem

# Half-width of the candidate box relative to each coefficient
CANDIDATE_SPREAD = 1.0 / 65536


@problem(name="polynomial_fit")
class PolynomialFitProblem(Problem):

    def __init__(
        self,
        num_params: int = 15,
        num_samples: int = 8193,
        start_x: float = 0.001,
        end_x: float = 1.010916328,
        ramp: float = 0.0,
        candidate: Optional[List[float]] = None
    ):
        self.config = build_config(
            PolynomialFitConfig,
            num_params=num_params,
            num_samples=num_samples,
            start_x=start_x,
            end_x=end_x,
            ramp=ramp,
            candidate=candidate
        )

        if self.config.candidate is not None:
            center = np.asarray(self.config.candidate, dtype=float)
            self._min = center - np.abs(center) * CANDIDATE_SPREAD
            self._max = center + np.abs(center) * CANDIDATE_SPREAD
        else:
            self._min = np.full(self.config.num_params, -0.5)
            self._max = np.full(self.config.num_params, 0.5)

        # Cosine spaced nodes including both end points, so that the
        # MSE-optimal fit lands close to the max-abs-optimal one
        i = np.arange(self.config.num_samples)
        span = self.config.end_x - self.config.start_x
        self.x = self.config.start_x + span * (0.5 - 0.5 * np.cos(np.pi * i / (self.config.num_samples - 1)))

    @property
    def ramp(self) -> float:
        """Blend between RMS error (0) and max absolute error (1). May change during a run."""
        return self.config.ramp

    @ramp.setter
    def ramp(self, value: float):
        self.config = build_config(PolynomialFitConfig, **{**self.config.model_dump(), 'ramp': value})

    def get_num_dimensions(self) -> int:
        return self.config.num_params

    def get_min(self) -> np.ndarray:
        return self._min

    def get_max(self) -> np.ndarray:
        return self._max

    def normalize(self, params: np.ndarray):
        """All stages share the first stage's linear coefficient, kept non-negative."""
        params[0] = abs(params[0])
        params[::3] = params[0]

    def evaluate(self, params: np.ndarray) -> np.ndarray:
        """Output of the polynomial chain at every sample node."""
        y = self.x.copy()
        for j in range(0, self.config.num_params, 3):
            y2 = y * y
            y = params[j] * y + params[j + 1] * (y * y2) + params[j + 2] * (y * y2 * y2)
        return y

    def cost_function(self, params: np.ndarray, compare: float) -> float:
        self.normalize(params)
        err = self.evaluate(params) - 1.0
        rms = float(np.sqrt(np.mean(err * err)))
        max_abs_err = float(np.max(np.abs(err)))
        return rms + self.ramp * (max_abs_err - rms)

    def format_params(self, params: np.ndarray) -> str:
        lines = []
        for j in range(0, self.config.num_params, 3):
            lines.append("(" + ", ".join(f"{params[j + k]:.20f}" for k in range(3)) + "),")
        lines.append("")
        for j in range(0, self.config.num_params, 3):
            lines.append(" + ".join(f"{params[j + k]:.20f} x^{2 * k + 1}" for k in range(3)))
        return "\n".join(lines)
