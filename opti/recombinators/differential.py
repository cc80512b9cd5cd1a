"""
Differential evolution recombination.

Storn, R. and Price, K. (1995). Differential Evolution - a Simple and Efficient
Adaptive Scheme for Global Optimization over Continuous Spaces. Technical
Report TR-95-012, ICSI.
"""

from typing import Optional, Sequence
import numpy as np

from opti.configs.base import build_config
from opti.configs.recombinators import DifferentialConfig
from opti.utils.random_source import RandomSource
from opti.utils.logger import get_logger
from .base import Recombinator

logger = get_logger(__name__)

# target, parent1 + c * (parent2 - parent3)
NUM_PARENTS = 4


class DifferentialRecombinator(Recombinator):
    """
    Mutates one contiguous (cyclic) run of dimensions of the target
    ``parents[0]`` into ``parents[1] + c * (parents[2] - parents[3])`` and
    copies the rest from the target.

    The run starts at a random dimension and always covers it. After each
    mutated dimension the run goes on with probability ``cr``.

    Args:
        cr: Crossover amount, 0..1. 0 is unreasonable.
        c: Weight for the difference of two parents
        random_source: Source of randomness, defaults to the shared one
    """

    def __init__(
        self,
        cr: float = 1.0,
        c: float = 0.61803398875,
        random_source: Optional[RandomSource] = None
    ):
        super().__init__(random_source)
        self.config = build_config(DifferentialConfig, cr=cr, c=c)

    @property
    def cr(self) -> float:
        return self.config.cr

    @property
    def c(self) -> float:
        return self.config.c

    def on_num_dimensions(self):
        logger.info(
            f"DE recombinator configured: {self.num_dimensions} dimensions, cr={self.cr}, c={self.c}"
        )

    def get_num_parents(self) -> int:
        return NUM_PARENTS

    def run_length(self) -> int:
        """Draw how many dimensions the next offspring mutates."""
        d = self.num_dimensions
        count = 1
        while count < d and self.random_source.rand_exc() <= self.cr:
            count += 1
        return count

    def recombine(self, dest: np.ndarray, parents: Sequence[np.ndarray]):
        self._check_configured()
        d = self.num_dimensions
        start = self.random_source.rand_int(d - 1)
        idx = (start + np.arange(self.run_length())) % d

        dest[:] = parents[0]
        dest[idx] = parents[1][idx] + self.c * (parents[2][idx] - parents[3][idx])
