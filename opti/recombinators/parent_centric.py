"""
Parent-centric crossover (PCX).

Deb, K., Anand, A. and Joshi, D. (2002). A Computationally Efficient
Evolutionary Algorithm for Real-Parameter Optimization. KanGAL Report No. 2002003.
"""

from typing import Optional, Sequence
import numpy as np

from opti.configs.base import build_config
from opti.configs.recombinators import ParentCentricConfig
from opti.utils.geometry import squared_perpendicular_distance
from opti.utils.random_source import RandomSource
from opti.utils.logger import get_logger
from .base import Recombinator

logger = get_logger(__name__)


class ParentCentricRecombinator(Recombinator):
    """
    Offspring are spread around the first parent (the center). The spread
    along the direction from the center to the parents' centroid scales with
    that distance (``sd1``); the spread across it scales with the RMS
    perpendicular distance of the other parents from that line (``sd2``).
    Both follow the population as it contracts.

    A centroid very close to, but not exactly at, the center makes the axial
    projection ill-conditioned and may yield non-finite offspring.

    Args:
        num_parents: Parents per offspring (at least 2)
        sd1: Axial spread scale
        sd2: Perpendicular spread scale
        random_source: Source of randomness, defaults to the shared one
    """

    def __init__(
        self,
        num_parents: int = 3,
        sd1: float = 0.1,
        sd2: float = 0.1,
        random_source: Optional[RandomSource] = None
    ):
        super().__init__(random_source)
        self.config = build_config(ParentCentricConfig, num_parents=num_parents, sd1=sd1, sd2=sd2)
        self.mean_vector: Optional[np.ndarray] = None

    @property
    def sd1(self) -> float:
        return self.config.sd1

    @property
    def sd2(self) -> float:
        return self.config.sd2

    def on_num_dimensions(self):
        self.mean_vector = np.empty(self.num_dimensions)
        logger.info(
            f"PCX recombinator configured: {self.num_dimensions} dimensions, "
            f"{self.config.num_parents} parents, sd1={self.sd1}, sd2={self.sd2}"
        )

    def get_num_parents(self) -> int:
        return self.config.num_parents

    def recombine(self, dest: np.ndarray, parents: Sequence[np.ndarray]):
        self._check_configured()
        num_parents = self.config.num_parents
        center = parents[0]
        rng = self.random_source

        # 1. Vector from the center to the mean of all parents
        mean_vector = self.mean_vector
        mean_vector[:] = center
        for t in range(1, num_parents):
            mean_vector += parents[t]
        mean_vector *= 1.0 / num_parents
        mean_vector -= center
        length_squared = float(np.dot(mean_vector, mean_vector))

        # 2. RMS perpendicular distance of the other parents from the center line
        mean_squared_distance = 0.0
        for t in range(1, num_parents):
            mean_squared_distance += squared_perpendicular_distance(center, mean_vector, parents[t])
        mean_squared_distance /= num_parents - 1

        # Rounding may leave collinear parents a slightly negative distance and
        # a tiny mean vector may overflow; the non-finite offspring that results
        # is rejected by the cost comparison, so no floating point warnings
        with np.errstate(invalid='ignore', over='ignore', divide='ignore'):
            rms_distance = np.sqrt(mean_squared_distance)

            # 3. Random offspring around the center
            if length_squared == 0:
                dest[:] = rng.rand_norm(center, self.sd2 * rms_distance, size=self.num_dimensions)
            else:
                z = rng.rand_norm(0.0, 1.0, size=self.num_dimensions)
                along = mean_vector * (np.dot(z, mean_vector) / length_squared)
                length = np.sqrt(length_squared)
                dest[:] = center + along * (length * self.sd1) + (z - along) * (rms_distance * self.sd2)
