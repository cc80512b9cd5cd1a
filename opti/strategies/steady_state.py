"""
Steady-state differential evolution.

Storn, R. and Price, K. (1995). Differential Evolution - a Simple and Efficient
Adaptive Scheme for Global Optimization over Continuous Spaces. Technical
Report TR-95-012, ICSI.
"""

from typing import List, Optional
import numpy as np

from opti.configs.base import build_config
from opti.configs.strategies import SteadyStateConfig
from opti.exceptions import ConfigurationError
from opti.problems.base import Problem
from opti.recombinators.base import Recombinator
from opti.recombinators.differential import DifferentialRecombinator
from opti.utils.random_source import RandomSource
from opti.utils.shuffle import partial_shuffle
from opti.utils.logger import get_logger
from .base import Strategy

logger = get_logger(__name__)


class SteadyStateStrategy(Strategy):
    """
    Differential evolution, one population member at a time.

    The population is a ``(population_size, d)`` table. Each ``evolve()`` call visits the
    member at ``pos``: it is recombined with randomly drawn donor members (the
    visited member itself may be drawn) and replaced by the trial vector if
    that is strictly better. ``pos`` then moves on, wrapping around after the
    last member.

    The sum of costs is maintained incrementally so ``average_cost()`` is O(1).
    Once per sweep it is reset from the sum accumulated during the sweep, so
    floating point drift cannot build up.

    ``best()`` returns the best member's row, valid until that row is replaced.

    Args:
        problem: Problem to minimize
        population_size: Number of population members
        recombinator: Recombination operator, a new DifferentialRecombinator by default
        random_source: Source of randomness, defaults to the shared one
    """

    def __init__(
        self,
        problem: Problem,
        population_size: int,
        recombinator: Optional[Recombinator] = None,
        random_source: Optional[RandomSource] = None
    ):
        self.config = build_config(SteadyStateConfig, population_size=population_size)
        if recombinator is None:
            recombinator = DifferentialRecombinator(random_source=random_source)
        super().__init__(problem, recombinator, random_source)

        self.population_size = self.config.population_size
        if self.population_size < self.num_parents - 1:
            raise ConfigurationError(
                f"population_size ({self.population_size}) must be at least num_parents - 1 ({self.num_parents - 1}) "
                f"to draw distinct donors"
            )
        d = self.num_dimensions

        self.population = np.zeros((self.population_size, d))
        self._costs = np.zeros(self.population_size)
        self.trial_vector = np.zeros(d)
        self.permuter = np.arange(self.population_size)
        self.parents: List[np.ndarray] = [None] * self.num_parents

        self._pos = 0
        self.gencost = 0.0
        self.sumcost = 0.0
        self._best: Optional[int] = None
        self._best_cost = np.inf

        self.random_population(*self.bounds())
        self.statistics()

        logger.info(
            f"SteadyStateStrategy initialized: population_size={self.population_size}, "
            f"num_parents={self.num_parents}, best cost={self._best_cost}"
        )

    @property
    def pos(self) -> int:
        """Index of the member the next evolve() call visits."""
        return self._pos

    @property
    def costs(self) -> np.ndarray:
        """Cached cost of every member. Read-only view."""
        view = self._costs.view()
        view.flags.writeable = False
        return view

    @property
    def best_index(self) -> Optional[int]:
        """Row of the best member, None until statistics() has run."""
        return self._best

    @property
    def best_cost(self) -> float:
        return self._best_cost

    def best(self) -> Optional[np.ndarray]:
        if self._best is None:
            return None
        return self.population[self._best]

    def average_cost(self) -> float:
        return self.sumcost / self.population_size

    def random_population(self, minx, maxx):
        """
        Fill every member with uniform random values within the given bounds,
        restarting the evolution. Costs and the best member are stale until
        ``statistics()`` is called.

        Args:
            minx: Lower bound for every parameter
            maxx: Upper bound for every parameter
        """
        minx, maxx = self.bounds(minx, maxx)
        self.population[:] = minx + self.random_source.rand(size=self.population.shape) * (maxx - minx)
        self._best = None
        logger.info(f"Population of {self.population_size} members randomized")

    def statistics(self):
        """
        Evaluate every member again and recompute the cost sum and the best.

        Needed whenever cached costs go stale, for example after the problem's
        cost parameters change at runtime. Never called by ``evolve()``.
        """
        self._best = 0
        self._best_cost = np.inf
        for t in range(self.population_size):
            self._costs[t] = self.problem.cost_function(self.population[t], np.inf)
            if self._costs[t] < self._best_cost:
                self._best_cost = float(self._costs[t])
                self._best = t
        self.sumcost = float(np.sum(self._costs))
        # Members already visited this sweep
        self.gencost = float(np.sum(self._costs[:self._pos]))

    def evolve(self) -> float:
        pos = self._pos
        parents = self.parents

        # The first parent is the target, so the recombinator can cross over with it
        parents[0] = self.population[pos]
        partial_shuffle(self.permuter, self.population_size, self.num_parents - 1, random_source=self.random_source)
        for t in range(1, self.num_parents):
            parents[t] = self.population[self.permuter[t - 1]]

        self.recombinator.recombine(self.trial_vector, parents)
        trial_cost = self.problem.cost_function(self.trial_vector, self._costs[pos])

        if trial_cost < self._costs[pos]:
            self.population[pos] = self.trial_vector
            self.sumcost -= self._costs[pos]
            self._costs[pos] = trial_cost
            self.sumcost += trial_cost
            if trial_cost < self._best_cost:
                self._best_cost = float(trial_cost)
                self._best = pos
                logger.debug(f"New best cost {trial_cost} at member {pos}")

        self.gencost += self._costs[pos]

        self._pos += 1
        if self._pos >= self.population_size:
            self._pos = 0
            # Reset sumcost to the sum gathered over the sweep, to avoid drift
            self.sumcost = self.gencost
            self.gencost = 0.0

        return self._best_cost
