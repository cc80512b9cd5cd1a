"""
Generalized generation gap (G3) strategy.

Deb, K., Anand, A. and Joshi, D. (2002). A Computationally Efficient
Evolutionary Algorithm for Real-Parameter Optimization. KanGAL Report No. 2002003.
"""

from typing import List, Optional
import numpy as np

from opti.configs.base import build_config
from opti.configs.strategies import GenerationalConfig
from opti.exceptions import ConfigurationError
from opti.problems.base import Problem
from opti.recombinators.base import Recombinator
from opti.recombinators.parent_centric import ParentCentricRecombinator
from opti.utils.random_source import RandomSource
from opti.utils.shuffle import partial_shuffle
from opti.utils.logger import get_logger
from .base import Strategy

logger = get_logger(__name__)


class Individual:
    """A parameter vector and its cost."""

    __slots__ = ('cost', 'vector')

    def __init__(self, num_dimensions: int):
        self.cost = 0.0
        self.vector = np.zeros(num_dimensions)

    def swap(self, other: "Individual"):
        self.vector, other.vector = other.vector, self.vector
        self.cost, other.cost = other.cost, self.cost

    def __repr__(self) -> str:
        return f"Individual(cost={self.cost!r})"


class GenerationalStrategy(Strategy):
    """
    G3 evolution strategy, by default with the PCX recombinator.

    The best individual always sits in slot 0 and is a parent of every
    offspring. Each ``evolve()`` call picks the remaining parents and two
    replacement candidates at random, makes ``num_offspring`` offspring, lets
    each one replace the worse candidate if it beats it, and promotes the
    better candidate to slot 0 if it beats the incumbent.

    ``best()`` returns slot 0's vector, which is only valid until the next
    ``evolve()`` call moves individuals around.

    Args:
        problem: Problem to minimize
        population_size: Number of individuals, at least num_parents + 2
        recombinator: Recombination operator, a new ParentCentricRecombinator by default
        num_offspring: Offspring made per evolve() call
        random_source: Source of randomness, defaults to the shared one
    """

    def __init__(
        self,
        problem: Problem,
        population_size: int,
        recombinator: Optional[Recombinator] = None,
        num_offspring: int = 2,
        random_source: Optional[RandomSource] = None
    ):
        self.config = build_config(
            GenerationalConfig,
            population_size=population_size,
            num_offspring=num_offspring
        )
        if recombinator is None:
            recombinator = ParentCentricRecombinator(random_source=random_source)
        super().__init__(problem, recombinator, random_source)

        self.population_size = self.config.population_size
        self.num_offspring = self.config.num_offspring
        if self.population_size < self.num_parents + 2:
            raise ConfigurationError(
                f"population_size ({self.population_size}) must be at least "
                f"num_parents + 2 ({self.num_parents + 2})"
            )

        minx, maxx = self.bounds()
        self.population: List[Individual] = []
        for _ in range(self.population_size):
            individual = Individual(self.num_dimensions)
            individual.vector[:] = minx + (maxx - minx) * self.random_source.rand(size=self.num_dimensions)
            individual.cost = self.problem.cost_function(individual.vector, np.inf)
            self.population.append(individual)

        # Slot 0 holds the best from the start
        best = min(range(self.population_size), key=lambda i: self.population[i].cost)
        self.population[0], self.population[best] = self.population[best], self.population[0]

        self.offspring = Individual(self.num_dimensions)
        self.parent_list: List[np.ndarray] = [None] * self.num_parents

        logger.info(
            f"GenerationalStrategy initialized: population_size={self.population_size}, "
            f"num_parents={self.num_parents}, num_offspring={self.num_offspring}, "
            f"best cost={self.population[0].cost}"
        )

    def best(self) -> np.ndarray:
        return self.population[0].vector

    @property
    def best_cost(self) -> float:
        return self.population[0].cost

    def average_cost(self) -> float:
        return sum(individual.cost for individual in self.population) / self.population_size

    def evolve(self) -> float:
        population = self.population
        num_parents = self.num_parents
        rng = self.random_source

        # Slots 1..num_parents+1 get random distinct individuals, slot 0 stays the best
        partial_shuffle(population, self.population_size, num_parents + 1, offset=1, random_source=rng)

        parent_list = self.parent_list
        for i in range(num_parents):
            parent_list[i] = population[i].vector
        # Any parent may be the center, the best included
        center = rng.rand_int(num_parents - 1)
        parent_list[0], parent_list[center] = parent_list[center], parent_list[0]

        best = population[num_parents]
        next_best = population[num_parents + 1]
        if next_best.cost < best.cost:
            best, next_best = next_best, best

        offspring = self.offspring
        for _ in range(self.num_offspring):
            self.recombinator.recombine(offspring.vector, parent_list)
            offspring.cost = self.problem.cost_function(offspring.vector, next_best.cost)
            if offspring.cost < next_best.cost:
                next_best.swap(offspring)
                if next_best.cost < best.cost:
                    best, next_best = next_best, best

        if best.cost < population[0].cost:
            best.swap(population[0])
            logger.debug(f"New best cost: {population[0].cost}")

        return population[0].cost
