import abc
from typing import Optional, Tuple
import numpy as np

from opti.configs.base import build_config
from opti.configs.bounds import BoundsConfig
from opti.exceptions import ConfigurationError
from opti.problems.base import Problem
from opti.recombinators.base import Recombinator
from opti.utils.random_source import RandomSource, resolve


class Strategy(abc.ABC):
    """
    Base class for optimization strategies.

    A strategy owns a population of parameter vectors and a recombinator.
    Each ``evolve()`` call makes some progress and returns the best cost so
    far; the caller decides how many calls to make.

    Attributes:
        problem (Problem): The problem being minimized.
        recombinator (Recombinator): Operator making offspring from parents.
        num_dimensions (int): Parameter vector length.
        num_parents (int): Parents per offspring, as reported by the recombinator.
    """

    def __init__(
        self,
        problem: Problem,
        recombinator: Recombinator,
        random_source: Optional[RandomSource] = None
    ):
        if not isinstance(problem, Problem):
            raise ConfigurationError(
                f"'problem' must be an instance of a subclass of 'Problem', not '{type(problem).__name__}'"
            )
        num_dimensions = problem.get_num_dimensions()
        if num_dimensions <= 0:
            raise ConfigurationError(f"Number of dimensions must be positive, got {num_dimensions}")

        self.problem = problem
        self.num_dimensions = int(num_dimensions)
        self.random_source = resolve(random_source)

        recombinator.set_num_dimensions(self.num_dimensions)
        self.recombinator = recombinator
        self.num_parents = recombinator.get_num_parents()
        if self.num_parents < 1:
            raise ConfigurationError(f"Recombinator needs at least one parent, reports {self.num_parents}")

    def bounds(self, minx=None, maxx=None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Validated initialization bounds, the problem's own unless given.

        Raises:
            ConfigurationError: If the bounds do not match the dimension count.
        """
        minx = self.problem.get_min() if minx is None else minx
        maxx = self.problem.get_max() if maxx is None else maxx
        config = build_config(BoundsConfig, min=list(np.asarray(minx, dtype=float)), max=list(np.asarray(maxx, dtype=float)))
        if len(config.min) != self.num_dimensions:
            raise ConfigurationError(
                f"Bounds have {len(config.min)} dimensions, problem has {self.num_dimensions}"
            )
        return np.asarray(config.min), np.asarray(config.max)

    @abc.abstractmethod
    def best(self) -> np.ndarray:
        """
        Best parameter vector so far. The array belongs to the population; see
        the concrete strategy for how long it stays valid.
        """
        pass

    @property
    @abc.abstractmethod
    def best_cost(self) -> float:
        pass

    @abc.abstractmethod
    def average_cost(self) -> float:
        """Average cost of the population."""
        pass

    @abc.abstractmethod
    def evolve(self) -> float:
        """
        Evolve some. Returns the best cost in the population, which never
        increases from one call to the next.
        """
        pass
