"""
Evolutionary algorithms for the optimization of multiple real variables.

Minimizes an arbitrary cost function of a real parameter vector without
gradients. The global minimum cannot be guaranteed, but might be reached.
Two strategies are provided:

- GenerationalStrategy: generalized generation gap (G3) with parent-centric
  crossover (PCX)
- SteadyStateStrategy: differential evolution (DE), one member per call
"""

from .exceptions import OptiError, ConfigurationError
from .problems import Problem, SphereProblem, PolynomialFitProblem, get_problem, problem
from .recombinators import Recombinator, ParentCentricRecombinator, DifferentialRecombinator
from .strategies import Strategy, GenerationalStrategy, SteadyStateStrategy
from .runner import OptimizationRunner, RunResult, ProgressRecord, minimize
from .utils import RandomSource, rng, seed, full_shuffle, partial_shuffle, setup_logging, get_logger

__version__ = "1.1.0"

__all__ = [
    'OptiError',
    'ConfigurationError',
    'Problem',
    'SphereProblem',
    'PolynomialFitProblem',
    'get_problem',
    'problem',
    'Recombinator',
    'ParentCentricRecombinator',
    'DifferentialRecombinator',
    'Strategy',
    'GenerationalStrategy',
    'SteadyStateStrategy',
    'OptimizationRunner',
    'RunResult',
    'ProgressRecord',
    'minimize',
    'RandomSource',
    'rng',
    'seed',
    'full_shuffle',
    'partial_shuffle',
    'setup_logging',
    'get_logger'
]
