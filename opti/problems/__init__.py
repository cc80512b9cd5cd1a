from .base import Problem
from .registry import PROBLEM_REGISTRY, problem, get_problem
from .sphere import SphereProblem
from .polynomial_fit import PolynomialFitProblem

__all__ = [
    'Problem',
    'PROBLEM_REGISTRY',
    'problem',
    'get_problem',
    'SphereProblem',
    'PolynomialFitProblem'
]
