"""
Optimization strategies: population management and replacement policies.
"""

from .base import Strategy
from .generational import GenerationalStrategy, Individual
from .steady_state import SteadyStateStrategy

__all__ = [
    'Strategy',
    'GenerationalStrategy',
    'Individual',
    'SteadyStateStrategy'
]
