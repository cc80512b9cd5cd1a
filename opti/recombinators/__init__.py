"""
Recombination operators producing one offspring vector from several parents.
"""

from .base import Recombinator
from .parent_centric import ParentCentricRecombinator
from .differential import DifferentialRecombinator

__all__ = [
    'Recombinator',
    'ParentCentricRecombinator',
    'DifferentialRecombinator'
]
