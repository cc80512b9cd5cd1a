from .base import BaseConfig, build_config
from .bounds import BoundsConfig
from .recombinators import ParentCentricConfig, DifferentialConfig
from .strategies import GenerationalConfig, SteadyStateConfig
from .runner import RunnerConfig

__all__ = [
    'BaseConfig',
    'build_config',
    'BoundsConfig',
    'ParentCentricConfig',
    'DifferentialConfig',
    'GenerationalConfig',
    'SteadyStateConfig',
    'RunnerConfig'
]

from .problems import SphereConfig, PolynomialFitConfig

__all__ += ['SphereConfig', 'PolynomialFitConfig']
