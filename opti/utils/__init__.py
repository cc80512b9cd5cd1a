from .logger import get_logger, setup_logging
from .random_source import RandomSource, rng, seed
from .shuffle import full_shuffle, partial_shuffle
from .geometry import squared_perpendicular_distance

__all__ = [
    'get_logger',
    'setup_logging',
    'RandomSource',
    'rng',
    'seed',
    'full_shuffle',
    'partial_shuffle',
    'squared_perpendicular_distance'
]
