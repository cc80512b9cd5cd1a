from pydantic import Field
from .base import BaseConfig


class GenerationalConfig(BaseConfig):
    """
    Configuration for the generational (G3) strategy.

    Attributes:
        population_size (int): Number of individuals. Must leave room for the
            parents plus the two replacement candidates.
        num_offspring (int): Offspring produced per evolve() call.
    """
    population_size: int = Field(..., ge=1, description="Number of individuals")
    num_offspring: int = Field(2, ge=1, description="Offspring per evolve() call")


class SteadyStateConfig(BaseConfig):
    """
    Configuration for the steady-state (DE) strategy.

    Attributes:
        population_size (int): Number of population members.
    """
    population_size: int = Field(..., ge=1, description="Number of population members")
