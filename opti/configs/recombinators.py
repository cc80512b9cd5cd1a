from pydantic import Field
from .base import BaseConfig


class ParentCentricConfig(BaseConfig):
    """
    Configuration for the parent-centric (PCX) recombinator.

    Attributes:
        num_parents (int): Parents per offspring, the first being the center.
        sd1 (float): Spread scale along the center-to-centroid direction.
        sd2 (float): Spread scale perpendicular to that direction.
    """
    num_parents: int = Field(3, ge=2, description="Parents per offspring")
    sd1: float = Field(0.1, ge=0, description="Axial spread scale")
    sd2: float = Field(0.1, ge=0, description="Perpendicular spread scale")


class DifferentialConfig(BaseConfig):
    """
    Configuration for the differential evolution recombinator.

    Attributes:
        cr (float): Probability of extending the mutated run by one more dimension.
            0 mutates a single dimension, 1 mutates all of them.
        c (float): Weight of the donor difference vector.
    """
    cr: float = Field(1.0, ge=0, le=1.0, description="Crossover continuation probability")
    c: float = Field(0.61803398875, ge=0, description="Difference vector scale")
