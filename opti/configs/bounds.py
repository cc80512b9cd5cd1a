from typing import List
from pydantic import model_validator
from .base import BaseConfig


class BoundsConfig(BaseConfig):
    """
    Advisory box bounds used to initialize a population.

    Attributes:
        min (List[float]): Lower bound per dimension.
        max (List[float]): Upper bound per dimension.
    """
    min: List[float]
    max: List[float]

    @model_validator(mode="after")
    def validate_bounds(self) -> "BoundsConfig":
        if len(self.min) == 0:
            raise ValueError("Bounds need at least one dimension")
        if len(self.min) != len(self.max):
            raise ValueError(
                f"min and max lengths differ: {len(self.min)} != {len(self.max)}"
            )
        for i, (low, high) in enumerate(zip(self.min, self.max)):
            if low > high:
                raise ValueError(f"Dimension {i}: min ({low}) must be <= max ({high})")
        return self
