from typing import List, Optional
from pydantic import Field, model_validator
from .base import BaseConfig


class SphereConfig(BaseConfig):
    num_dimensions: int = Field(..., gt=0, description="Number of parameters")
    low: float = Field(-1.0, description="Lower advisory bound for every parameter")
    high: float = Field(1.0, description="Upper advisory bound for every parameter")

    @model_validator(mode="after")
    def validate_range(self) -> "SphereConfig":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")
        return self


class PolynomialFitConfig(BaseConfig):
    """
    Configuration for PolynomialFitProblem.

    Attributes:
        num_params (int): Number of coefficients, three per chained polynomial.
        num_samples (int): Number of sample nodes between start_x and end_x.
        start_x (float): First sample node.
        end_x (float): Last sample node.
        ramp (float): Blend between RMS error (0) and max absolute error (1).
        candidate (List[float], optional): Known good coefficients to refine.
            The bounds are then a narrow box around it.
    """
    num_params: int = Field(15, gt=0, description="Number of coefficients")
    num_samples: int = Field(8193, ge=2, description="Number of sample nodes")
    start_x: float = Field(0.001, description="First sample node")
    end_x: float = Field(1.010916328, description="Last sample node")
    ramp: float = Field(0.0, ge=0, le=1.0, description="RMS to max-abs error blend")
    candidate: Optional[List[float]] = Field(None, description="Coefficients to refine")

    @model_validator(mode="after")
    def validate_shape(self) -> "PolynomialFitConfig":
        if self.num_params % 3 != 0:
            raise ValueError(f"num_params ({self.num_params}) must be a multiple of 3")
        if self.candidate is not None and len(self.candidate) != self.num_params:
            raise ValueError(
                f"candidate has {len(self.candidate)} values, expected {self.num_params}"
            )
        return self
