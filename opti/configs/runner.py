from typing import Optional
from pydantic import Field
from .base import BaseConfig


class RunnerConfig(BaseConfig):
    """
    Configuration for OptimizationRunner.

    Attributes:
        n_evolutions (int): Number of evolve() calls to make.
        progress_log_freq (float): Progress logging frequency (0-100%). 0 disables it.
        record_every (int, optional): Record a history entry every this many calls.
            Defaults to the progress logging interval.
    """
    n_evolutions: int = Field(..., ge=0, description="Number of evolve() calls")
    progress_log_freq: float = Field(10.0, ge=0, le=100, description="Progress logging frequency")
    record_every: Optional[int] = Field(None, ge=1, description="History sampling interval")
