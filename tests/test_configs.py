"""
Tests for the configuration models.
"""
import pytest
from pydantic import ValidationError

from opti.configs import (
    BoundsConfig,
    DifferentialConfig,
    GenerationalConfig,
    ParentCentricConfig,
    RunnerConfig,
    build_config,
)
from opti.exceptions import ConfigurationError


class TestConfigs:

    def test_defaults(self):
        pcx = ParentCentricConfig()
        assert (pcx.num_parents, pcx.sd1, pcx.sd2) == (3, 0.1, 0.1)
        de = DifferentialConfig()
        assert de.cr == 1.0
        assert de.c == pytest.approx(0.61803398875)
        assert GenerationalConfig(population_size=10).num_offspring == 2
        assert RunnerConfig(n_evolutions=5).progress_log_freq == 10.0

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            DifferentialConfig(cr=0.5, f=0.5)

    def test_bounds(self):
        bounds = BoundsConfig(min=[0.0, -1.0], max=[1.0, 1.0])
        assert bounds.max == [1.0, 1.0]
        with pytest.raises(ValidationError):
            BoundsConfig(min=[0.0], max=[1.0, 1.0])
        with pytest.raises(ValidationError):
            BoundsConfig(min=[2.0], max=[1.0])
        with pytest.raises(ValidationError):
            BoundsConfig(min=[], max=[])

    def test_build_config_translates_errors(self):
        with pytest.raises(ConfigurationError) as excinfo:
            build_config(ParentCentricConfig, num_parents=1)
        assert isinstance(excinfo.value.__cause__, ValidationError)
        assert isinstance(excinfo.value, ValueError)
