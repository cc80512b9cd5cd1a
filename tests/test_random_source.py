"""
Tests for RandomSource.
"""
import numpy as np

from opti.utils import random_source as random_module
from opti.utils.random_source import RandomSource


class TestRandomSource:

    def test_same_seed_same_stream(self):
        a = RandomSource(3)
        b = RandomSource(3)
        assert [a.rand() for _ in range(5)] == [b.rand() for _ in range(5)]

    def test_reseed_restarts_stream(self):
        source = RandomSource(3)
        first = source.rand_norm(0.0, 1.0, size=4)
        source.seed(3)
        assert np.array_equal(first, source.rand_norm(0.0, 1.0, size=4))

    def test_ranges(self, random_source):
        values = random_source.rand(2.5, size=1000)
        assert values.min() >= 0 and values.max() < 2.5
        ints = [random_source.rand_int(3) for _ in range(500)]
        assert set(ints) == {0, 1, 2, 3}
        assert all(0 <= random_source.rand_exc() < 1 for _ in range(500))

    def test_zero_stddev_returns_mean(self, random_source):
        mean = np.array([1.5, -2.0, 0.25])
        assert np.array_equal(random_source.rand_norm(mean, 0.0, size=3), mean)

    def test_module_seed(self):
        random_module.seed(11)
        first = random_module.rng.rand()
        random_module.seed(11)
        assert random_module.rng.rand() == first
