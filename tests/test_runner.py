"""
Tests for the run driver and the minimize() convenience function.
"""
import pytest
import numpy as np
import pandas as pd

from opti.exceptions import ConfigurationError
from opti.problems import PolynomialFitProblem
from opti.problems.sphere import SphereProblem
from opti.recombinators import DifferentialRecombinator
from opti.runner import OptimizationRunner, RunResult, minimize
from opti.strategies import SteadyStateStrategy, GenerationalStrategy


class TestOptimizationRunner:
    """Tests for OptimizationRunner."""

    def test_history_sampling(self, sphere_2d, random_source):
        strategy = SteadyStateStrategy(sphere_2d, 20, random_source=random_source)
        runner = OptimizationRunner(strategy, 100, record_every=25)
        result = runner.run()

        assert isinstance(result, RunResult)
        assert [record.evolution for record in result.history] == [25, 50, 75, 100]
        costs = [record.best_cost for record in result.history]
        assert costs == sorted(costs, reverse=True)
        assert result.best_cost == strategy.best_cost
        assert result.best_vector == strategy.best().tolist()

    def test_to_dataframe(self, sphere_2d, random_source):
        strategy = GenerationalStrategy(sphere_2d, 20, random_source=random_source)
        result = OptimizationRunner(strategy, 50, progress_log_freq=20).run()
        df = result.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['best_cost', 'average_cost']
        assert list(df.index) == [10, 20, 30, 40, 50]

    def test_progress_callbacks(self, sphere_2d, random_source):
        strategy = SteadyStateStrategy(sphere_2d, 20, random_source=random_source)
        runner = OptimizationRunner(strategy, 40, record_every=10)
        seen = []

        def broken(progress):
            raise RuntimeError("callback failure")

        runner.add_progress_callback(broken)
        runner.add_progress_callback(seen.append)
        runner.run()

        assert [progress['evolution'] for progress in seen] == [10, 20, 30, 40]
        assert set(seen[0]) == {'evolution', 'best_cost', 'average_cost'}

    def test_sweep_callbacks(self, sphere_2d, random_source):
        """Called at the start of every sweep of the population."""
        strategy = SteadyStateStrategy(sphere_2d, 30, random_source=random_source)
        runner = OptimizationRunner(strategy, 95, progress_log_freq=0)
        calls = []

        def on_sweep(current, t):
            assert current.pos == 0
            calls.append(t)
            current.statistics()

        runner.add_sweep_callback(on_sweep)
        runner.run()
        assert calls == [0, 30, 60, 90]

    def test_ramp_schedule(self, random_source):
        """Changing the cost blend between sweeps keeps cached costs and the average in step."""
        problem = PolynomialFitProblem(num_params=6, num_samples=65)
        recombinator = DifferentialRecombinator(cr=0.999, c=0.76, random_source=random_source)
        strategy = SteadyStateStrategy(problem, 20, recombinator, random_source=random_source)
        runner = OptimizationRunner(strategy, 100, progress_log_freq=0)

        def on_sweep(current, t):
            problem.ramp = min(1.0, t / 60)
            current.statistics()

        runner.add_sweep_callback(on_sweep)
        result = runner.run()

        assert problem.ramp == 1.0
        for t in range(strategy.population_size):
            fresh = problem.cost_function(strategy.population[t].copy(), np.inf)
            assert strategy.costs[t] == pytest.approx(fresh)
        assert strategy.average_cost() == pytest.approx(strategy.costs.mean(), rel=1e-9)
        assert result.best_cost == pytest.approx(strategy.costs.min())

    def test_sweep_callback_errors_propagate(self, sphere_2d, random_source):
        strategy = SteadyStateStrategy(sphere_2d, 10, random_source=random_source)
        runner = OptimizationRunner(strategy, 10)

        def on_sweep(current, t):
            raise RuntimeError("stop")

        runner.add_sweep_callback(on_sweep)
        with pytest.raises(RuntimeError):
            runner.run()

    def test_zero_evolutions(self, sphere_2d, random_source):
        strategy = SteadyStateStrategy(sphere_2d, 10, random_source=random_source)
        result = OptimizationRunner(strategy, 0).run()
        assert result.history == []
        assert result.best_cost == strategy.best_cost

    def test_rejects_non_strategy(self):
        with pytest.raises(ConfigurationError):
            OptimizationRunner(object(), 10)

    def test_rejects_bad_config(self, sphere_2d, random_source):
        strategy = SteadyStateStrategy(sphere_2d, 10, random_source=random_source)
        with pytest.raises(ConfigurationError):
            OptimizationRunner(strategy, -1)
        with pytest.raises(ConfigurationError):
            OptimizationRunner(strategy, 10, progress_log_freq=150)


class TestMinimize:
    """Tests for minimize()."""

    def test_sphere(self):
        result = minimize(
            SphereProblem(num_dimensions=2),
            strategy='steady_state',
            population_size=30,
            n_evolutions=5000,
            seed=1,
            cr=0.9,
            c=0.7
        )
        assert result.best_cost < 1e-4
        assert len(result.best_vector) == 2

    def test_sphere_generational(self):
        """G3 runs end to end; how far a single seed gets is covered by the strategy tests."""
        result = minimize(
            SphereProblem(num_dimensions=2),
            strategy='generational',
            population_size=30,
            n_evolutions=5000,
            seed=1,
            progress_log_freq=10
        )
        assert len(result.best_vector) == 2
        assert np.isfinite(result.best_cost)
        costs = [record.best_cost for record in result.history]
        assert costs == sorted(costs, reverse=True)
        assert result.best_cost == costs[-1]
        assert result.best_cost < 1e-2

    def test_reproducible(self):
        first = minimize(SphereProblem(num_dimensions=3), n_evolutions=300, seed=7)
        second = minimize(SphereProblem(num_dimensions=3), n_evolutions=300, seed=7)
        assert first.best_vector == second.best_vector
        assert first.best_cost == second.best_cost

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError):
            minimize(SphereProblem(num_dimensions=2), strategy='annealing')

    def test_bad_recombinator_parameter(self):
        with pytest.raises(ConfigurationError):
            minimize(SphereProblem(num_dimensions=2), cr=2.0)
