"""
Run driver - repeatedly evolves a strategy and keeps track of progress.

The strategies do no termination detection of their own; the runner makes a
fixed number of ``evolve()`` calls and coordinates between:
- Progress logging and progress callbacks
- Sweep callbacks, the place to change cost parameters of a steady-state run
- Run history, exportable as a pandas DataFrame
"""

from typing import Any, Callable, Dict, List, Optional
import pandas as pd
from pydantic import BaseModel

from opti.configs.base import build_config
from opti.configs.runner import RunnerConfig
from opti.exceptions import ConfigurationError
from opti.problems.base import Problem
from opti.recombinators.differential import DifferentialRecombinator
from opti.recombinators.parent_centric import ParentCentricRecombinator
from opti.strategies.base import Strategy
from opti.strategies.generational import GenerationalStrategy
from opti.strategies.steady_state import SteadyStateStrategy
from opti.utils.random_source import RandomSource
from opti.utils.logger import get_logger

logger = get_logger(__name__)


class ProgressRecord(BaseModel):
    """State of the run after a given number of evolve() calls."""
    evolution: int
    best_cost: float
    average_cost: float


class RunResult(BaseModel):
    """
    Result of an optimization run.
    """
    best_cost: float
    best_vector: List[float]
    average_cost: float
    n_evolutions: int
    history: List[ProgressRecord] = []

    def to_dataframe(self) -> pd.DataFrame:
        """History as a DataFrame indexed by evolution count."""
        df = pd.DataFrame(
            [record.model_dump() for record in self.history],
            columns=['evolution', 'best_cost', 'average_cost']
        )
        return df.set_index('evolution')


class OptimizationRunner:
    """
    Makes ``n_evolutions`` calls to ``strategy.evolve()``.

    Progress callbacks receive a dict with the evolution count, best cost and
    average cost every ``record_every`` calls; a failing progress callback is
    logged and the run goes on. Sweep callbacks receive the strategy and the
    evolution count before every call that starts a new sweep of a
    steady-state population (``pos == 0``). That is the point where a caller
    may change the problem's cost parameters and call ``statistics()``.
    Errors raised by sweep callbacks propagate.

    Args:
        strategy: Strategy to evolve
        n_evolutions: Number of evolve() calls
        progress_log_freq: Progress logging frequency (0-100%), 0 disables progress logs
        record_every: History sampling interval, defaults to the logging interval
    """

    def __init__(
        self,
        strategy: Strategy,
        n_evolutions: int,
        progress_log_freq: float = 10.0,
        record_every: Optional[int] = None
    ):
        if not isinstance(strategy, Strategy):
            raise ConfigurationError(
                f"'strategy' must be an instance of a subclass of 'Strategy', not '{type(strategy).__name__}'"
            )
        self.strategy = strategy
        self.config = build_config(
            RunnerConfig,
            n_evolutions=n_evolutions,
            progress_log_freq=progress_log_freq,
            record_every=record_every
        )

        if self.config.progress_log_freq > 0:
            self.log_every = max(1, int(self.config.n_evolutions * self.config.progress_log_freq / 100))
        else:
            self.log_every = None
        self.record_every = self.config.record_every or self.log_every or max(1, self.config.n_evolutions)

        self._progress_callbacks: List[Callable[[Dict[str, Any]], None]] = []
        self._sweep_callbacks: List[Callable[[Strategy, int], None]] = []
        self.history: List[ProgressRecord] = []

    def add_progress_callback(self, callback: Callable[[Dict[str, Any]], None]):
        """Add callback for progress updates."""
        self._progress_callbacks.append(callback)

    def add_sweep_callback(self, callback: Callable[[Strategy, int], None]):
        """Add callback run at the start of every steady-state sweep."""
        self._sweep_callbacks.append(callback)

    def _notify_progress(self, progress_data: Dict[str, Any]):
        """Notify all progress callbacks."""
        for callback in self._progress_callbacks:
            try:
                callback(progress_data)
            except Exception as e:
                logger.error(f"Progress callback failed: {e}")

    def _record(self, evolution: int, best_cost: float):
        record = ProgressRecord(
            evolution=evolution,
            best_cost=best_cost,
            average_cost=self.strategy.average_cost()
        )
        self.history.append(record)
        self._notify_progress(record.model_dump())
        return record

    def run(self) -> RunResult:
        """
        Run the configured number of evolve() calls.

        Returns:
            RunResult with the best vector found and the sampled history
        """
        strategy = self.strategy
        n_evolutions = self.config.n_evolutions
        sweeps = isinstance(strategy, SteadyStateStrategy) and bool(self._sweep_callbacks)
        self.history = []

        logger.info(f"Starting optimization run: {n_evolutions} evolutions with {type(strategy).__name__}")
        best_cost = strategy.best_cost
        for t in range(n_evolutions):
            if sweeps and strategy.pos == 0:
                for callback in self._sweep_callbacks:
                    callback(strategy, t)
            best_cost = strategy.evolve()

            done = t + 1
            if done % self.record_every == 0 or done == n_evolutions:
                record = self._record(done, best_cost)
                if self.log_every is not None and (done % self.log_every == 0 or done == n_evolutions):
                    logger.info(
                        f"Evolution {done}/{n_evolutions} "
                        f"({done / n_evolutions * 100:.0f}%): "
                        f"best cost={record.best_cost:.20f}, average={record.average_cost:.20f}"
                    )

        best_vector = strategy.best()
        result = RunResult(
            best_cost=float(best_cost),
            best_vector=[] if best_vector is None else [float(v) for v in best_vector],
            average_cost=float(strategy.average_cost()),
            n_evolutions=n_evolutions,
            history=list(self.history)
        )
        logger.info(f"Optimization run finished: best cost={result.best_cost}")
        return result


STRATEGIES = {
    'steady_state': (SteadyStateStrategy, DifferentialRecombinator),
    'generational': (GenerationalStrategy, ParentCentricRecombinator),
}


def minimize(
    problem: Problem,
    *,
    strategy: str = 'steady_state',
    population_size: int = 30,
    n_evolutions: int = 5000,
    seed: Optional[int] = None,
    progress_log_freq: float = 10.0,
    **recombinator_kwargs
) -> RunResult:
    """
    User-facing function to minimize a problem with one of the built-in strategies.

    This function builds the recombinator and strategy, runs the evolution,
    and returns the best vector found.

    Args:
        problem: The problem to minimize.
        strategy: 'steady_state' (differential evolution) or 'generational' (G3 with PCX).
        population_size: Number of population members.
        n_evolutions: Number of evolve() calls.
        seed: An optional random seed for reproducibility.
        progress_log_freq: Progress logging frequency (0-100%).
        **recombinator_kwargs: Recombinator parameters, e.g. cr and c for
            differential evolution, num_parents, sd1 and sd2 for PCX.

    Returns:
        A RunResult with the best vector, its cost and the run history.

    Raises:
        ConfigurationError: If any of the parameters fail validation.
    """
    if strategy not in STRATEGIES:
        raise ConfigurationError(f"Unknown strategy '{strategy}'. Available: {sorted(STRATEGIES)}")
    strategy_cls, recombinator_cls = STRATEGIES[strategy]

    try:
        random_source = RandomSource(seed)
        recombinator = recombinator_cls(random_source=random_source, **recombinator_kwargs)
        optimizer = strategy_cls(problem, population_size, recombinator, random_source=random_source)
        runner = OptimizationRunner(optimizer, n_evolutions, progress_log_freq=progress_log_freq)
        return runner.run()
    except ConfigurationError:
        raise
    except Exception as e:
        logger.error(f"An unexpected error occurred during optimization: {e}", exc_info=True)
        raise
