import abc
import numpy as np


class Problem(abc.ABC):
    """
    Base class for optimization problems. Inherit from this class and implement
    the dimension count, the advisory bounds and the cost function being minimized.

    The bounds only seed the initial population: solutions found may lie outside
    of them, but one is found more easily when it lies within.
    """

    @abc.abstractmethod
    def get_num_dimensions(self) -> int:
        """Number of parameters to optimize."""
        pass

    @abc.abstractmethod
    def get_min(self) -> np.ndarray:
        """Lower advisory bound for every parameter."""
        pass

    @abc.abstractmethod
    def get_max(self) -> np.ndarray:
        """Upper advisory bound for every parameter."""
        pass

    @abc.abstractmethod
    def cost_function(self, params: np.ndarray, compare: float) -> float:
        """
        Cost of the parameter vector ``params``; lower is better.

        ``compare`` is an earlier cost the result will be compared to. Once the
        evaluation is known to end at or above it, the function may stop early
        and return any value >= ``compare``.

        The function may modify ``params`` in place to enforce constraints,
        wraparound and the like. Callers read the vector back after the call.

        Args:
            params (np.ndarray): Parameter vector, possibly rewritten.
            compare (float): Early-exit threshold, ``inf`` for a full evaluation.

        Returns:
            float: The cost.
        """
        pass

    def format_params(self, params: np.ndarray) -> str:
        return ",".join(f"{value:.17f}" for value in params[:self.get_num_dimensions()])

    def print_params(self, params: np.ndarray):
        """Print the parameter vector to stdout. Debugging aid only."""
        print(self.format_params(params))
