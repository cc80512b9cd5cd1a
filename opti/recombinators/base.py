import abc
from typing import Optional, Sequence
import numpy as np

from opti.exceptions import ConfigurationError
from opti.utils.random_source import RandomSource, resolve


class Recombinator(abc.ABC):
    """
    Base class for recombination operators used by the evolutionary strategies.

    A strategy drives a recombinator in a fixed order:

    1. ``set_num_dimensions`` once, with the problem's dimension count
    2. ``get_num_parents`` to learn how many parents each offspring needs
    3. ``recombine`` any number of times to make offspring from parents

    Attributes:
        num_dimensions (int): Dimension count, None until configured.
    """

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.num_dimensions: Optional[int] = None
        self.random_source = resolve(random_source)

    def set_num_dimensions(self, num_dimensions: int):
        if self.num_dimensions is not None:
            raise ConfigurationError(
                f"{type(self).__name__} is already configured for {self.num_dimensions} dimensions"
            )
        if num_dimensions <= 0:
            raise ConfigurationError(f"Number of dimensions must be positive, got {num_dimensions}")
        self.num_dimensions = int(num_dimensions)
        self.on_num_dimensions()

    def on_num_dimensions(self):
        """
        Called once the dimension count is known.
        Subclasses allocate their scratch buffers here.
        """
        pass

    @abc.abstractmethod
    def get_num_parents(self) -> int:
        """Number of parents each offspring is made from. Constant for the instance."""
        pass

    @abc.abstractmethod
    def recombine(self, dest: np.ndarray, parents: Sequence[np.ndarray]):
        """
        Write one offspring of ``parents`` into ``dest``.

        Args:
            dest (np.ndarray): Output buffer of ``num_dimensions`` values. Must not
                be one of the parents; the result is undefined if it is.
            parents (Sequence[np.ndarray]): ``get_num_parents()`` parent vectors.
        """
        pass

    def _check_configured(self):
        if self.num_dimensions is None:
            raise ConfigurationError(
                f"{type(self).__name__}.set_num_dimensions() must be called before recombine()"
            )
