"""
Fisher-Yates shuffles over index tables.

Tables can be any mutable sequence: numpy integer arrays for the steady-state
donor table, plain lists of individuals for the generational population.
"""

from typing import MutableSequence, Optional

from .random_source import RandomSource, resolve


def full_shuffle(table: MutableSequence, num: int, random_source: Optional[RandomSource] = None):
    """
    Shuffle the first ``num`` entries of ``table`` in place, uniformly.

    Args:
        table: Table to permute
        num: Number of leading entries taking part in the shuffle
        random_source: Source of randomness, defaults to the shared one
    """
    partial_shuffle(table, num, num, random_source=random_source)


def partial_shuffle(
    table: MutableSequence,
    num_total: int,
    num_shuffle: int,
    offset: int = 0,
    random_source: Optional[RandomSource] = None
):
    """
    Partial forward Fisher-Yates shuffle.

    After the call, ``table[offset:offset + num_shuffle]`` holds ``num_shuffle``
    distinct entries drawn uniformly without replacement from
    ``table[offset:num_total]``. The remaining entries stay a permutation of
    what was there, in no particular order. Costs O(num_shuffle).

    Args:
        table: Table to permute in place
        num_total: End (exclusive) of the region entries are drawn from
        num_shuffle: Number of entries to draw
        offset: Start of the region; entries before it are left alone
        random_source: Source of randomness, defaults to the shared one
    """
    if num_shuffle < 0 or offset + num_shuffle > num_total:
        raise ValueError(
            f"Cannot draw {num_shuffle} entries from table[{offset}:{num_total}]"
        )
    rng = resolve(random_source)
    for t in range(offset, offset + num_shuffle):
        u = t + rng.rand_int(num_total - t - 1)
        table[t], table[u] = table[u], table[t]
