# gradnoise/permutation.py
"""
Permutation tables used to hash integer lattice coordinates.
"""

import logging
from typing import Iterable

import numpy as np

from .errors import ConstructionError

logger = logging.getLogger(__name__)


def next_power_of_two(size: int) -> int:
    pow2 = 1
    while pow2 < size:
        pow2 <<= 1
    return pow2


class PermutationTable:
    """
    Shuffled table of the indices ``0 .. size - 1``.

    The table is built once from an injected random source and is read-only
    afterwards, so a single instance can be shared by any number of
    evaluators and threads.
    """

    def __init__(self, rng, size: int):
        """
        Args:
            rng: Random source exposing ``integers(low, high)``
                 (a ``numpy.random.Generator`` or compatible object)
            size: Number of entries, must be > 0
        """
        if size <= 0:
            raise ConstructionError(f"Permutation table size must be > 0, got {size}")

        table = np.arange(size, dtype=np.int64)
        # Fisher-Yates
        for i in range(size - 1, 0, -1):
            j = int(rng.integers(0, i + 1))
            table[i], table[j] = table[j], table[i]

        self._set_table(table)
        logger.debug("Built permutation table of size %d", size)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "PermutationTable":
        """Wrap an explicit permutation (must be a bijection on ``0 .. len - 1``)."""
        table = np.array(list(values), dtype=np.int64)
        if table.size == 0:
            raise ConstructionError("Permutation table must not be empty")
        if not np.array_equal(np.sort(table), np.arange(table.size)):
            raise ConstructionError(
                f"Values are not a permutation of 0..{table.size - 1}: {table.tolist()}"
            )
        instance = cls.__new__(cls)
        instance._set_table(table)
        return instance

    def _set_table(self, table: np.ndarray):
        table.flags.writeable = False
        self._table = table
        # Plain ints are much faster than numpy scalars on the lookup path
        self._lookup = tuple(int(v) for v in table)

    def values(self) -> np.ndarray:
        return self._table

    def __len__(self) -> int:
        return len(self._lookup)

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._lookup):
            raise IndexError(f"Permutation index {index} out of bounds [0, {len(self._lookup) - 1}]")
        return self._lookup[index]

    def get_unchecked(self, index: int) -> int:
        """Lookup without range validation, ``index`` must already be reduced modulo ``len``."""
        return self._lookup[index]

    @property
    def is_power_of_two(self) -> bool:
        size = len(self._lookup)
        return size & (size - 1) == 0

    def __repr__(self) -> str:
        return f"PermutationTable(size={len(self)})"
