# gradnoise/provider.py
"""
Gradient providers: map an integer lattice coordinate to a gradient.

* :class:`GradientTable` - flat table indexed modulo its length
* :class:`PermutedGradientTable` - flat table addressed through a lattice
  hash built on a :class:`~gradnoise.permutation.PermutationTable`
* :class:`GradientGrid` - one gradient per lattice vertex, no hashing,
  bounded extent
"""

import logging
import math
import warnings
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from .config import DEFAULT_PERMUTATION_SIZE
from .errors import ConstructionError
from .grid import Grid
from .permutation import PermutationTable, next_power_of_two

logger = logging.getLogger(__name__)

LatticeIndex = Union[int, Tuple[int, ...]]

# Addressing modes of a lattice handed to the compiled evaluators
LATTICE_HASHED = 0
LATTICE_MODULO = 1
LATTICE_DENSE = 2

_NO_PERMUTATION = np.zeros(1, dtype=np.int64)
_NO_SHAPE = np.zeros(3, dtype=np.int64)
_NO_PERMUTATION.flags.writeable = False
_NO_SHAPE.flags.writeable = False


class Lattice(NamedTuple):
    """
    Array view of a provider for the compiled evaluators.

    ``gradients`` is always 2D (one row per gradient, a single column in 1D).
    ``perm`` is only read in hashed mode, ``shape`` (vertices per axis,
    padded with ones to three axes) only in dense mode.
    """
    mode: int
    perm: np.ndarray
    gradients: np.ndarray
    shape: np.ndarray


def _freeze_gradient(g):
    if isinstance(g, (int, float, np.floating, np.integer)):
        return float(g)
    return tuple(float(v) for v in g)


class GradientTable:
    """Flat gradient table, ``get_gradient(i) == gradients[i % len]``"""

    def __init__(self, gradients: Iterable):
        lookup = tuple(_freeze_gradient(g) for g in gradients)
        if not lookup:
            raise ConstructionError("Gradient table must hold at least one gradient")

        values = np.array(lookup, dtype=np.float64)
        values.flags.writeable = False
        self._values = values
        self._lookup = lookup

    @classmethod
    def build(cls, builder, size: int) -> "GradientTable":
        """Call ``builder.make_gradient()`` ``size`` times."""
        if size <= 0:
            raise ConstructionError(f"Gradient table size must be > 0, got {size}")
        return cls(builder.make_gradient() for _ in range(size))

    def values(self) -> np.ndarray:
        return self._values

    def __len__(self) -> int:
        return len(self._lookup)

    def get_gradient(self, index: int):
        return self._lookup[index % len(self._lookup)]

    __getitem__ = get_gradient

    def dimensions(self) -> Optional[Tuple[int, ...]]:
        """Unbounded: any integer index is valid."""
        return None

    def lattice(self) -> Lattice:
        """Modulo-addressed rows, meaningful for 1D evaluators only."""
        rows = self._values.reshape(len(self._lookup), -1)
        return Lattice(LATTICE_MODULO, _NO_PERMUTATION, rows, _NO_SHAPE)

    def __repr__(self) -> str:
        return f"GradientTable(size={len(self)})"


class PermutedGradientTable:
    """
    Gradient table addressed by a lattice hash.

    The hash folds the axes one at a time through the permutation table::

        hash(x)       = perm[x & mask]
        hash(x, y)    = perm[hash(x) ^ (y & mask)]
        hash(x, y, z) = perm[hash(x, y) ^ (z & mask)]

    with ``mask = len(perm) - 1``. The permutation size is therefore always a
    power of two, and every intermediate value stays inside the table.
    """

    def __init__(self, permutations: PermutationTable, gradients: GradientTable):
        if not permutations.is_power_of_two:
            raise ConstructionError(
                f"Permutation table size must be a power of two, got {len(permutations)}"
            )
        self._permutations = permutations
        self._gradients = gradients
        self._perm = permutations.get_unchecked
        self._mask = len(permutations) - 1

    @classmethod
    def new(cls, rng, builder, size: int,
            permutation_size: int = DEFAULT_PERMUTATION_SIZE) -> "PermutedGradientTable":
        """
        Build a table of ``size`` gradients and a fresh permutation.

        Args:
            rng: Random source for the permutation shuffle
            builder: Gradient builder called ``size`` times
            size: Number of gradients
            permutation_size: Rounded up to the next power of two
        """
        permutations = PermutationTable(rng, cls._adjust_size(permutation_size))
        gradients = GradientTable.build(builder, size)
        logger.debug(
            "Built permuted gradient table: %d gradients, %d permutations",
            size, len(permutations),
        )
        return cls(permutations, gradients)

    @classmethod
    def from_values(cls, rng, values: Iterable,
                    permutation_size: int = DEFAULT_PERMUTATION_SIZE) -> "PermutedGradientTable":
        permutations = PermutationTable(rng, cls._adjust_size(permutation_size))
        return cls(permutations, GradientTable(values))

    def with_permutation_table_size(self, rng, size: int) -> "PermutedGradientTable":
        """New table sharing these gradients with a freshly shuffled permutation."""
        return PermutedGradientTable(PermutationTable(rng, self._adjust_size(size)), self._gradients)

    @staticmethod
    def _adjust_size(size: int) -> int:
        if size <= 0:
            raise ConstructionError(f"Permutation table size must be > 0, got {size}")
        adjusted = next_power_of_two(size)
        if adjusted != size:
            warnings.warn(
                f"Permutation table size {size} is not a power of two, using {adjusted}"
            )
        return adjusted

    @property
    def gradient_table(self) -> GradientTable:
        return self._gradients

    @property
    def permutation_table(self) -> PermutationTable:
        return self._permutations

    # The masked value and every XOR of two masked values are < len(perm),
    # so the unchecked lookups below cannot go out of range.

    def index_1d(self, x: int) -> int:
        return self._perm(x & self._mask)

    def index_2d(self, index: Sequence[int]) -> int:
        return self._perm(self.index_1d(index[0]) ^ (index[1] & self._mask))

    def index_3d(self, index: Sequence[int]) -> int:
        return self._perm(self.index_2d(index) ^ (index[2] & self._mask))

    def index_4d(self, index: Sequence[int]) -> int:
        return self._perm(self.index_3d(index) ^ (index[3] & self._mask))

    def hash(self, index: LatticeIndex) -> int:
        if not isinstance(index, tuple):
            return self.index_1d(index)
        if len(index) == 1:
            return self.index_1d(index[0])
        if len(index) == 2:
            return self.index_2d(index)
        if len(index) == 3:
            return self.index_3d(index)
        if len(index) == 4:
            return self.index_4d(index)
        raise ValueError(f"Lattice hash supports 1 to 4 axes, got {len(index)}")

    def get_gradient(self, index: LatticeIndex):
        return self._gradients.get_gradient(self.hash(index))

    def dimensions(self) -> Optional[Tuple[int, ...]]:
        """Unbounded: the hash wraps every axis."""
        return None

    def lattice(self) -> Lattice:
        rows = self._gradients.lattice().gradients
        return Lattice(LATTICE_HASHED, self._permutations.values(), rows, _NO_SHAPE)

    def __repr__(self) -> str:
        return (
            f"PermutedGradientTable(gradients={len(self._gradients)}, "
            f"permutations={len(self._permutations)})"
        )


def cube_gradient_table_2d(rng) -> PermutedGradientTable:
    """
    Fixed 2D table: the four axis directions (twice) and the four unit
    diagonals, addressed through a random permutation.
    """
    d = 1.0 / math.sqrt(2.0)
    return PermutedGradientTable.from_values(rng, [
        (1.0, 0.0), (0.0, -1.0), (-1.0, 0.0), (0.0, 1.0),
        (1.0, 0.0), (0.0, -1.0), (-1.0, 0.0), (0.0, 1.0),
        (d, d), (d, -d), (-d, -d), (-d, d),
    ])


class GradientGrid:
    """
    One gradient per lattice vertex, indexed directly.

    A grid covering N cells along an axis holds N + 1 vertices on that axis.
    Lookups outside the vertex range raise
    :class:`~gradnoise.errors.LatticeIndexError`.
    """

    def __init__(self, grid: Grid):
        self._grid = grid

    @classmethod
    def build(cls, frequency, builder) -> "GradientGrid":
        """Grid with ``ceil(f) + 1`` vertices per axis."""
        if isinstance(frequency, tuple):
            shape = tuple(int(math.ceil(f)) + 1 for f in frequency)
        else:
            shape = (int(math.ceil(frequency)) + 1,)
        logger.debug("Building gradient grid with %s vertices", shape)
        return cls(Grid.build(shape, builder))

    @property
    def grid(self) -> Grid:
        return self._grid

    def get_gradient(self, index: LatticeIndex):
        g = self._grid[index]
        if g.ndim == 0:
            return float(g)
        return g

    def dimensions(self) -> Tuple[int, ...]:
        """Number of cells per axis."""
        return tuple(s - 1 for s in self._grid.shape)

    def lattice(self) -> Lattice:
        """Rows in x-fastest vertex order, ``shape`` holds the vertex counts."""
        shape = self._grid.shape
        rows = self._grid.data.reshape(int(np.prod(shape)), -1)
        padded = np.array(shape + (1,) * (3 - len(shape)), dtype=np.int64)
        return Lattice(LATTICE_DENSE, _NO_PERMUTATION, rows, padded)

    def __repr__(self) -> str:
        return f"GradientGrid(cells={self.dimensions()})"
