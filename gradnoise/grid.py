# gradnoise/grid.py
"""
Dense row-major storage for 1D, 2D and 3D lattices.
"""

from typing import Sequence, Tuple, Union

import numpy as np

from .errors import ConstructionError, LatticeIndexError


class Grid:
    """
    Dense grid of values (scalars or fixed-size vectors).

    Cells are stored in one array with the linear index
    ``x + y * width + z * width * height``.
    """

    def __init__(self, shape: Sequence[int], data):
        shape = tuple(int(s) for s in shape)
        if not 1 <= len(shape) <= 3:
            raise ConstructionError(f"Grid must have 1 to 3 axes, got {len(shape)}")
        if any(s <= 0 for s in shape):
            raise ConstructionError(f"Grid axes must be > 0, got {shape}")

        data = np.array(data, dtype=np.float64)
        expected = int(np.prod(shape))
        if data.shape[0] != expected:
            raise ConstructionError(
                f"Grid {shape} needs {expected} cells, got {data.shape[0]}"
            )
        data.flags.writeable = False

        self._shape = shape
        self._data = data
        self._strides = tuple(int(np.prod(shape[:axis])) for axis in range(len(shape)))

    @classmethod
    def build(cls, shape: Sequence[int], builder) -> "Grid":
        """Fill a grid by calling ``builder.make_gradient()`` once per cell in linear order."""
        size = int(np.prod(tuple(shape)))
        return cls(shape, [builder.make_gradient() for _ in range(size)])

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def width(self) -> int:
        return self._shape[0]

    @property
    def height(self) -> int:
        return self._shape[1] if len(self._shape) > 1 else 1

    @property
    def depth(self) -> int:
        return self._shape[2] if len(self._shape) > 2 else 1

    @property
    def data(self) -> np.ndarray:
        return self._data

    def __len__(self) -> int:
        return self._data.shape[0]

    def index_from_coords(self, coords: Union[int, Sequence[int]]) -> int:
        """
        Linear index of a cell.

        Raises:
            LatticeIndexError: wrong arity or a coordinate outside ``[0, axis)``
        """
        if isinstance(coords, (int, np.integer)):
            coords = (coords,)
        if len(coords) != len(self._shape):
            raise LatticeIndexError(
                f"Grid {self._shape} indexed with {len(coords)} coordinates"
            )
        index = 0
        for axis, (c, size, stride) in enumerate(zip(coords, self._shape, self._strides)):
            if not 0 <= c < size:
                raise LatticeIndexError(
                    f"Axis {axis} index {c} out of bounds [0, {size - 1}]"
                )
            index += c * stride
        return index

    def __getitem__(self, coords):
        return self._data[self.index_from_coords(coords)]

    def __repr__(self) -> str:
        return f"Grid(shape={self._shape})"
