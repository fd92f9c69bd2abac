# gradnoise/noise.py
"""
The common evaluation interface shared by every noise source and adapter.

Any object implementing ``value_at(pos) -> float`` and ``frequency()`` can be
composed with the adapters. Compositions are plain object trees, built bottom
up and never mutated afterwards, so a finished tree may be evaluated from
several threads at once.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

import numpy as np

from .errors import MissingAxisError
from .point import Point, arity


class Noise(ABC):
    """Base class of all noise sources"""

    @abstractmethod
    def value_at(self, pos: Point) -> float:
        """Evaluate the noise at ``pos`` (a float in 1D, a tuple otherwise)."""

    @abstractmethod
    def frequency(self) -> Point:
        """Lattice cells spanning the unit range on each axis."""

    @property
    def dim(self) -> Optional[int]:
        """Number of axes, None for sources valid in any dimension."""
        f = self.frequency()
        return None if f is None else arity(f)

    def _axis_frequency(self, axis: int, name: str) -> float:
        f = self.frequency()
        dim = None if f is None else arity(f)
        if dim is None or axis >= dim:
            raise MissingAxisError(
                f"{type(self).__name__} has no {name}: frequency {f!r} covers {dim} axes"
            )
        return f if dim == 1 else f[axis]

    def width(self) -> float:
        return self._axis_frequency(0, "width")

    def height(self) -> float:
        return self._axis_frequency(1, "height")

    def depth(self) -> float:
        return self._axis_frequency(2, "depth")

    def sample_axes(self, axes: Sequence[np.ndarray]) -> np.ndarray:
        """
        Evaluate at every combination of the axis coordinates.

        Args:
            axes: One coordinate array per axis, in x, y, z order

        Returns:
            float64 array indexed ``[x]``, ``[y, x]`` or ``[z, y, x]``
        """
        shape = tuple(len(a) for a in reversed(axes))
        out = np.empty(shape, dtype=np.float64)
        if len(axes) == 1:
            for i, x in enumerate(axes[0]):
                out[i] = self.value_at(float(x))
            return out
        for index in np.ndindex(*shape):
            pos = tuple(float(axes[axis][i]) for axis, i in enumerate(reversed(index)))
            out[index] = self.value_at(pos)
        return out

    # ------------------------------------------------------------------
    # Output adapters
    # ------------------------------------------------------------------

    def scale(self, amplitude: float) -> "Noise":
        from .adapter.scale import Scale
        return Scale(self, amplitude)

    def with_range(self, min: float, max: float) -> "Noise":
        from .adapter.scale import WithRange
        return WithRange(self, min, max)

    def transform(self, f: Callable[[Point, float], float]) -> "Noise":
        from .adapter.transform import Transform
        return Transform(self, f)

    def negate(self) -> "Noise":
        from .adapter.transform import Negate
        return Negate(self)

    def clamp(self, low: float, high: float) -> "Noise":
        from .adapter.filter import Clamp
        return Clamp(self, low, high)

    def filter(self, start: float, end: float, kind, blend_fn=None) -> "Noise":
        from .adapter.filter import Filter
        return Filter(self, start, end, kind, blend_fn)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def combine(self, right: "Noise", combiner: Callable[[float, float], float]) -> "Noise":
        from .adapter.combine import Combine
        return Combine(self, right, combiner)

    def add(self, right: "Noise") -> "Noise":
        from .adapter.combine import Add
        return Add(self, right)

    def multiply(self, right: "Noise") -> "Noise":
        from .adapter.combine import Multiply
        return Multiply(self, right)

    def select(self, right: "Noise", criteria: "Noise", threshold: float) -> "Noise":
        from .adapter.combine import Select
        return Select(self, right, criteria, threshold)

    def blend(self, right: "Noise", criteria: "Noise",
              blend_fn: Callable[[float, float, float], float]) -> "Noise":
        from .adapter.combine import Blend
        return Blend(self, right, criteria, blend_fn)

    # ------------------------------------------------------------------
    # Input adapters
    # ------------------------------------------------------------------

    def scale_input(self, scale: Point) -> "Noise":
        from .adapter.input import ScaleInput
        return ScaleInput(self, scale)

    def shift_input(self, shift: Point) -> "Noise":
        from .adapter.input import ShiftInput
        return ShiftInput(self, shift)

    def clamp_input(self, low: Point, high: Point) -> "Noise":
        from .adapter.input import ClampInput
        return ClampInput(self, low, high)

    def wrap_input(self, low: Point, high: Point) -> "Noise":
        from .adapter.input import WrapInput
        return WrapInput(self, low, high)

    # ------------------------------------------------------------------
    # Dimension adapters
    # ------------------------------------------------------------------

    def extend(self) -> "Noise":
        """Lift into one more dimension, the new last axis is ignored."""
        from .adapter.extend import Extension2d, Extension3d
        if self.dim == 1:
            return Extension2d(self)
        return Extension3d(self)

    def slice(self, value: float) -> "Noise":
        """Fix the last axis at ``value``."""
        from .adapter.slice import Slice1d, Slice2d
        if self.dim == 2:
            return Slice1d(self, value)
        return Slice2d(self, value)
