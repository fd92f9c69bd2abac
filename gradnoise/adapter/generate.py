# gradnoise/adapter/generate.py
"""
Leaf sources that need no gradients.

Without a ``dimension`` or ``freq`` these sources fit any dimension: their
``dim`` is None and combinators take the frequency of the other inputs.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import ConstructionError
from ..noise import Noise
from ..point import MAX_DIM, Point, arity, saturate


def _check_shape(dimension: Optional[int], freq):
    if dimension is None:
        return
    if not 1 <= dimension <= MAX_DIM:
        raise ConstructionError(f"Dimension must be in 1..{MAX_DIM}, got {dimension}")
    if freq is not None and arity(freq) != dimension:
        raise ConstructionError(f"Frequency {freq!r} is not {dimension}D")


def _frequency(dimension: Optional[int], freq) -> Optional[Point]:
    if freq is not None:
        return freq
    if dimension is None:
        return None
    return saturate(0.0, dimension)


@dataclass(frozen=True)
class Constant(Noise):
    """
    Same value everywhere.

    ``dimension`` only decides which sources it may be combined with; the
    frequency is zero on every axis unless ``freq`` is given.
    """
    value: float
    dimension: Optional[int] = None
    freq: Optional[Point] = None

    def __post_init__(self):
        _check_shape(self.dimension, self.freq)

    def value_at(self, pos: Point) -> float:
        return self.value

    def frequency(self) -> Optional[Point]:
        return _frequency(self.dimension, self.freq)


@dataclass(frozen=True)
class FunctionValue(Noise):
    """``f(p)``, a plain function lifted into a noise source"""
    f: Callable[[Point], float]
    dimension: Optional[int] = None
    freq: Optional[Point] = None

    def __post_init__(self):
        _check_shape(self.dimension, self.freq)

    def value_at(self, pos: Point) -> float:
        return self.f(pos)

    def frequency(self) -> Optional[Point]:
        return _frequency(self.dimension, self.freq)
