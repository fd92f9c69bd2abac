# gradnoise/adapter/filter.py
"""Output clamping and threshold filters."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..errors import ConstructionError
from ..noise import Noise
from ..point import Point
from .blend import linear_blend


class FilterKind(Enum):
    """Which side of the threshold keeps the signal"""
    LOW_PASS = 1
    HIGH_PASS = 2


@dataclass(frozen=True)
class Clamp(Noise):
    """``clamp(inner(p), low, high)``"""
    noise: Noise
    low: float
    high: float

    def __post_init__(self):
        if self.low >= self.high:
            raise ConstructionError(f"low {self.low} must be < high {self.high}")

    def value_at(self, pos: Point) -> float:
        val = self.noise.value_at(pos)
        if val < self.low:
            return self.low
        if val > self.high:
            return self.high
        return val

    def frequency(self) -> Point:
        return self.noise.frequency()


@dataclass(frozen=True)
class Filter(Noise):
    """
    Smooth low-pass / high-pass threshold on the output value.

    With ``(x1, x2) = (v, 0)`` for LOW_PASS and ``(0, v)`` for HIGH_PASS:

    * ``v <= start`` gives ``x1``
    * ``v >= end`` gives ``x2``
    * in between ``blend_fn(x1, x2, (v - start) / (end - start))``
    """
    noise: Noise
    start: float
    end: float
    kind: FilterKind
    blend_fn: Optional[Callable[[float, float, float], float]] = None

    def __post_init__(self):
        if self.blend_fn is None:
            object.__setattr__(self, "blend_fn", linear_blend)
        if self.start >= self.end:
            raise ConstructionError(f"start {self.start} must be < end {self.end}")
        if not isinstance(self.kind, FilterKind):
            raise ConstructionError(f"Unknown filter kind: {self.kind!r}")

    def value_at(self, pos: Point) -> float:
        val = self.noise.value_at(pos)

        if self.kind is FilterKind.LOW_PASS:
            x1, x2 = val, 0.0
        else:
            x1, x2 = 0.0, val

        if val > self.start:
            if val < self.end:
                t = (val - self.start) / (self.end - self.start)
                return self.blend_fn(x1, x2, t)
            return x2
        return x1

    def frequency(self) -> Point:
        return self.noise.frequency()
