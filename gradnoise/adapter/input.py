# gradnoise/adapter/input.py
"""
Adapters transforming the coordinate before it reaches the inner source.
"""

import math
import operator
from dataclasses import dataclass

from ..errors import ConstructionError
from ..noise import Noise
from ..point import Point, apply, apply3, arity, as_tuple, saturate


def _fit(adapter, name: str):
    """Broadcast a scalar field to the source dimension, reject other mismatches."""
    dim = adapter.noise.dim
    p = getattr(adapter, name)
    if dim is None:
        return
    if arity(p) == 1 and dim > 1:
        object.__setattr__(adapter, name, saturate(p, dim))
    elif arity(p) != dim:
        raise ConstructionError(f"{name} {p!r} does not match a {dim}D source")


def _check_bounds(low: Point, high: Point):
    for axis, (lo, hi) in enumerate(zip(as_tuple(low), as_tuple(high))):
        if lo >= hi:
            raise ConstructionError(f"Axis {axis}: low {lo} must be < high {hi}")


def _clamp(v: float, low: float, high: float) -> float:
    return min(max(v, low), high)


def _wrap(v: float, low: float, high: float) -> float:
    span = high - low
    r = math.fmod(v - low, span)
    if r < 0.0:
        r += span
    return low + r


@dataclass(frozen=True)
class ScaleInput(Noise):
    """``inner(p * factor)`` per axis"""
    noise: Noise
    factor: Point

    def __post_init__(self):
        _fit(self, "factor")

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(apply(pos, self.factor, operator.mul))

    def frequency(self) -> Point:
        return self.noise.frequency()


@dataclass(frozen=True)
class ShiftInput(Noise):
    """``inner(p + shift)`` per axis"""
    noise: Noise
    shift: Point

    def __post_init__(self):
        _fit(self, "shift")

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(apply(pos, self.shift, operator.add))

    def frequency(self) -> Point:
        return self.noise.frequency()


@dataclass(frozen=True)
class ClampInput(Noise):
    """Clamp every axis into ``[low, high]`` before evaluating"""
    noise: Noise
    low: Point
    high: Point

    def __post_init__(self):
        _fit(self, "low")
        _fit(self, "high")
        _check_bounds(self.low, self.high)

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(apply3(pos, self.low, self.high, _clamp))

    def frequency(self) -> Point:
        return self.noise.frequency()


@dataclass(frozen=True)
class WrapInput(Noise):
    """Wrap every axis into ``[low, high)`` (modulo, negative offsets folded back)"""
    noise: Noise
    low: Point
    high: Point

    def __post_init__(self):
        _fit(self, "low")
        _fit(self, "high")
        _check_bounds(self.low, self.high)

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(apply3(pos, self.low, self.high, _wrap))

    def frequency(self) -> Point:
        return self.noise.frequency()
