# gradnoise/adapter/transform.py
"""Pointwise post-processing adapters."""

from dataclasses import dataclass
from typing import Callable

from ..noise import Noise
from ..point import Point


@dataclass(frozen=True)
class Transform(Noise):
    """``f(p, inner(p))``, the function also sees the query coordinate"""
    noise: Noise
    f: Callable[[Point, float], float]

    def value_at(self, pos: Point) -> float:
        return self.f(pos, self.noise.value_at(pos))

    def frequency(self) -> Point:
        return self.noise.frequency()


@dataclass(frozen=True)
class Negate(Noise):
    noise: Noise

    def value_at(self, pos: Point) -> float:
        return -self.noise.value_at(pos)

    def frequency(self) -> Point:
        return self.noise.frequency()
