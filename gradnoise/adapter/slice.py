# gradnoise/adapter/slice.py
"""Drop a dimension by fixing the last axis."""

from dataclasses import dataclass

from ..noise import Noise
from ..point import Point
from .extend import _require_dim


@dataclass(frozen=True)
class Slice1d(Noise):
    """``inner((x, y))`` over a 2D source"""
    noise: Noise
    y: float

    def __post_init__(self):
        _require_dim(self.noise, 2, type(self).__name__)

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at((pos, self.y))

    def frequency(self) -> Point:
        return self.noise.frequency()[0]


@dataclass(frozen=True)
class Slice2d(Noise):
    """``inner((x, y, z))`` over a 3D source"""
    noise: Noise
    z: float

    def __post_init__(self):
        _require_dim(self.noise, 3, type(self).__name__)

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at((pos[0], pos[1], self.z))

    def frequency(self) -> Point:
        f = self.noise.frequency()
        return (f[0], f[1])
