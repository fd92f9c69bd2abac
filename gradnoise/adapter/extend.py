# gradnoise/adapter/extend.py
"""
Lift a source into one more dimension.

The added last axis is ignored on evaluation and reports a frequency of 1.
"""

from dataclasses import dataclass

from ..errors import ConstructionError
from ..noise import Noise
from ..point import Point


def _require_dim(noise: Noise, dim: int, name: str):
    if noise.dim != dim:
        raise ConstructionError(f"{name} needs a {dim}D source, got dimension {noise.dim}")


@dataclass(frozen=True)
class Extension2d(Noise):
    noise: Noise

    def __post_init__(self):
        _require_dim(self.noise, 1, type(self).__name__)

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(pos[0])

    def frequency(self) -> Point:
        return (self.noise.frequency(), 1.0)


@dataclass(frozen=True)
class Extension3d(Noise):
    noise: Noise

    def __post_init__(self):
        _require_dim(self.noise, 2, type(self).__name__)

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at((pos[0], pos[1]))

    def frequency(self) -> Point:
        w, h = self.noise.frequency()
        return (w, h, 1.0)
