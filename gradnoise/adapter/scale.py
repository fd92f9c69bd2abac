# gradnoise/adapter/scale.py
"""Output amplitude adapters."""

from dataclasses import dataclass

from ..errors import ConstructionError
from ..noise import Noise
from ..point import Point


@dataclass(frozen=True)
class Scale(Noise):
    """``inner(p) * amplitude``"""
    noise: Noise
    amplitude: float

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(pos) * self.amplitude

    def frequency(self) -> Point:
        return self.noise.frequency()


@dataclass(frozen=True)
class WithRange(Noise):
    """
    Remap the inner source's [-1, 1] output onto ``[min, max]``.

    ``min + (0.5 + 0.5 * inner(p)) * (max - min)``
    """
    noise: Noise
    min: float
    max: float

    def __post_init__(self):
        if self.min >= self.max:
            raise ConstructionError(f"min {self.min} must be < max {self.max}")

    def value_at(self, pos: Point) -> float:
        normalized = 0.5 + 0.5 * self.noise.value_at(pos)
        return self.min + normalized * (self.max - self.min)

    def frequency(self) -> Point:
        return self.noise.frequency()
