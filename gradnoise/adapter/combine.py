# gradnoise/adapter/combine.py
"""
Adapters over two or three sources sharing one coordinate space.

The reported frequency is the component-wise maximum of the inputs.
"""

from dataclasses import dataclass
from typing import Callable

from ..errors import ConstructionError
from ..noise import Noise
from ..point import Point, component_max


def check_same_dim(*noises: Noise):
    """Raise ConstructionError unless every source with a known dimension agrees."""
    dims = {n.dim for n in noises if n.dim is not None}
    if len(dims) > 1:
        raise ConstructionError(
            f"Cannot combine sources of different dimensions: {sorted(dims)}"
        )


@dataclass(frozen=True)
class Combine(Noise):
    """``combiner(left(p), right(p))``"""
    left: Noise
    right: Noise
    combiner: Callable[[float, float], float]

    def __post_init__(self):
        check_same_dim(self.left, self.right)

    def value_at(self, pos: Point) -> float:
        return self.combiner(self.left.value_at(pos), self.right.value_at(pos))

    def frequency(self) -> Point:
        return component_max(self.left.frequency(), self.right.frequency())


@dataclass(frozen=True)
class Add(Noise):
    left: Noise
    right: Noise

    def __post_init__(self):
        check_same_dim(self.left, self.right)

    def value_at(self, pos: Point) -> float:
        return self.left.value_at(pos) + self.right.value_at(pos)

    def frequency(self) -> Point:
        return component_max(self.left.frequency(), self.right.frequency())


@dataclass(frozen=True)
class Multiply(Noise):
    left: Noise
    right: Noise

    def __post_init__(self):
        check_same_dim(self.left, self.right)

    def value_at(self, pos: Point) -> float:
        return self.left.value_at(pos) * self.right.value_at(pos)

    def frequency(self) -> Point:
        return component_max(self.left.frequency(), self.right.frequency())


@dataclass(frozen=True)
class Select(Noise):
    """
    ``left(p)`` where ``criteria(p) > threshold``, ``right(p)`` elsewhere.

    The comparison is strict: a criteria value equal to the threshold
    selects ``right``.
    """
    left: Noise
    right: Noise
    criteria: Noise
    threshold: float

    def __post_init__(self):
        check_same_dim(self.left, self.right, self.criteria)

    def value_at(self, pos: Point) -> float:
        if self.criteria.value_at(pos) > self.threshold:
            return self.left.value_at(pos)
        return self.right.value_at(pos)

    def frequency(self) -> Point:
        return component_max(
            component_max(self.left.frequency(), self.right.frequency()),
            self.criteria.frequency(),
        )


@dataclass(frozen=True)
class Blend(Noise):
    """``blend_fn(left(p), right(p), criteria(p))``"""
    left: Noise
    right: Noise
    criteria: Noise
    blend_fn: Callable[[float, float, float], float]

    def __post_init__(self):
        check_same_dim(self.left, self.right, self.criteria)

    def value_at(self, pos: Point) -> float:
        return self.blend_fn(
            self.left.value_at(pos),
            self.right.value_at(pos),
            self.criteria.value_at(pos),
        )

    def frequency(self) -> Point:
        return component_max(
            component_max(self.left.frequency(), self.right.frequency()),
            self.criteria.frequency(),
        )
