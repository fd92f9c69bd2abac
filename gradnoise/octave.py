# gradnoise/octave.py
"""
Octave summation (fractal Brownian motion).
"""

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ConstructionError, EmptyOctavesError
from .noise import Noise
from .point import Point, apply, arity, saturate

logger = logging.getLogger(__name__)

OctaveFactory = Callable[[int, Point, float], Noise]


@dataclass(frozen=True)
class Octave(Noise):
    """One layer of a fractal sum: a noise source and its fixed amplitude"""
    noise: Noise
    amplitude: float

    def value_at(self, pos: Point) -> float:
        return self.noise.value_at(pos) * self.amplitude

    def frequency(self) -> Point:
        return self.noise.frequency()

    def sample_axes(self, axes: Sequence[np.ndarray]) -> np.ndarray:
        return self.noise.sample_axes(axes) * self.amplitude

    def __str__(self) -> str:
        return f"Octave <{self.frequency()!r}, A={self.amplitude}>"


class OctaveNoise(Noise):
    """
    Ordered sequence of octaves evaluated as their sum.

    Amplitudes are baked into the octaves, the sum is not re-normalized.
    The frequency of the sequence is the frequency of its first octave; an
    empty sequence evaluates to 0.0 everywhere and has no frequency.
    """

    def __init__(self, octaves: Iterable[Octave] = ()):
        self._octaves: Tuple[Octave, ...] = tuple(octaves)

    @property
    def octaves(self) -> Tuple[Octave, ...]:
        return self._octaves

    @property
    def num_octaves(self) -> int:
        return len(self._octaves)

    def __len__(self) -> int:
        return len(self._octaves)

    def __iter__(self) -> Iterator[Octave]:
        return iter(self._octaves)

    def amplitudes(self) -> List[float]:
        return [o.amplitude for o in self._octaves]

    @property
    def dim(self) -> Optional[int]:
        if not self._octaves:
            return None
        return self._octaves[0].dim

    def value_at(self, pos: Point) -> float:
        total = 0.0
        for octave in self._octaves:
            total += octave.value_at(pos)
        return total

    def sample_axes(self, axes: Sequence[np.ndarray]) -> np.ndarray:
        total = np.zeros(tuple(len(a) for a in reversed(axes)), dtype=np.float64)
        for octave in self._octaves:
            total += octave.sample_axes(axes)
        return total

    def frequency(self) -> Point:
        """
        Raises:
            EmptyOctavesError: the sequence has no octaves
        """
        if not self._octaves:
            raise EmptyOctavesError("Empty octave sequence has no frequency")
        return self._octaves[0].frequency()

    def scale_frequency(self, factor: Point) -> "OctaveNoise":
        """
        Multiply every octave's frequency by ``factor``, keeping gradients and
        amplitudes. Octave sources must implement ``with_frequency``.

        Raises:
            ConstructionError: an octave source cannot change its frequency
        """
        if not self._octaves:
            return OctaveNoise()
        for i, o in enumerate(self._octaves):
            if not hasattr(o.noise, "with_frequency"):
                raise ConstructionError(
                    f"Octave {i} ({type(o.noise).__name__}) does not support with_frequency"
                )
        if arity(factor) == 1 and self.dim > 1:
            factor = saturate(factor, self.dim)
        return OctaveNoise(
            Octave(o.noise.with_frequency(apply(o.frequency(), factor, operator.mul)), o.amplitude)
            for o in self._octaves
        )

    def with_frequency(self, frequency: Point) -> "OctaveNoise":
        """Move the first octave to ``frequency``, the others keep their ratio to it."""
        return self.scale_frequency(apply(frequency, self.frequency(), operator.truediv))

    def __str__(self) -> str:
        lines = ["OctaveNoise ["]
        lines.extend(f"\t{octave}," for octave in self._octaves)
        lines.append("]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"OctaveNoise(num_octaves={len(self._octaves)})"


def geometric_amplitudes(num_octaves: int, persistence: float) -> List[float]:
    """
    Amplitudes ``(1 / p^(i + 1)) * M`` with ``M`` chosen so they sum to 1.
    """
    if num_octaves < 0:
        raise ConstructionError(f"Octave count must be >= 0, got {num_octaves}")
    if persistence == 0:
        raise ConstructionError("Persistence must be non-zero")
    weights = [1.0 / persistence ** (i + 1) for i in range(num_octaves)]
    if not weights:
        return []
    multiplier = 1.0 / sum(weights)
    return [w * multiplier for w in weights]


def build_geometric_fractal_noise(initial_frequency: Point, num_octaves: int,
                                  frequency_scaling: Point, persistence: float,
                                  factory: OctaveFactory) -> OctaveNoise:
    """
    Build a fractal sum whose frequencies grow geometrically.

    Args:
        initial_frequency: Base frequency (float in 1D, tuple otherwise)
        num_octaves: Number of octaves, 0 gives an empty sequence
        frequency_scaling: Per-octave frequency multiplier, scalar or per axis
        persistence: Octave ``i`` gets amplitude proportional to ``1 / persistence^(i + 1)``
        factory: ``factory(octave_index, frequency, amplitude)`` returning the
                 octave's noise source

    Returns:
        OctaveNoise where octave ``i`` has frequency
        ``initial_frequency * frequency_scaling^(i + 1)`` and the amplitudes
        sum to 1
    """
    dim = arity(initial_frequency)
    if arity(frequency_scaling) == 1 and dim > 1:
        frequency_scaling = saturate(frequency_scaling, dim)
    if arity(frequency_scaling) != dim:
        raise ConstructionError(
            f"Frequency scaling {frequency_scaling!r} does not match frequency {initial_frequency!r}"
        )

    octaves = []
    for i, amplitude in enumerate(geometric_amplitudes(num_octaves, persistence)):
        frequency = apply(initial_frequency, frequency_scaling, lambda f, s: f * s ** (i + 1))
        logger.debug("Octave %d: frequency=%r amplitude=%.6f", i, frequency, amplitude)
        octaves.append(Octave(factory(i, frequency, amplitude), amplitude))

    return OctaveNoise(octaves)
