# gradnoise/fbm.py
"""
Ready made fractal Brownian motion in 1D, 2D and 3D.

Each octave is a gradient-noise evaluator over its own permuted gradient
table filled with random gradients. All randomness is drawn at construction
from the generator passed in; evaluation is read-only.
"""

import dataclasses
import logging
import operator
from typing import Optional, Sequence

import numpy as np

from .builders import RandomGradientBuilder1d, RandomGradientBuilder2d, RandomGradientBuilder3d
from .config import DEFAULT_FREQUENCY, DEFAULT_FREQUENCY_SCALING, FbmParams, make_rng
from .errors import ConstructionError
from .noise import Noise
from .octave import OctaveNoise, build_geometric_fractal_noise
from .perlin import Perlin1d, Perlin2d, Perlin3d
from .point import Point, apply, arity, saturate
from .provider import PermutedGradientTable

logger = logging.getLogger(__name__)


class Fbm(Noise):
    """
    Sum of Perlin octaves with geometric frequencies and normalized amplitudes.

    Changing the octave count, persistence or frequency scaling goes through
    :meth:`rebuild`, which regenerates every octave's gradients from scratch.
    :meth:`with_frequency` only re-targets the existing octaves.
    """

    PERLIN = None
    BUILDER = None

    def __init__(self, rng, params: Optional[FbmParams] = None):
        """
        Args:
            rng: Random source for the gradient tables (``numpy.random.Generator``)
            params: Fractal parameters, defaults to ``FbmParams()``
        """
        self._params = self._normalize(params or FbmParams())
        self._octaves = self._build(rng)

    @classmethod
    def from_seed(cls, seed: int, params: Optional[FbmParams] = None) -> "Fbm":
        return cls(make_rng(seed), params)

    @classmethod
    def _normalize(cls, params: FbmParams) -> FbmParams:
        dim = cls.PERLIN.DIM
        frequency = params.frequency
        scaling = params.frequency_scaling
        if frequency is None:
            frequency = saturate(DEFAULT_FREQUENCY, dim)
        elif arity(frequency) == 1 and dim > 1:
            frequency = saturate(frequency, dim)
        if scaling is None:
            scaling = saturate(DEFAULT_FREQUENCY_SCALING, dim)
        elif arity(scaling) == 1 and dim > 1:
            scaling = saturate(scaling, dim)
        if arity(frequency) != dim or arity(scaling) != dim:
            raise ConstructionError(
                f"{cls.__name__} needs {dim}D frequency and scaling, "
                f"got {frequency!r} and {scaling!r}"
            )
        return dataclasses.replace(params, frequency=frequency, frequency_scaling=scaling)

    def _build(self, rng) -> OctaveNoise:
        params = self._params
        builder = self.BUILDER(rng)

        def make_octave(_, frequency, __):
            table = PermutedGradientTable.new(rng, builder, params.gradient_table_size)
            return self.PERLIN(frequency, table, params.interpolation)

        logger.debug("Building %s with %s", type(self).__name__, params)
        return build_geometric_fractal_noise(
            params.frequency,
            params.octaves,
            params.frequency_scaling,
            params.persistence,
            make_octave,
        )

    @property
    def params(self) -> FbmParams:
        return self._params

    @property
    def octaves(self) -> OctaveNoise:
        return self._octaves

    @property
    def num_octaves(self) -> int:
        return self._octaves.num_octaves

    @property
    def dim(self) -> int:
        return self.PERLIN.DIM

    def value_at(self, pos: Point) -> float:
        return self._octaves.value_at(pos)

    def sample_axes(self, axes: Sequence[np.ndarray]) -> np.ndarray:
        return self._octaves.sample_axes(axes)

    def frequency(self) -> Point:
        return self._octaves.frequency()

    def rebuild(self, rng, **changes) -> "Fbm":
        """
        New noise with some parameters replaced, e.g.
        ``fbm.rebuild(rng, octaves=4, persistence=3.0)``.

        Every octave is regenerated from ``rng``; nothing is reused.
        """
        return type(self)(rng, dataclasses.replace(self._params, **changes))

    def with_frequency(self, frequency: Point) -> "Fbm":
        """Same gradients with the base frequency moved to ``frequency``."""
        if arity(frequency) == 1 and self.dim > 1:
            frequency = saturate(frequency, self.dim)
        clone = type(self).__new__(type(self))
        clone._params = dataclasses.replace(self._params, frequency=frequency)
        clone._octaves = self._octaves.scale_frequency(
            apply(frequency, self._params.frequency, operator.truediv)
        )
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params})"


class Fbm1d(Fbm):
    PERLIN = Perlin1d
    BUILDER = RandomGradientBuilder1d


class Fbm2d(Fbm):
    PERLIN = Perlin2d
    BUILDER = RandomGradientBuilder2d


class Fbm3d(Fbm):
    PERLIN = Perlin3d
    BUILDER = RandomGradientBuilder3d
