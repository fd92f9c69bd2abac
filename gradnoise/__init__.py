"""Gradnoise public API."""

import logging

from .adapter import (
    Add,
    Blend,
    Clamp,
    ClampInput,
    Combine,
    Constant,
    Extension2d,
    Extension3d,
    Filter,
    FilterKind,
    FunctionValue,
    Multiply,
    Negate,
    Scale,
    ScaleInput,
    Select,
    ShiftInput,
    Slice1d,
    Slice2d,
    Transform,
    WithRange,
    WrapInput,
    hermite_3rd_order_blend,
    hermite_5th_order_blend,
    linear_blend,
)
from .builders import (
    CubeGradientBuilder1d,
    CubeGradientBuilder2d,
    GradientBuilder,
    RandomGradientBuilder1d,
    RandomGradientBuilder2d,
    RandomGradientBuilder3d,
)
from .config import FbmParams, make_rng
from .errors import (
    ConstructionError, EmptyOctavesError, LatticeIndexError, MissingAxisError, NoiseError,
)
from .factory import (
    GridGradientFactory,
    PermutationGradientFactory,
    RandomPermutationGradientFactory,
)
from .fbm import Fbm, Fbm1d, Fbm2d, Fbm3d
from .grid import Grid
from .interpolate import INTERPOLATORS, lerp, linear, resolve_interpolator, smootherstep, smoothstep
from .noise import Noise
from .octave import Octave, OctaveNoise, build_geometric_fractal_noise, geometric_amplitudes
from .perlin import GradientNoise, Perlin1d, Perlin2d, Perlin3d
from .permutation import PermutationTable
from .provider import GradientGrid, GradientTable, PermutedGradientTable, cube_gradient_table_2d
from .sampling import sample_grid, value_range

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Noise",
    "GradientNoise",
    "Perlin1d",
    "Perlin2d",
    "Perlin3d",
    "Octave",
    "OctaveNoise",
    "build_geometric_fractal_noise",
    "geometric_amplitudes",
    "Fbm",
    "Fbm1d",
    "Fbm2d",
    "Fbm3d",
    "FbmParams",
    "make_rng",
    "PermutationTable",
    "Grid",
    "GradientTable",
    "PermutedGradientTable",
    "GradientGrid",
    "cube_gradient_table_2d",
    "GradientBuilder",
    "RandomGradientBuilder1d",
    "RandomGradientBuilder2d",
    "RandomGradientBuilder3d",
    "CubeGradientBuilder1d",
    "CubeGradientBuilder2d",
    "GridGradientFactory",
    "RandomPermutationGradientFactory",
    "PermutationGradientFactory",
    "INTERPOLATORS",
    "linear",
    "smoothstep",
    "smootherstep",
    "lerp",
    "resolve_interpolator",
    "sample_grid",
    "value_range",
    "NoiseError",
    "ConstructionError",
    "LatticeIndexError",
    "EmptyOctavesError",
    "MissingAxisError",
    "Combine",
    "Add",
    "Multiply",
    "Select",
    "Blend",
    "Scale",
    "WithRange",
    "Clamp",
    "Filter",
    "FilterKind",
    "Transform",
    "Negate",
    "Constant",
    "FunctionValue",
    "ScaleInput",
    "ShiftInput",
    "ClampInput",
    "WrapInput",
    "Extension2d",
    "Extension3d",
    "Slice1d",
    "Slice2d",
    "linear_blend",
    "hermite_3rd_order_blend",
    "hermite_5th_order_blend",
]

__version__ = "0.1.0"
