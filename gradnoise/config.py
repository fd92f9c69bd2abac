# gradnoise/config.py
"""
Default parameters for the fractal noise builders.

Module level constants are the fallbacks used when a caller does not pass an
explicit :class:`FbmParams`. Random sources are never created implicitly:
use :func:`make_rng` and hand the generator to the constructors.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from .errors import ConstructionError

# --- Gradient lattice ---
# Must stay a power of two, the lattice hash masks with size - 1.
DEFAULT_PERMUTATION_SIZE = 256
DEFAULT_GRADIENT_TABLE_SIZE = 256

# --- Fractal sum ---
DEFAULT_FREQUENCY = 1.0
DEFAULT_FREQUENCY_SCALING = 2.0
# Amplitude of octave i is proportional to 1 / persistence^(i + 1)
DEFAULT_PERSISTENCE = 2.0
DEFAULT_NUM_OCTAVES = 8
DEFAULT_INTERPOLATION = "smootherstep"

Frequency = Union[float, Tuple[float, ...]]


@dataclass(frozen=True)
class FbmParams:
    """Parameters of a fractal Brownian motion noise"""
    frequency: Optional[Frequency] = None          # None = DEFAULT_FREQUENCY on every axis
    frequency_scaling: Optional[Frequency] = None  # None = DEFAULT_FREQUENCY_SCALING on every axis
    persistence: float = DEFAULT_PERSISTENCE
    octaves: int = DEFAULT_NUM_OCTAVES
    interpolation: str = DEFAULT_INTERPOLATION
    gradient_table_size: int = DEFAULT_GRADIENT_TABLE_SIZE

    def __post_init__(self):
        if self.octaves < 0:
            raise ConstructionError(f"Octave count must be >= 0, got {self.octaves}")
        if self.persistence == 0:
            raise ConstructionError("Persistence must be non-zero")
        if self.gradient_table_size <= 0:
            raise ConstructionError(
                f"Gradient table size must be > 0, got {self.gradient_table_size}"
            )


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the explicit random source passed to table and builder constructors."""
    return np.random.default_rng(seed)
