# gradnoise/sampling.py
"""
Evaluate a noise source over a regular lattice of the unit range.
"""

import logging
from typing import Sequence, Tuple, Union

import numpy as np

from .errors import ConstructionError
from .noise import Noise

logger = logging.getLogger(__name__)

Resolution = Union[int, Sequence[int]]


def _axes(dim: int, resolution: Resolution) -> Tuple[np.ndarray, ...]:
    if isinstance(resolution, int):
        resolution = (resolution,) * dim
    resolution = tuple(resolution)
    if len(resolution) != dim:
        raise ConstructionError(f"Resolution {resolution} does not match a {dim}D source")
    if any(n <= 0 for n in resolution):
        raise ConstructionError(f"Resolution must be positive, got {resolution}")
    return tuple(np.linspace(0.0, 1.0, n, endpoint=False) for n in resolution)


def sample_grid(noise: Noise, resolution: Resolution) -> np.ndarray:
    """
    Evaluate ``noise`` at every point of a regular ``[0, 1)^dim`` lattice.

    Args:
        noise: 1D, 2D or 3D noise source
        resolution: Samples per axis, one int for all axes or one per axis (x, y, z)

    Returns:
        float64 array indexed ``[x]``, ``[y, x]`` or ``[z, y, x]``
    """
    dim = noise.dim
    if dim not in (1, 2, 3):
        raise ConstructionError(f"Can only sample 1D to 3D sources, got {dim}")
    axes = _axes(dim, resolution)
    logger.debug("Sampling %r over %s", noise, tuple(len(a) for a in axes))
    return noise.sample_axes(axes)


def value_range(noise: Noise, resolution: Resolution) -> Tuple[float, float]:
    """Smallest and largest sampled value of ``noise``"""
    values = sample_grid(noise, resolution)
    return float(values.min()), float(values.max())
