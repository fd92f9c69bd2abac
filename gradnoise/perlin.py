# gradnoise/perlin.py
"""
Gradient (Perlin) noise over an arbitrary gradient provider.

For a query point in [0, 1) per axis the evaluator:

1. scales the point by the frequency into lattice space,
2. splits it into the integer lower corner and the fractional offset,
3. dots every cell corner's gradient with the corner-to-point vector,
4. collapses the corner values axis by axis (x, then y, then z) with the
   interpolation kernel,
5. rescales by a per-dimension constant so the output approximates [-1, 1].

Providers exposing ``lattice()`` with a registered interpolation curve run
through the compiled kernels below. Any other provider or curve falls back to
the generic evaluator, which only needs ``get_gradient``.
"""

import math
from typing import Optional, Sequence

import numpy as np
from numba import jit, prange

from .errors import ConstructionError, LatticeIndexError
from .interpolate import (
    Interpolator, apply_curve, curve_code, lerp, python_kernel, resolve_interpolator,
    smootherstep,
)
from .noise import Noise
from .octave import OctaveNoise, build_geometric_fractal_noise
from .point import Point, as_tuple, arity, cell_corners, dot, reduce_corners
from .provider import LATTICE_HASHED, LATTICE_MODULO, GradientGrid, Lattice

NORMALIZATION = {
    1: 2.0,
    2: math.sqrt(2.0),
    3: math.sqrt(2.0),
}

_SCALE_1D = NORMALIZATION[1]
_SCALE_2D = NORMALIZATION[2]
_SCALE_3D = NORMALIZATION[3]

# ----------------------------------------------------------------------
# Lattice addressing
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def _lattice_index(mode: int, perm: np.ndarray, shape: np.ndarray, n: int,
                   x: int, y: int, z: int, dim: int) -> int:
    """Gradient row of vertex (x, y, z), -1 outside a dense grid"""
    if mode == LATTICE_HASHED:
        mask = perm.shape[0] - 1
        h = perm[x & mask]
        if dim > 1:
            h = perm[h ^ (y & mask)]
        if dim > 2:
            h = perm[h ^ (z & mask)]
        return h % n
    if mode == LATTICE_MODULO:
        return x % n
    if x < 0 or x >= shape[0]:
        return -1
    if dim > 1 and (y < 0 or y >= shape[1]):
        return -1
    if dim > 2 and (z < 0 or z >= shape[2]):
        return -1
    return x + y * shape[0] + z * shape[0] * shape[1]


@jit(nopython=True, cache=True)
def _dot2(g: np.ndarray, x: float, y: float) -> float:
    return g[0] * x + g[1] * y


@jit(nopython=True, cache=True)
def _dot3(g: np.ndarray, x: float, y: float, z: float) -> float:
    return g[0] * x + g[1] * y + g[2] * z

# ----------------------------------------------------------------------
# Single point kernels, NaN marks a vertex outside a dense grid
# ----------------------------------------------------------------------

@jit(nopython=True, cache=True)
def gradient_noise_1d(x: float, fx: float, mode: int, perm: np.ndarray,
                      grads: np.ndarray, shape: np.ndarray, curve: int) -> float:
    px = x * fx
    x0 = int(np.floor(px))
    rx = px - x0
    n = grads.shape[0]

    i0 = _lattice_index(mode, perm, shape, n, x0, 0, 0, 1)
    i1 = _lattice_index(mode, perm, shape, n, x0 + 1, 0, 0, 1)
    if i0 < 0 or i1 < 0:
        return np.nan

    v0 = rx * grads[i0, 0]
    v1 = (rx - 1.0) * grads[i1, 0]
    return lerp(v0, v1, apply_curve(rx, curve)) * _SCALE_1D


@jit(nopython=True, cache=True)
def gradient_noise_2d(x: float, y: float, fx: float, fy: float, mode: int,
                      perm: np.ndarray, grads: np.ndarray, shape: np.ndarray,
                      curve: int) -> float:
    px = x * fx
    py = y * fy
    x0 = int(np.floor(px))
    y0 = int(np.floor(py))
    rx = px - x0
    ry = py - y0
    n = grads.shape[0]

    i00 = _lattice_index(mode, perm, shape, n, x0, y0, 0, 2)
    i10 = _lattice_index(mode, perm, shape, n, x0 + 1, y0, 0, 2)
    i01 = _lattice_index(mode, perm, shape, n, x0, y0 + 1, 0, 2)
    i11 = _lattice_index(mode, perm, shape, n, x0 + 1, y0 + 1, 0, 2)
    if i00 < 0 or i10 < 0 or i01 < 0 or i11 < 0:
        return np.nan

    v00 = _dot2(grads[i00], rx, ry)
    v10 = _dot2(grads[i10], rx - 1.0, ry)
    v01 = _dot2(grads[i01], rx, ry - 1.0)
    v11 = _dot2(grads[i11], rx - 1.0, ry - 1.0)

    wx = apply_curve(rx, curve)
    wy = apply_curve(ry, curve)
    return lerp(lerp(v00, v10, wx), lerp(v01, v11, wx), wy) * _SCALE_2D


@jit(nopython=True, cache=True)
def gradient_noise_3d(x: float, y: float, z: float, fx: float, fy: float,
                      fz: float, mode: int, perm: np.ndarray, grads: np.ndarray,
                      shape: np.ndarray, curve: int) -> float:
    px = x * fx
    py = y * fy
    pz = z * fz
    x0 = int(np.floor(px))
    y0 = int(np.floor(py))
    z0 = int(np.floor(pz))
    rx = px - x0
    ry = py - y0
    rz = pz - z0
    n = grads.shape[0]

    i000 = _lattice_index(mode, perm, shape, n, x0, y0, z0, 3)
    i100 = _lattice_index(mode, perm, shape, n, x0 + 1, y0, z0, 3)
    i010 = _lattice_index(mode, perm, shape, n, x0, y0 + 1, z0, 3)
    i110 = _lattice_index(mode, perm, shape, n, x0 + 1, y0 + 1, z0, 3)
    i001 = _lattice_index(mode, perm, shape, n, x0, y0, z0 + 1, 3)
    i101 = _lattice_index(mode, perm, shape, n, x0 + 1, y0, z0 + 1, 3)
    i011 = _lattice_index(mode, perm, shape, n, x0, y0 + 1, z0 + 1, 3)
    i111 = _lattice_index(mode, perm, shape, n, x0 + 1, y0 + 1, z0 + 1, 3)
    if min(i000, i100, i010, i110, i001, i101, i011, i111) < 0:
        return np.nan

    v000 = _dot3(grads[i000], rx, ry, rz)
    v100 = _dot3(grads[i100], rx - 1.0, ry, rz)
    v010 = _dot3(grads[i010], rx, ry - 1.0, rz)
    v110 = _dot3(grads[i110], rx - 1.0, ry - 1.0, rz)
    v001 = _dot3(grads[i001], rx, ry, rz - 1.0)
    v101 = _dot3(grads[i101], rx - 1.0, ry, rz - 1.0)
    v011 = _dot3(grads[i011], rx, ry - 1.0, rz - 1.0)
    v111 = _dot3(grads[i111], rx - 1.0, ry - 1.0, rz - 1.0)

    wx = apply_curve(rx, curve)
    wy = apply_curve(ry, curve)
    wz = apply_curve(rz, curve)
    near = lerp(lerp(v000, v100, wx), lerp(v010, v110, wx), wy)
    far = lerp(lerp(v001, v101, wx), lerp(v011, v111, wx), wy)
    return lerp(near, far, wz) * _SCALE_3D

# ----------------------------------------------------------------------
# Lattice sampling, output indexed [x], [y, x] or [z, y, x]
# ----------------------------------------------------------------------

@jit(nopython=True, parallel=True, cache=True)
def gradient_noise_1d_array(xs: np.ndarray, fx: float, mode: int, perm: np.ndarray,
                            grads: np.ndarray, shape: np.ndarray, curve: int) -> np.ndarray:
    result = np.zeros(xs.shape[0], dtype=np.float64)
    for i in prange(xs.shape[0]):
        result[i] = gradient_noise_1d(xs[i], fx, mode, perm, grads, shape, curve)
    return result


@jit(nopython=True, parallel=True, cache=True)
def gradient_noise_2d_array(xs: np.ndarray, ys: np.ndarray, fx: float, fy: float,
                            mode: int, perm: np.ndarray, grads: np.ndarray,
                            shape: np.ndarray, curve: int) -> np.ndarray:
    result = np.zeros((ys.shape[0], xs.shape[0]), dtype=np.float64)
    for j in prange(ys.shape[0]):
        for i in range(xs.shape[0]):
            result[j, i] = gradient_noise_2d(xs[i], ys[j], fx, fy, mode, perm,
                                             grads, shape, curve)
    return result


@jit(nopython=True, parallel=True, cache=True)
def gradient_noise_3d_array(xs: np.ndarray, ys: np.ndarray, zs: np.ndarray,
                            fx: float, fy: float, fz: float, mode: int,
                            perm: np.ndarray, grads: np.ndarray, shape: np.ndarray,
                            curve: int) -> np.ndarray:
    result = np.zeros((zs.shape[0], ys.shape[0], xs.shape[0]), dtype=np.float64)
    for k in prange(zs.shape[0]):
        for j in range(ys.shape[0]):
            for i in range(xs.shape[0]):
                result[k, j, i] = gradient_noise_3d(xs[i], ys[j], zs[k], fx, fy, fz,
                                                    mode, perm, grads, shape, curve)
    return result

# ----------------------------------------------------------------------
# Evaluators
# ----------------------------------------------------------------------

class GradientNoise(Noise):
    """
    Dimension generic gradient noise evaluator.

    Subclasses only pin :attr:`DIM`; the whole algorithm lives here.
    """

    DIM = 0

    def __init__(self, frequency: Point, provider,
                 interpolator: Interpolator = smootherstep):
        """
        Args:
            frequency: Lattice cells per unit range (a float in 1D, a tuple otherwise)
            provider: Gradient provider (``get_gradient`` / ``dimensions``)
            interpolator: Kernel name or callable mapping t in [0, 1] to a weight

        Raises:
            ConstructionError: wrong frequency arity, a frequency larger than
                the extent of a bounded provider, or provider gradients of the
                wrong dimension
        """
        if arity(frequency) != self.DIM:
            raise ConstructionError(
                f"{type(self).__name__} needs a {self.DIM}D frequency, got {frequency!r}"
            )
        self._check_extent(frequency, provider)

        self._frequency = frequency
        self._freq_axes = tuple(float(f) for f in as_tuple(frequency))
        self._provider = provider
        self._interp = resolve_interpolator(interpolator)
        self._corners = cell_corners(self.DIM)
        self._scale = NORMALIZATION[self.DIM]
        self._lattice = self._lattice_of(provider)
        self._curve = curve_code(self._interp)

    @staticmethod
    def _check_extent(frequency, provider):
        extent = provider.dimensions()
        if extent is None:
            return
        extent = as_tuple(extent)
        freq = as_tuple(frequency)
        if len(extent) != len(freq):
            raise ConstructionError(
                f"Provider covers {len(extent)} axes, frequency has {len(freq)}"
            )
        for axis, (f, e) in enumerate(zip(freq, extent)):
            if f > e:
                raise ConstructionError(
                    f"Frequency {f} on axis {axis} exceeds provider extent {e}"
                )

    @classmethod
    def _lattice_of(cls, provider) -> Optional[Lattice]:
        make_lattice = getattr(provider, "lattice", None)
        if make_lattice is None:
            return None
        lattice = make_lattice()
        if lattice.mode == LATTICE_MODULO and cls.DIM > 1:
            raise ConstructionError(
                f"{type(provider).__name__} only addresses 1D lattices, "
                f"use a PermutedGradientTable for {cls.__name__}"
            )
        width = lattice.gradients.shape[1]
        if width != cls.DIM:
            raise ConstructionError(
                f"{cls.__name__} needs {cls.DIM}D gradients, provider holds {width}D"
            )
        return lattice

    @property
    def dim(self) -> int:
        return self.DIM

    @property
    def provider(self):
        return self._provider

    @property
    def interpolator(self) -> Interpolator:
        return self._interp

    @property
    def compiled(self) -> bool:
        """True when evaluation runs through the compiled kernels."""
        return self._lattice is not None and self._curve is not None

    def frequency(self) -> Point:
        return self._frequency

    def with_interpolator(self, interpolator) -> "GradientNoise":
        return type(self)(self._frequency, self._provider, interpolator)

    def with_frequency(self, frequency: Point) -> "GradientNoise":
        """Same gradients sampled at another frequency."""
        return type(self)(frequency, self._provider, self._interp)

    def value_at(self, pos: Point) -> float:
        if not self.compiled:
            return self._value_at_generic(pos)

        c = as_tuple(pos)
        f = self._freq_axes
        lat = self._lattice
        if self.DIM == 1:
            value = gradient_noise_1d(float(c[0]), f[0], lat.mode, lat.perm,
                                      lat.gradients, lat.shape, self._curve)
        elif self.DIM == 2:
            value = gradient_noise_2d(float(c[0]), float(c[1]), f[0], f[1], lat.mode,
                                      lat.perm, lat.gradients, lat.shape, self._curve)
        else:
            value = gradient_noise_3d(float(c[0]), float(c[1]), float(c[2]),
                                      f[0], f[1], f[2], lat.mode, lat.perm,
                                      lat.gradients, lat.shape, self._curve)
        if math.isnan(value):
            raise LatticeIndexError(f"Cell of {pos!r} reaches outside {self._provider!r}")
        return value

    def _value_at_generic(self, pos: Point) -> float:
        lower = []
        rel = []
        for c, f in zip(as_tuple(pos), self._freq_axes):
            cell = c * f
            floor = math.floor(cell)
            lower.append(floor)
            rel.append(cell - floor)

        get_gradient = self._provider.get_gradient
        values = []
        if self.DIM == 1:
            x0, r = lower[0], rel[0]
            for (o,) in self._corners:
                values.append((r - o) * get_gradient(x0 + o))
        else:
            for corner in self._corners:
                index = tuple(l + o for l, o in zip(lower, corner))
                offset = tuple(r - o for r, o in zip(rel, corner))
                values.append(dot(offset, get_gradient(index)))

        interp = python_kernel(self._interp)
        weights = [interp(r) for r in rel]
        return float(reduce_corners(values, weights, python_kernel(lerp))) * self._scale

    def sample_axes(self, axes: Sequence[np.ndarray]) -> np.ndarray:
        if not self.compiled:
            return super().sample_axes(axes)

        a = [np.ascontiguousarray(axis, dtype=np.float64) for axis in axes]
        f = self._freq_axes
        lat = self._lattice
        if self.DIM == 1:
            out = gradient_noise_1d_array(a[0], f[0], lat.mode, lat.perm,
                                          lat.gradients, lat.shape, self._curve)
        elif self.DIM == 2:
            out = gradient_noise_2d_array(a[0], a[1], f[0], f[1], lat.mode, lat.perm,
                                          lat.gradients, lat.shape, self._curve)
        else:
            out = gradient_noise_3d_array(a[0], a[1], a[2], f[0], f[1], f[2],
                                          lat.mode, lat.perm, lat.gradients,
                                          lat.shape, self._curve)
        if np.isnan(out).any():
            raise LatticeIndexError(f"Sampled cells reach outside {self._provider!r}")
        return out

    @classmethod
    def with_grid(cls, frequency: Point, builder,
                  interpolator: Interpolator = smootherstep) -> "GradientNoise":
        """Noise backed by a dense per-vertex grid sized for ``frequency``."""
        return cls(frequency, GradientGrid.build(frequency, builder), interpolator)

    @classmethod
    def build_geometric_octaves(cls, initial_frequency: Point, num_octaves: int,
                                octave_scaling: Point, persistence: float,
                                gradient_builder,
                                interpolator: Interpolator = smootherstep) -> OctaveNoise:
        """
        Fractal sum of dense-grid evaluators, each octave sized for its own
        frequency.
        """
        return build_geometric_fractal_noise(
            initial_frequency,
            num_octaves,
            octave_scaling,
            persistence,
            lambda _, frequency, __: cls.with_grid(frequency, gradient_builder, interpolator),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(frequency={self._frequency!r}, provider={self._provider!r})"


class Perlin1d(GradientNoise):
    """1D gradient noise, gradients are scalars"""
    DIM = 1


class Perlin2d(GradientNoise):
    """2D gradient noise"""
    DIM = 2


class Perlin3d(GradientNoise):
    """3D gradient noise"""
    DIM = 3
