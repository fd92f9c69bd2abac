# gradnoise/interpolate.py
"""
Interpolation curves used by the gradient-noise evaluators. Curves map a blend
parameter t in [0, 1] to a smoothed weight and never clamp their input. They
are compiled so the evaluator kernels can call them directly.
"""

from typing import Callable, Dict, Optional, Union

from numba import jit

from .errors import ConstructionError

Interpolator = Callable[[float], float]


@jit(nopython=True, cache=True)
def linear(t: float) -> float:
    """Identity curve"""
    return t


@jit(nopython=True, cache=True)
def smoothstep(t: float) -> float:
    """3rd order Hermite curve: t^2 (3 - 2t)"""
    return t * t * (3.0 - 2.0 * t)


@jit(nopython=True, cache=True)
def smootherstep(t: float) -> float:
    """5th order Hermite curve: t^3 (10 + t (-15 + 6t))"""
    return t * t * t * (10.0 + t * (-15.0 + 6.0 * t))


@jit(nopython=True, cache=True)
def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two samples"""
    return a * (1.0 - t) + b * t


INTERPOLATORS: Dict[str, Interpolator] = {
    "linear": linear,
    "smoothstep": smoothstep,
    "hermite3": smoothstep,
    "smootherstep": smootherstep,
    "hermite5": smootherstep,
}


def resolve_interpolator(interpolator: Union[str, Interpolator]) -> Interpolator:
    """
    Return the kernel registered under ``interpolator`` or the callable itself.

    Raises:
        ConstructionError: the name is not registered.
    """
    if callable(interpolator):
        return interpolator
    try:
        return INTERPOLATORS[interpolator]
    except KeyError:
        raise ConstructionError(
            f"Unknown interpolator '{interpolator}'. "
            f"Available: {', '.join(sorted(INTERPOLATORS))}"
        ) from None


# Codes selecting a registered curve inside compiled kernels
CURVE_LINEAR = 0
CURVE_SMOOTHSTEP = 1
CURVE_SMOOTHERSTEP = 2

_CURVE_CODES = (
    (linear, CURVE_LINEAR),
    (smoothstep, CURVE_SMOOTHSTEP),
    (smootherstep, CURVE_SMOOTHERSTEP),
)


@jit(nopython=True, cache=True)
def apply_curve(t: float, code: int) -> float:
    """Evaluate the registered curve ``code`` at ``t``"""
    if code == CURVE_LINEAR:
        return linear(t)
    if code == CURVE_SMOOTHSTEP:
        return smoothstep(t)
    return smootherstep(t)


def curve_code(interpolator: Interpolator) -> Optional[int]:
    """Code of a registered curve, None for any other callable."""
    for curve, code in _CURVE_CODES:
        if interpolator is curve:
            return code
    return None


def python_kernel(interpolator: Interpolator) -> Interpolator:
    """The plain Python body of a compiled kernel, or the callable itself."""
    return getattr(interpolator, "py_func", interpolator)
