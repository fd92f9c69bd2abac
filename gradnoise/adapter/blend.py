# gradnoise/adapter/blend.py
"""Blend functions ``f(x1, x2, t)`` for Blend and Filter."""


def _clamp_to_normal(x: float) -> float:
    if x > 1.0:
        return 1.0
    if x < 0.0:
        return 0.0
    return x


def linear_blend(x1: float, x2: float, t: float) -> float:
    """Linear blend, ``t`` is clamped to [0, 1]"""
    t_n = _clamp_to_normal(t)
    return x1 * (1.0 - t_n) + x2 * t_n


def hermite_3rd_order_blend(x1: float, x2: float, t: float) -> float:
    factor = t * t * (3.0 - 2.0 * t)
    return linear_blend(x1, x2, factor)


def hermite_5th_order_blend(x1: float, x2: float, t: float) -> float:
    factor = t * t * t * (10.0 + t * (-15.0 + 6.0 * t))
    return linear_blend(x1, x2, factor)
