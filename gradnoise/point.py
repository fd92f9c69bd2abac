# gradnoise/point.py
"""
Coordinate helpers shared by every dimension.

A 1D point (or frequency) is a plain float, 2D-4D points are tuples. The
helpers below accept either form so the evaluators can stay dimension
agnostic.
"""

from itertools import product
from typing import Callable, Optional, Sequence, Tuple, Union

Point = Union[float, Tuple[float, ...]]

MAX_DIM = 4


def arity(p) -> int:
    """Number of axes of a point"""
    try:
        return len(p)
    except TypeError:
        return 1


def as_tuple(p) -> Tuple:
    if isinstance(p, tuple):
        return p
    try:
        return tuple(p)
    except TypeError:
        return (p,)


def from_tuple(values: Sequence):
    """Inverse of :func:`as_tuple`: a single axis collapses to a scalar."""
    if len(values) == 1:
        return values[0]
    return tuple(values)


def saturate(value: float, dim: int) -> Point:
    """A point with every axis set to ``value``"""
    if dim == 1:
        return value
    return (value,) * dim


def apply(p, q, f: Callable[[float, float], float]) -> Point:
    """Combine two points axis by axis"""
    return from_tuple([f(a, b) for a, b in zip(as_tuple(p), as_tuple(q))])


def apply3(p, q, r, f: Callable[[float, float, float], float]) -> Point:
    return from_tuple(
        [f(a, b, c) for a, b, c in zip(as_tuple(p), as_tuple(q), as_tuple(r))]
    )


def component_max(a, b) -> Optional[Point]:
    """Per-axis maximum, a None frequency defers to the other one."""
    if a is None:
        return b
    if b is None:
        return a
    return apply(a, b, max)


def dot(a, b) -> float:
    try:
        pairs = zip(a, b)
    except TypeError:
        return a * b
    total = 0.0
    for x, y in pairs:
        total += x * y
    return total


def _corners(dim: int) -> Tuple[Tuple[int, ...], ...]:
    # product() varies the last axis fastest; reversing gives x fastest
    return tuple(tuple(reversed(c)) for c in product((0, 1), repeat=dim))


_CELL_CORNERS = {dim: _corners(dim) for dim in range(1, MAX_DIM + 1)}


def cell_corners(dim: int) -> Tuple[Tuple[int, ...], ...]:
    """
    Offsets of the 2^dim corners of a lattice cell.

    The x offset varies fastest, then y, then z, so pairs of consecutive
    corners differ only along x:
    ``(0, 0), (1, 0), (0, 1), (1, 1)`` for 2D.
    """
    return _CELL_CORNERS[dim]


def reduce_corners(values: Sequence[float], weights: Sequence[float],
                   lerp: Callable[[float, float, float], float]) -> float:
    """
    Multilinear reduction of corner values ordered as :func:`cell_corners`.

    Each pass collapses one axis, x first, by interpolating neighbouring
    pairs with the matching weight.
    """
    values = list(values)
    for w in weights:
        values = [lerp(values[i], values[i + 1], w) for i in range(0, len(values), 2)]
    return values[0]
