"""Composable adapters over noise sources."""

from .blend import hermite_3rd_order_blend, hermite_5th_order_blend, linear_blend
from .combine import Add, Blend, Combine, Multiply, Select
from .extend import Extension2d, Extension3d
from .filter import Clamp, Filter, FilterKind
from .generate import Constant, FunctionValue
from .input import ClampInput, ScaleInput, ShiftInput, WrapInput
from .scale import Scale, WithRange
from .slice import Slice1d, Slice2d
from .transform import Negate, Transform

__all__ = [
    "linear_blend",
    "hermite_3rd_order_blend",
    "hermite_5th_order_blend",
    "Combine",
    "Add",
    "Multiply",
    "Select",
    "Blend",
    "Extension2d",
    "Extension3d",
    "Clamp",
    "Filter",
    "FilterKind",
    "Constant",
    "FunctionValue",
    "ScaleInput",
    "ShiftInput",
    "ClampInput",
    "WrapInput",
    "Scale",
    "WithRange",
    "Slice1d",
    "Slice2d",
    "Transform",
    "Negate",
]
