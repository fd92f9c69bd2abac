"""Tests for the composable adapters."""

import dataclasses

import pytest

from gradnoise.adapter import (
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
from gradnoise.builders import RandomGradientBuilder2d, RandomGradientBuilder3d
from gradnoise.errors import ConstructionError, MissingAxisError
from gradnoise.perlin import Perlin2d, Perlin3d
from gradnoise.provider import PermutedGradientTable


@pytest.fixture
def perlin_a(rng):
    return Perlin2d((3.0, 3.0), PermutedGradientTable.new(rng, RandomGradientBuilder2d(rng), 64))


@pytest.fixture
def perlin_b(rng):
    return Perlin2d((5.0, 2.0), PermutedGradientTable.new(rng, RandomGradientBuilder2d(rng), 64))


@pytest.fixture
def identity():
    """1D source returning its coordinate."""
    return FunctionValue(lambda x: x, dimension=1)


@pytest.fixture
def plane():
    """2D source ``x + 10 y``."""
    return FunctionValue(lambda p: p[0] + 10.0 * p[1], dimension=2)


# --- composition laws ---

def test_add_law(perlin_a, perlin_b, unit_points_2d):
    noise = Add(perlin_a, perlin_b)
    for p in unit_points_2d:
        assert noise.value_at(p) == perlin_a.value_at(p) + perlin_b.value_at(p)


def test_negate_law(perlin_a, unit_points_2d):
    noise = Negate(perlin_a)
    for p in unit_points_2d:
        assert noise.value_at(p) == -perlin_a.value_at(p)


def test_clamp_law(perlin_a, unit_points_2d):
    noise = Clamp(perlin_a, -0.2, 0.3)
    for p in unit_points_2d:
        assert noise.value_at(p) == min(max(perlin_a.value_at(p), -0.2), 0.3)


@pytest.mark.parametrize("low, high", [(0.5, 0.5), (1.0, -1.0)])
def test_clamp_bounds_checked(perlin_a, low, high):
    with pytest.raises(ConstructionError):
        Clamp(perlin_a, low, high)


def test_multiply(perlin_a, perlin_b):
    p = (0.3, 0.7)
    assert Multiply(perlin_a, perlin_b).value_at(p) == perlin_a.value_at(p) * perlin_b.value_at(p)


def test_combine(identity):
    noise = Combine(identity, Constant(2.0), max)
    assert noise.value_at(1.0) == 2.0
    assert noise.value_at(3.0) == 3.0


def test_scale_and_transform(identity):
    assert Scale(identity, 3.0).value_at(2.0) == 6.0
    assert Transform(identity, lambda pos, v: pos * v).value_at(3.0) == 9.0


# --- select / blend ---

def test_select_boundary_is_strict(identity):
    left, right = Constant(1.0), Constant(-1.0)
    assert Select(left, right, Constant(0.5), 0.5).value_at(0.0) == -1.0
    assert Select(left, right, Constant(0.5000001), 0.5).value_at(0.0) == 1.0
    assert Select(left, right, identity, 0.0).value_at(-0.1) == -1.0


def test_blend(identity):
    noise = Blend(Constant(0.0), Constant(4.0), identity, linear_blend)
    assert noise.value_at(0.25) == pytest.approx(1.0)
    assert noise.value_at(2.0) == pytest.approx(4.0)


def test_blend_functions_clamp_t():
    assert linear_blend(0.0, 10.0, 2.0) == 10.0
    assert linear_blend(0.0, 10.0, -1.0) == 0.0
    assert linear_blend(0.0, 10.0, 0.3) == pytest.approx(3.0)
    assert hermite_3rd_order_blend(0.0, 10.0, 0.5) == pytest.approx(5.0)
    assert hermite_5th_order_blend(0.0, 10.0, 0.5) == pytest.approx(5.0)
    assert hermite_3rd_order_blend(0.0, 10.0, 0.25) == pytest.approx(10.0 * 0.15625)


# --- frequency and dimension rules ---

def test_binary_frequency_is_component_max():
    a = Constant(0.0, dimension=2, freq=(1.0, 4.0))
    b = Constant(0.0, dimension=2, freq=(3.0, 2.0))
    assert Add(a, b).frequency() == (3.0, 4.0)
    c = Constant(0.0, dimension=2, freq=(5.0, 1.0))
    assert Select(a, b, c, 0.0).frequency() == (5.0, 4.0)


def test_mixed_dimensions_rejected(perlin_a, identity):
    with pytest.raises(ConstructionError, match="different dimensions"):
        Add(perlin_a, identity)
    with pytest.raises(ConstructionError):
        Blend(perlin_a, perlin_a, identity, linear_blend)


def test_default_constant_fits_any_dimension(perlin_a, rng):
    table = PermutedGradientTable.new(rng, RandomGradientBuilder3d(rng), 64)
    perlin_3d = Perlin3d((2.0, 2.0, 2.0), table)
    offset = Constant(0.5)

    flat = Add(perlin_a, offset)
    assert flat.dim == 2
    assert flat.frequency() == (3.0, 3.0)
    assert flat.value_at((0.3, 0.7)) == pytest.approx(perlin_a.value_at((0.3, 0.7)) + 0.5)

    solid = Multiply(offset, perlin_3d)
    assert solid.dim == 3
    assert solid.frequency() == (2.0, 2.0, 2.0)
    p = (0.1, 0.2, 0.3)
    assert solid.value_at(p) == pytest.approx(0.5 * perlin_3d.value_at(p))

    mask = Select(perlin_3d, Constant(0.0), FunctionValue(lambda p: p[2]), 0.5)
    assert mask.frequency() == (2.0, 2.0, 2.0)
    assert mask.value_at((0.4, 0.4, 0.1)) == 0.0


def test_agnostic_sources_stay_agnostic():
    noise = Add(Constant(1.0), FunctionValue(lambda p: 2.0))
    assert noise.dim is None
    assert noise.frequency() is None
    assert noise.value_at((0.0, 0.0)) == 3.0
    assert WithRange(Constant(0.0), 0.0, 2.0).dim is None


def test_axis_frequencies_missing(identity, plane):
    assert identity.width() == 0.0
    with pytest.raises(MissingAxisError, match="has no height"):
        identity.height()
    with pytest.raises(MissingAxisError, match="has no depth"):
        plane.depth()
    with pytest.raises(MissingAxisError, match="has no width"):
        Constant(1.0).width()


def test_adapters_are_frozen(perlin_a):
    noise = Scale(perlin_a, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        noise.amplitude = 3.0


# --- output range ---

def test_with_range_midpoint():
    assert WithRange(Constant(0.0), 10.0, 20.0).value_at(123.0) == 15.0


def test_with_range_ends():
    assert WithRange(Constant(-1.0), 10.0, 20.0).value_at(0.0) == 10.0
    assert WithRange(Constant(1.0), 10.0, 20.0).value_at(0.0) == 20.0


def test_with_range_bounds_checked():
    with pytest.raises(ConstructionError):
        WithRange(Constant(0.0), 2.0, 1.0)


# --- filter ---

@pytest.mark.parametrize("value, expected", [(0.1, 0.1), (0.2, 0.2), (0.4, 0.2), (0.6, 0.0), (0.8, 0.0)])
def test_low_pass(identity, value, expected):
    noise = Filter(identity, 0.2, 0.6, FilterKind.LOW_PASS)
    assert noise.value_at(value) == pytest.approx(expected)


@pytest.mark.parametrize("value, expected", [(0.1, 0.0), (0.2, 0.0), (0.4, 0.2), (0.6, 0.6), (0.8, 0.8)])
def test_high_pass(identity, value, expected):
    noise = Filter(identity, 0.2, 0.6, FilterKind.HIGH_PASS)
    assert noise.value_at(value) == pytest.approx(expected)


def test_filter_custom_blend(identity):
    noise = Filter(identity, 0.0, 1.0, FilterKind.HIGH_PASS, hermite_3rd_order_blend)
    assert noise.value_at(0.5) == pytest.approx(0.25)


def test_filter_validation(identity):
    with pytest.raises(ConstructionError):
        Filter(identity, 0.5, 0.5, FilterKind.LOW_PASS)
    with pytest.raises(ConstructionError):
        Filter(identity, 0.0, 1.0, "low")


# --- input adapters ---

def test_scale_input(plane):
    assert ScaleInput(plane, (2.0, 3.0)).value_at((1.0, 1.0)) == 32.0


def test_scale_input_saturates_scalar(plane):
    noise = ScaleInput(plane, 2.0)
    assert noise.factor == (2.0, 2.0)
    assert noise.value_at((1.0, 1.0)) == 22.0


def test_shift_input(plane):
    assert ShiftInput(plane, (1.0, -1.0)).value_at((0.5, 2.0)) == 11.5


def test_input_arity_checked(plane):
    with pytest.raises(ConstructionError):
        ShiftInput(plane, (1.0, 2.0, 3.0))


def test_clamp_input(identity, plane):
    noise = ClampInput(identity, 0.0, 1.0)
    assert noise.value_at(3.0) == 1.0
    assert noise.value_at(-2.0) == 0.0
    assert noise.value_at(0.5) == 0.5
    assert ClampInput(plane, (0.0, 0.0), (1.0, 0.5)).value_at((2.0, 2.0)) == 6.0


@pytest.mark.parametrize("pos, expected", [(1.25, 0.25), (-0.25, 0.75), (0.5, 0.5), (3.0, 0.0)])
def test_wrap_input(identity, pos, expected):
    assert WrapInput(identity, 0.0, 1.0).value_at(pos) == pytest.approx(expected)


def test_wrap_input_offset_range(plane):
    noise = WrapInput(plane, (1.0, -1.0), (3.0, 1.0))
    # x: 4.0 -> 2.0, y: -1.5 -> 0.5
    assert noise.value_at((4.0, -1.5)) == pytest.approx(2.0 + 5.0)


def test_input_bounds_checked(plane):
    with pytest.raises(ConstructionError, match="Axis 1"):
        WrapInput(plane, (0.0, 1.0), (1.0, 1.0))
    with pytest.raises(ConstructionError):
        ClampInput(plane, (0.0, 2.0), (1.0, 1.0))


# --- generators ---

def test_constant():
    noise = Constant(0.25, dimension=3)
    assert noise.value_at((9.0, 9.0, 9.0)) == 0.25
    assert noise.frequency() == (0.0, 0.0, 0.0)
    assert noise.dim == 3


def test_generator_validation():
    with pytest.raises(ConstructionError):
        Constant(1.0, dimension=5)
    with pytest.raises(ConstructionError):
        FunctionValue(lambda p: 0.0, dimension=2, freq=3.0)


# --- extension / slice ---

def test_extension2d_ignores_new_axis():
    noise = Extension2d(FunctionValue(lambda x: x * 2, dimension=1))
    assert noise.value_at([3.0, 999.0]) == 6.0
    assert noise.value_at((3.0, -5.0)) == 6.0


def test_extension_frequency():
    assert Extension2d(FunctionValue(lambda x: x, freq=3.0)).frequency() == (3.0, 1.0)
    assert Extension3d(Constant(0.0, dimension=2, freq=(2.0, 4.0))).frequency() == (2.0, 4.0, 1.0)


def test_extension3d(plane):
    noise = Extension3d(plane)
    assert noise.value_at((1.0, 2.0, 77.0)) == 21.0


def test_extension_dimension_checked(plane, identity):
    with pytest.raises(ConstructionError):
        Extension2d(plane)
    with pytest.raises(ConstructionError):
        Extension3d(identity)


def test_slice1d_fixes_last_axis(plane):
    noise = Slice1d(plane, 2.0)
    assert noise.value_at(1.0) == 21.0
    assert Slice1d(Constant(0.0, dimension=2, freq=(3.0, 5.0)), 0.0).frequency() == 3.0


def test_slice2d_fixes_last_axis(rng):
    source = Perlin3d((2.0, 3.0, 4.0), PermutedGradientTable.new(rng, RandomGradientBuilder3d(rng), 64))
    noise = Slice2d(source, 0.3)
    assert noise.value_at((0.1, 0.6)) == source.value_at((0.1, 0.6, 0.3))
    assert noise.frequency() == (2.0, 3.0)


def test_slice_dimension_checked(identity, plane):
    with pytest.raises(ConstructionError):
        Slice1d(identity, 0.0)
    with pytest.raises(ConstructionError):
        Slice2d(plane, 0.0)


def test_slice_of_extension_round_trips(identity):
    assert Slice1d(Extension2d(identity), 42.0).value_at(0.7) == 0.7


# --- fluent interface ---

def test_fluent_chain(perlin_a, perlin_b):
    noise = perlin_a.add(perlin_b).scale(0.5).negate().with_range(0.0, 255.0)
    p = (0.41, 0.13)
    expected = 127.5 + 127.5 * -(0.5 * (perlin_a.value_at(p) + perlin_b.value_at(p)))
    assert noise.value_at(p) == pytest.approx(expected)
    assert noise.frequency() == (5.0, 3.0)


def test_fluent_dimension_adapters(plane, identity):
    assert plane.slice(1.0).value_at(2.0) == 12.0
    assert identity.extend().value_at((4.0, 0.0)) == 4.0
    assert plane.extend().dim == 3


def test_fluent_filters_and_inputs(identity):
    assert identity.clamp(0.0, 1.0).value_at(7.0) == 1.0
    assert identity.filter(0.2, 0.6, FilterKind.HIGH_PASS).value_at(0.1) == 0.0
    assert identity.wrap_input(0.0, 2.0).value_at(5.0) == pytest.approx(1.0)
    assert identity.clamp_input(0.0, 1.0).value_at(-3.0) == 0.0
    assert identity.scale_input(3.0).shift_input(1.0).value_at(2.0) == 9.0
    assert identity.transform(lambda pos, v: v + 1.0).value_at(1.0) == 2.0
    assert identity.multiply(Constant(3.0)).value_at(2.0) == 6.0
    assert identity.combine(Constant(1.0), min).value_at(2.0) == 1.0
    assert identity.select(Constant(0.0), identity, 1.0).value_at(2.0) == 2.0
    assert identity.blend(Constant(0.0), Constant(1.0), linear_blend).value_at(4.0) == 0.0
