"""Tests for dense grid storage."""

import pytest

from gradnoise.errors import ConstructionError, LatticeIndexError
from gradnoise.grid import Grid


def test_row_major_2d():
    grid = Grid((2, 3), range(6))
    assert grid.width == 2
    assert grid.height == 3
    assert grid.depth == 1
    assert grid.index_from_coords((1, 2)) == 1 + 2 * 2
    assert grid[(1, 2)] == 5.0
    assert grid[(0, 1)] == 2.0


def test_row_major_3d():
    grid = Grid((2, 3, 4), range(24))
    assert grid.index_from_coords((1, 2, 3)) == 1 + 2 * 2 + 3 * 2 * 3
    assert grid[(1, 2, 3)] == 23.0


def test_1d_accepts_int():
    grid = Grid((3,), [4.0, 5.0, 6.0])
    assert grid[2] == 6.0
    assert grid[(1,)] == 5.0


def test_vector_cells():
    grid = Grid((2,), [(1.0, 0.0), (0.0, 1.0)])
    assert grid[1].tolist() == [0.0, 1.0]


@pytest.mark.parametrize("coords", [(2, 0), (0, 3), (-1, 0)])
def test_out_of_bounds(coords):
    grid = Grid((2, 3), range(6))
    with pytest.raises(LatticeIndexError):
        grid[coords]


def test_wrong_arity():
    grid = Grid((2, 3), range(6))
    with pytest.raises(LatticeIndexError):
        grid[(1, 1, 1)]


def test_data_length_mismatch():
    with pytest.raises(ConstructionError, match="needs 6 cells"):
        Grid((2, 3), range(5))


@pytest.mark.parametrize("shape", [(), (1, 1, 1, 1), (0, 2)])
def test_invalid_shape(shape):
    with pytest.raises(ConstructionError):
        Grid(shape, [])


def test_read_only():
    grid = Grid((2,), [1.0, 2.0])
    with pytest.raises(ValueError):
        grid.data[0] = 3.0


def test_build_calls_builder_in_linear_order():
    class Counter:
        def __init__(self):
            self.n = 0

        def make_gradient(self):
            self.n += 1
            return float(self.n)

    grid = Grid.build((2, 2), Counter())
    assert grid.data.tolist() == [1.0, 2.0, 3.0, 4.0]
    assert grid[(0, 1)] == 3.0
