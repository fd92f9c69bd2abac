"""Shared pytest fixtures for gradnoise tests."""

import numpy as np
import pytest


class ScriptedRandom:
    """
    Random source replaying fixed values.

    ``integers`` and ``uniform`` each consume their own script and fail
    loudly if a value falls outside the requested range.
    """

    def __init__(self, integers=(), uniforms=()):
        self._integers = list(integers)
        self._uniforms = list(uniforms)

    def integers(self, low, high):
        value = self._integers.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        return value

    def uniform(self, low, high):
        value = self._uniforms.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        return value


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator, fresh per test."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted():
    """Factory for :class:`ScriptedRandom` sources."""
    return ScriptedRandom


@pytest.fixture
def unit_points_2d(rng):
    """A few hundred query points in [0, 1)^2."""
    return [tuple(p) for p in rng.uniform(0.0, 1.0, size=(400, 2))]
