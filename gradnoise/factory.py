# gradnoise/factory.py
"""
Per-octave gradient provider strategies.

A factory's ``build(octave, frequency)`` returns the gradient provider for
one octave of a fractal sum.
"""

import logging

from .config import DEFAULT_GRADIENT_TABLE_SIZE
from .provider import GradientGrid, PermutedGradientTable

logger = logging.getLogger(__name__)


class GridGradientFactory:
    """Fresh dense grid sized to each octave's frequency"""

    def __init__(self, builder):
        self.builder = builder

    def build(self, octave: int, frequency) -> GradientGrid:
        return GradientGrid.build(frequency, self.builder)


class RandomPermutationGradientFactory:
    """
    Fresh permuted table per octave.

    Octave ``i`` gets ``grid_size * int(grid_scaling ** i)`` gradients.
    """

    def __init__(self, builder, rng, grid_size: int = DEFAULT_GRADIENT_TABLE_SIZE,
                 grid_scaling: float = 1.0):
        self.builder = builder
        self.rng = rng
        self.grid_size = grid_size
        self.grid_scaling = grid_scaling

    def build(self, octave: int, frequency) -> PermutedGradientTable:
        size = self.grid_size * int(self.grid_scaling ** octave)
        logger.debug("Octave %d: %d gradients", octave, size)
        return PermutedGradientTable.new(self.rng, self.builder, size)


class PermutationGradientFactory:
    """Every octave shares one table"""

    def __init__(self, table: PermutedGradientTable):
        self.table = table

    def build(self, octave: int, frequency) -> PermutedGradientTable:
        return self.table
