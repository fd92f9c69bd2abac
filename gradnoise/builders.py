# gradnoise/builders.py
"""
Gradient builders: strategies producing one random gradient per call.

Every builder owns the random source it was constructed with. The source
must expose ``uniform(low, high)`` and ``integers(low, high)`` like
``numpy.random.Generator``.
"""

import math
from typing import Tuple

TWO_PI = 2.0 * math.pi
FRAC_1_SQRT_2 = 1.0 / math.sqrt(2.0)


class GradientBuilder:
    """Base class of the gradient strategies"""

    dim = 1

    def __init__(self, rng):
        self.rng = rng

    def make_gradient(self):
        raise NotImplementedError


class RandomGradientBuilder1d(GradientBuilder):
    """Scalar gradients uniformly distributed in [-1, 1)"""

    def make_gradient(self) -> float:
        return float(self.rng.uniform(-1.0, 1.0))


class CubeGradientBuilder1d(GradientBuilder):
    """Scalar gradients of -1 or +1"""

    def make_gradient(self) -> float:
        return -1.0 if int(self.rng.integers(0, 2)) == 0 else 1.0


class RandomGradientBuilder2d(GradientBuilder):
    """Unit gradients at a uniformly distributed angle"""

    dim = 2

    def make_gradient(self) -> Tuple[float, float]:
        angle = float(self.rng.uniform(0.0, TWO_PI))
        return (math.cos(angle), math.sin(angle))


class CubeGradientBuilder2d(GradientBuilder):
    """One of the four unit diagonals (+-1, +-1) / sqrt(2)"""

    dim = 2

    CUBE_GRADIENTS = (
        (-FRAC_1_SQRT_2, -FRAC_1_SQRT_2),
        (FRAC_1_SQRT_2, -FRAC_1_SQRT_2),
        (-FRAC_1_SQRT_2, FRAC_1_SQRT_2),
        (FRAC_1_SQRT_2, FRAC_1_SQRT_2),
    )

    def make_gradient(self) -> Tuple[float, float]:
        return self.CUBE_GRADIENTS[int(self.rng.integers(0, 4))]


class RandomGradientBuilder3d(GradientBuilder):
    """
    Unit gradients from spherical coordinates.

    theta is half of a [0, 2pi) sample, phi a full [0, 2pi) sample.
    """

    dim = 3

    def make_gradient(self) -> Tuple[float, float, float]:
        theta = float(self.rng.uniform(0.0, TWO_PI)) / 2.0
        phi = float(self.rng.uniform(0.0, TWO_PI))

        sin_theta = math.sin(theta)
        return (sin_theta * math.cos(phi), sin_theta * math.sin(phi), math.cos(theta))
