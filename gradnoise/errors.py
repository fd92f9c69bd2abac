# gradnoise/errors.py
"""Exception hierarchy for gradnoise."""


class NoiseError(Exception):
    """Base class for every error raised by gradnoise."""


class ConstructionError(NoiseError, ValueError):
    """A table, evaluator or adapter was built with invalid parameters."""


class LatticeIndexError(NoiseError, IndexError):
    """A dense gradient grid was indexed outside its vertex bounds."""


class EmptyOctavesError(NoiseError, LookupError):
    """An empty octave sequence was asked for its frequency."""


class MissingAxisError(NoiseError, LookupError):
    """A source was asked for the frequency of an axis it does not have."""
