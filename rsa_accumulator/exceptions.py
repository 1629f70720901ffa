"""
Accumulator Errors

Every error is raised synchronously, before any accumulator state is
touched, so a failed call never leaves a partial update behind.
"""


class AccumulatorError(ValueError):
    """Base class for all accumulator errors."""


class InvalidParameter(AccumulatorError):
    """Malformed or non-invertible public parameters (N, g)."""


class InvalidElement(AccumulatorError):
    """Element is not an integer >= 2 coprime to the modulus."""


class UnknownElement(AccumulatorError, KeyError):
    """A witness was requested for an element that was never added."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
