"""Errors raised by array construction, transformation and reduction."""

from __future__ import annotations


class NDArrayError(ValueError):
    """Base class for out-of-domain arguments passed to :mod:`ndcore` operations."""


class InvalidShapeError(NDArrayError):
    """Shape is empty, contains a negative extent or is not a sequence of integers."""


class RaggedShapeError(NDArrayError):
    """Nested input data is not rectangular."""


class ShapeMismatchError(NDArrayError):
    """Element counts or vector lengths of an operation's operands disagree."""


class InvalidStepError(NDArrayError):
    """Step of a sequence generator is zero."""


class InvalidCountError(NDArrayError):
    """Requested number of generated values is not positive."""


class InvalidDegreesOfFreedomError(NDArrayError):
    """Delta degrees of freedom is negative or not smaller than the number of elements."""


class EmptyInputError(NDArrayError):
    """Reduction requiring at least one element received none."""
