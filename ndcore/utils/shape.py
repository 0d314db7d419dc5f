"""Shape validation shared by the array type and the function layer."""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Integral

import numpy as np

from ndcore.exceptions import InvalidShapeError
from ndcore.utils.types import Shape, ShapeLike


def normalize_shape(shape: ShapeLike) -> Shape:
    """
    Validate a shape and return it as a tuple of ints.

    Args:
        shape (ShapeLike): sequence of extents, or a single extent for a rank-1 shape

    Returns:
        the shape as a tuple of python ints

    Raises:
        InvalidShapeError: if the shape is empty, has a negative extent or a non-integer extent

    """
    if isinstance(shape, Integral) and not isinstance(shape, bool):
        shape = (shape,)
    if not isinstance(shape, Sequence | np.ndarray) or isinstance(shape, str):
        raise InvalidShapeError(f"Shape must be a sequence of integers, got {shape!r}")

    extents = tuple(shape)
    if not extents:
        raise InvalidShapeError("Shape must have at least one axis")
    for extent in extents:
        if isinstance(extent, bool) or not isinstance(extent, Integral):
            raise InvalidShapeError(f"Shape extents must be integers, got {extents!r}")
        if extent < 0:
            raise InvalidShapeError(f"Shape extents must be non-negative, got {extents!r}")

    return tuple(int(extent) for extent in extents)


def size_of(shape: Shape) -> int:
    """Number of elements of an array with the given (already validated) *shape*."""
    return math.prod(shape)
