from __future__ import annotations

import math
from numbers import Integral

import numpy as np

from ndcore.exceptions import EmptyInputError, InvalidDegreesOfFreedomError, ShapeMismatchError
from ndcore.utils.types import ArrayLike

from ._construction import _as_ndarray


def sum(array: ArrayLike) -> float:  # noqa: A001
    """
    Sum all elements of an array, regardless of its rank.

    Args:
        array (ArrayLike): input array.

    Returns:
        float: the sum, ``0.0`` for an empty array.

    """
    return float(np.sum(_as_ndarray(array).data))


def mean(array: ArrayLike) -> float:
    """
    Compute the mean of all elements of an array, regardless of its rank.

    Args:
        array (ArrayLike): input array.

    Returns:
        float: the mean.

    Raises:
        EmptyInputError: if the array has no elements.

    """
    values = _as_ndarray(array).data
    if values.size == 0:
        raise EmptyInputError("Cannot compute the mean of an empty array")
    return float(np.mean(values))


def var(array: ArrayLike, ddof: int = 0) -> float:
    """
    Compute the variance ``sum((x - mean)**2) / (n - ddof)`` of all elements of an array.

    Args:
        array (ArrayLike): input array.
        ddof (int): delta degrees of freedom, ``0`` for the population and ``1`` for the sample variance.

    Returns:
        float: the variance.

    Raises:
        InvalidDegreesOfFreedomError: if *ddof* is negative or not smaller than the number of elements.

    """
    values = _as_ndarray(array).data
    if isinstance(ddof, bool) or not isinstance(ddof, Integral) or ddof < 0:
        raise InvalidDegreesOfFreedomError(f"Delta degrees of freedom must be a non-negative integer, got {ddof!r}")
    if values.size <= ddof:
        raise InvalidDegreesOfFreedomError(
            f"Delta degrees of freedom ({ddof}) must be smaller than the number of elements ({values.size})"
        )

    deviations = values - np.mean(values)
    return float(np.sum(deviations * deviations) / (values.size - ddof))


def std(array: ArrayLike, ddof: int = 0) -> float:
    """
    Compute the standard deviation ``sqrt(sum((x - mean)**2) / (n - ddof))`` of all elements of an array.

    Args:
        array (ArrayLike): input array.
        ddof (int): delta degrees of freedom, ``0`` for the population and ``1`` for the sample deviation.

    Returns:
        float: the standard deviation.

    Raises:
        InvalidDegreesOfFreedomError: if *ddof* is negative or not smaller than the number of elements.

    """
    return math.sqrt(var(array, ddof=ddof))


def min(array: ArrayLike) -> float:  # noqa: A001
    """
    Find the smallest element of an array.

    Raises:
        EmptyInputError: if the array has no elements.

    """
    values = _as_ndarray(array).data
    if values.size == 0:
        raise EmptyInputError("Cannot compute the minimum of an empty array")
    return float(np.min(values))


def max(array: ArrayLike) -> float:  # noqa: A001
    """
    Find the largest element of an array.

    Raises:
        EmptyInputError: if the array has no elements.

    """
    values = _as_ndarray(array).data
    if values.size == 0:
        raise EmptyInputError("Cannot compute the maximum of an empty array")
    return float(np.max(values))


def dot(array1: ArrayLike, array2: ArrayLike) -> float:
    """
    Compute the dot product ``sum(a[i] * b[i])`` of two vectors.

    Args:
        array1 (ArrayLike): first rank-1 array.
        array2 (ArrayLike): second rank-1 array.

    Returns:
        float: the dot product, ``0.0`` for two empty vectors.

    Raises:
        ShapeMismatchError: if an operand is not rank-1 or the lengths differ.

    """
    a = _as_ndarray(array1)
    b = _as_ndarray(array2)
    if a.ndim != 1 or b.ndim != 1:
        raise ShapeMismatchError(f"Dot product is defined for rank-1 arrays, got shapes {a.shape} and {b.shape}")
    if a.size != b.size:
        raise ShapeMismatchError(f"Input arrays must have the same length, got {a.size} and {b.size}")
    return float(np.dot(a.data, b.data))
