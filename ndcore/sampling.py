"""Arrays of uniformly distributed values drawn from an external random source."""

from __future__ import annotations

from abc import abstractmethod
from functools import cache
from typing import Protocol

import numpy as np

from ndcore.ndarray import NDArray
from ndcore.ops._helpers import _wrap
from ndcore.utils.logger import LOGGER
from ndcore.utils.shape import normalize_shape, size_of
from ndcore.utils.types import ShapeLike


class UniformSource(Protocol):
    """
    A minimal protocol for sources of uniformly distributed doubles.

    Both :class:`random.Random` and :class:`numpy.random.Generator` satisfy it.
    """

    @abstractmethod
    def random(self) -> float:
        """Return the next value in ``[0, 1)``."""


@cache
def default_source() -> UniformSource:
    """Get the NumPy random number generator used when no source is given."""
    return np.random.default_rng()


def rand(shape: ShapeLike, source: UniformSource | None = None) -> NDArray:
    """
    Create an array of values drawn uniformly from ``[0, 1)``.

    Values are drawn one at a time from *source* and stored in row-major order.

    Args:
        shape (ShapeLike): extent along each axis.
        source (UniformSource | None): where to draw values from, :func:`default_source` if None.

    Returns:
        NDArray: array of random values.

    Raises:
        InvalidShapeError: if *shape* is empty or contains a negative entry.

    """
    return uniform(shape, 0.0, 1.0, source)


def uniform(shape: ShapeLike, low: float = 0.0, high: float = 1.0, source: UniformSource | None = None) -> NDArray:
    """
    Create an array of values drawn uniformly from ``[low, high)``.

    Each value is ``low + u * (high - low)`` for a draw ``u`` of *source*.

    Args:
        shape (ShapeLike): extent along each axis.
        low (float): lower bound of the interval.
        high (float): upper bound of the interval.
        source (UniformSource | None): where to draw values from, :func:`default_source` if None.

    Returns:
        NDArray: array of random values.

    Raises:
        InvalidShapeError: if *shape* is empty or contains a negative entry.
        ValueError: if *high* is smaller than *low*.

    """
    if high < low:
        raise ValueError(f"Upper bound {high} is smaller than lower bound {low}")

    shape = normalize_shape(shape)
    size = size_of(shape)
    source = default_source() if source is None else source
    LOGGER.debug(f"Drawing {size} uniform values in [{low}, {high})")
    draws = np.fromiter((source.random() for _ in range(size)), dtype=np.float64, count=size)
    return _wrap(low + draws * (high - low), shape)
