from __future__ import annotations

import math
from numbers import Integral

import numpy as np

from ndcore.exceptions import InvalidCountError, InvalidStepError
from ndcore.ndarray import NDArray
from ndcore.utils.logger import LOGGER

from ._helpers import _wrap


def arange(start: float, stop: float | None = None, step: float = 1.0) -> NDArray:
    """
    Create a rank-1 array of values ``start, start + step, start + 2*step, ...`` strictly before *stop*.

    With a single argument, ``arange(n)`` is ``arange(0, n, 1)``.

    Args:
        start (float): first value.
        stop (float | None): end of the interval, never included.
        step (float): spacing between consecutive values, may be negative.

    Returns:
        NDArray: ``max(0, ceil((stop - start) / step))`` values, empty when *stop* lies behind *start*
        in the direction of *step*.

    Raises:
        InvalidStepError: if *step* is zero.
        ValueError: if an argument is not finite.

    """
    if stop is None:
        start, stop = 0.0, start
    if step == 0:
        raise InvalidStepError("Step must be non-zero")
    if not all(math.isfinite(value) for value in (start, stop, step)):
        raise ValueError(f"Arguments must be finite, got start={start}, stop={stop}, step={step}")

    count = max(0, math.ceil((stop - start) / step))
    LOGGER.debug(f"arange({start}, {stop}, {step}) produces {count} values")
    return _wrap(start + np.arange(count, dtype=np.float64) * step, (count,))


def linspace(start: float, stop: float, num: int = 50, endpoint: bool = True) -> NDArray:
    """
    Create a rank-1 array of *num* evenly spaced values from *start* to *stop*.

    Args:
        start (float): first value.
        stop (float): last value if *endpoint* is True, otherwise the excluded end of the interval.
        num (int): number of values to generate.
        endpoint (bool): whether *stop* is the last value. The spacing is ``(stop - start) / (num - 1)``
            if True and ``(stop - start) / num`` otherwise.

    Returns:
        NDArray: the values. With *endpoint*, the last value equals *stop* exactly.

    Raises:
        InvalidCountError: if *num* is not positive.
        TypeError: if *num* is not an integer.

    """
    if isinstance(num, bool) or not isinstance(num, Integral):
        raise TypeError(f"Number of values must be an integer, got {type(num).__name__}")
    if num <= 0:
        raise InvalidCountError(f"Number of values must be positive, got {num}")

    num = int(num)
    divisions = num - 1 if endpoint else num
    spacing = (stop - start) / divisions if divisions > 0 else 0.0
    values = start + np.arange(num, dtype=np.float64) * spacing
    if endpoint and num > 1:
        values[-1] = stop

    LOGGER.debug(f"linspace({start}, {stop}) produces {num} values with spacing {spacing}")
    return _wrap(values, (num,))
