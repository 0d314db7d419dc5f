from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray as NumpyArray

from ndcore.ndarray import NDArray
from ndcore.utils.types import Shape


def _wrap(buffer: NumpyArray[Any], shape: Shape) -> NDArray:
    """
    Hand a freshly allocated flat buffer over to a new array.

    The buffer must not be referenced anywhere else, it becomes read-only and is owned by the returned array.

    Args:
        buffer (NDArray): flat buffer in row-major order.
        shape (Shape): validated shape whose element count equals the buffer length.

    Returns:
        NDArray: the new array.

    """
    return NDArray._from_owned_buffer(np.ascontiguousarray(buffer, dtype=np.float64), shape)  # noqa: SLF001
