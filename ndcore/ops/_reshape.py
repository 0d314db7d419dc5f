from __future__ import annotations

from ndcore.exceptions import ShapeMismatchError
from ndcore.ndarray import NDArray
from ndcore.utils.logger import LOGGER
from ndcore.utils.shape import normalize_shape, size_of
from ndcore.utils.types import ArrayLike, ShapeLike

from ._construction import _as_ndarray
from ._helpers import _wrap


def reshape(array: ArrayLike, shape: ShapeLike) -> NDArray:
    """
    Reshape an array to the specified shape.

    Element ``i`` of the source in row-major order is element ``i`` of the result in row-major order, so
    the result is a relabeled copy of the source buffer.

    Args:
        array (ArrayLike): input array.
        shape (ShapeLike): desired shape for the output array.

    Returns:
        NDArray: reshaped copy of the input.

    Raises:
        InvalidShapeError: if *shape* is empty or contains a negative entry.
        ShapeMismatchError: if *shape* holds a different number of elements than *array*.

    """
    array = _as_ndarray(array)
    new_shape = normalize_shape(shape)
    if size_of(new_shape) != array.size:
        raise ShapeMismatchError(
            f"Cannot reshape array of shape {array.shape} ({array.size} elements) "
            f"into shape {new_shape} ({size_of(new_shape)} elements)"
        )

    LOGGER.debug(f"Reshaping {array.shape} -> {new_shape}")
    return _wrap(array.data.copy(), new_shape)


def flatten(array: ArrayLike) -> NDArray:
    """Return a rank-1 copy of *array*."""
    array = _as_ndarray(array)
    return reshape(array, (array.size,))
