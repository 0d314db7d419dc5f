from __future__ import annotations

from numbers import Real
from typing import Any

import numpy as np

from ndcore.exceptions import InvalidShapeError, RaggedShapeError
from ndcore.ndarray import NDArray
from ndcore.utils.logger import LOGGER
from ndcore.utils.shape import normalize_shape, size_of
from ndcore.utils.types import ArrayLike, NestedData, Shape, ShapeLike

from ._helpers import _wrap

_SEQUENCE_TYPES = (list, tuple, np.ndarray, NDArray)


def full(shape: ShapeLike, value: float) -> NDArray:
    """
    Create an array of the given shape with every element set to *value*.

    Args:
        shape (ShapeLike): extent along each axis. A ``0`` extent is allowed and gives an empty array.
        value (float): fill value.

    Returns:
        NDArray: the filled array.

    Raises:
        InvalidShapeError: if *shape* is empty or contains a negative entry.
        TypeError: if *value* is not a real number.

    """
    if not isinstance(value, Real):
        raise TypeError(f"Fill value must be a real number, got {type(value).__name__}")

    shape = normalize_shape(shape)
    size = size_of(shape)
    LOGGER.debug(f"Allocating {size} elements for shape {shape}")
    return _wrap(np.full(size, float(value), dtype=np.float64), shape)


def zeros(shape: ShapeLike) -> NDArray:
    """
    Create an array of zeros.

    Args:
        shape (ShapeLike): extent along each axis.

    Returns:
        NDArray: array of ``0.0``.

    Raises:
        InvalidShapeError: if *shape* is empty or contains a negative entry.

    """
    return full(shape, 0.0)


def ones(shape: ShapeLike) -> NDArray:
    """
    Create an array of ones.

    Args:
        shape (ShapeLike): extent along each axis.

    Returns:
        NDArray: array of ``1.0``.

    Raises:
        InvalidShapeError: if *shape* is empty or contains a negative entry.

    """
    return full(shape, 1.0)


def full_like(array: ArrayLike, value: float) -> NDArray:
    """Create an array with the same shape as *array*, every element set to *value*."""
    return full(_as_ndarray(array).shape, value)


def zeros_like(array: ArrayLike) -> NDArray:
    """Create an array of zeros with the same shape as *array*."""
    return full_like(array, 0.0)


def ones_like(array: ArrayLike) -> NDArray:
    """Create an array of ones with the same shape as *array*."""
    return full_like(array, 1.0)


def copy(array: ArrayLike) -> NDArray:
    """
    Create a copy of the input array.

    Args:
        array (ArrayLike): input array.

    Returns:
        NDArray: a new array with its own buffer.

    """
    array = _as_ndarray(array)
    return _wrap(array.data.copy(), array.shape)


def from_nested(data: NestedData | NDArray) -> NDArray:
    """
    Interpret a nested rectangular structure as an array.

    Every nesting level becomes one axis, e.g. ``[[1, 2, 3], [4, 5, 6]]`` has shape ``(2, 3)``.
    Lists, tuples, NumPy arrays and :class:`~ndcore.ndarray.NDArray` objects may be mixed freely.

    Args:
        data (NestedData | NDArray): nested structure of real numbers.

    Returns:
        NDArray: the array.

    Raises:
        InvalidShapeError: if *data* is a bare scalar.
        RaggedShapeError: if sub-sequences at one nesting level have different lengths,
            or if scalars and sequences are mixed at one nesting level.
        TypeError: if a leaf is not a real number.

    """
    if isinstance(data, NDArray):
        return copy(data)
    if isinstance(data, np.ndarray) and data.dtype != np.object_:
        if data.ndim == 0:
            raise InvalidShapeError("Cannot create an array from a 0-dimensional input")
        if not (np.issubdtype(data.dtype, np.number) or np.issubdtype(data.dtype, np.bool_)):
            raise TypeError(f"Unsupported element type: {data.dtype}")
        if np.iscomplexobj(data):
            raise TypeError("Complex values are not supported")
        return _wrap(data.astype(np.float64).ravel(), tuple(int(extent) for extent in data.shape))
    if not isinstance(data, _SEQUENCE_TYPES):
        _check_scalar(data)
        raise InvalidShapeError(f"Cannot create an array from the scalar {data!r}, wrap it in a list")

    shape, leaves = _flatten_rectangular(data)
    LOGGER.debug(f"Inferred shape {shape} from nested input")
    return _wrap(np.array(leaves, dtype=np.float64), shape)


def _flatten_rectangular(data: NestedData) -> tuple[Shape, list[Any]]:
    """
    Walk *data* one nesting level at a time and collect its extents and leaves.

    Returns:
        the extent of every level and the leaves in row-major order

    Raises:
        RaggedShapeError: if a level is not rectangular.

    """
    shape: list[int] = []
    level: list[Any] = [data]
    # Trailing extents known from array nodes, kept when a zero extent empties the next level.
    expected: Shape | None = None
    while level:
        is_sequence = [_is_sequence(node) for node in level]
        if not any(is_sequence):
            for node in level:
                _check_scalar(node)
            break
        if not all(is_sequence):
            raise RaggedShapeError(f"Scalars and sequences are mixed at nesting level {len(shape)}")

        node_shapes = {tuple(node.shape) for node in level if isinstance(node, np.ndarray | NDArray)}
        if expected is not None:
            node_shapes.add(expected)
        if len(node_shapes) > 1:
            raise RaggedShapeError(f"Arrays at nesting level {len(shape)} have different shapes: {sorted(node_shapes)}")
        expected = node_shapes.pop() if node_shapes else None

        lengths = {len(node) for node in level}
        if expected is not None:
            lengths.add(expected[0])
        if len(lengths) > 1:
            raise RaggedShapeError(f"Rows at nesting level {len(shape)} have different lengths: {sorted(lengths)}")

        shape.append(lengths.pop())
        expected = (expected[1:] or None) if expected is not None else None
        level = [child for node in level for child in node]

    if expected is not None:
        shape.extend(expected)
    return tuple(shape), level


def _is_sequence(node: object) -> bool:
    if isinstance(node, np.ndarray):
        return node.ndim > 0
    return isinstance(node, _SEQUENCE_TYPES)


def _check_scalar(value: object) -> None:
    if not isinstance(value, Real):
        raise TypeError(f"Unsupported element type: {type(value).__name__}")


def _as_ndarray(array: ArrayLike) -> NDArray:
    """
    Return *array* unchanged if it already is an :class:`~ndcore.ndarray.NDArray`, otherwise convert it.

    Args:
        array (ArrayLike): array or nested structure accepted by :func:`from_nested`.

    Returns:
        NDArray: the array.

    """
    if isinstance(array, NDArray):
        return array
    return from_nested(array)
