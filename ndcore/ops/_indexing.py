from __future__ import annotations

from collections.abc import Iterator, Sequence
from numbers import Integral

from ndcore.utils.shape import normalize_shape, size_of
from ndcore.utils.types import Coordinate, ShapeLike


def coordinate_of(shape: ShapeLike, linear_index: int) -> Coordinate:
    """
    Convert a linear offset into the row-major coordinate it addresses.

    Axes are visited from the last (fastest varying) to the first. The coordinate along each axis is the
    remainder of the offset by that axis' extent, and the quotient carries over to the next slower axis.

    Args:
        shape (ShapeLike): extent along each axis.
        linear_index (int): offset into the flat buffer, ``0 <= linear_index < prod(shape)``.

    Returns:
        Coordinate: one index per axis.

    Raises:
        InvalidShapeError: if *shape* is invalid.
        IndexError: if *linear_index* lies outside the array.

    """
    shape = normalize_shape(shape)
    if isinstance(linear_index, bool) or not isinstance(linear_index, Integral):
        raise IndexError(f"Linear index must be an integer, got {linear_index!r}")
    size = size_of(shape)
    if not 0 <= linear_index < size:
        raise IndexError(f"Linear index {linear_index} is out of bounds for shape {shape} with {size} elements")

    remainder = int(linear_index)
    coordinate = [0] * len(shape)
    for axis in range(len(shape) - 1, -1, -1):
        coordinate[axis] = remainder % shape[axis]
        remainder //= shape[axis]
    return tuple(coordinate)


def linear_index_of(shape: ShapeLike, coordinate: Sequence[int]) -> int:
    """
    Convert a coordinate into its row-major offset in the flat buffer.

    Args:
        shape (ShapeLike): extent along each axis.
        coordinate (Sequence[int]): one index per axis.

    Returns:
        int: offset of the element, the inverse of :func:`coordinate_of`.

    Raises:
        InvalidShapeError: if *shape* is invalid.
        IndexError: if *coordinate* has the wrong rank or a component outside its axis.

    """
    shape = normalize_shape(shape)
    if len(coordinate) != len(shape):
        raise IndexError(f"Coordinate {tuple(coordinate)} has rank {len(coordinate)}, expected {len(shape)}")

    offset = 0
    for axis, (extent, index) in enumerate(zip(shape, coordinate, strict=True)):
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise IndexError(f"Coordinate components must be integers, got {tuple(coordinate)}")
        if not 0 <= index < extent:
            raise IndexError(f"Index {index} is out of bounds for axis {axis} with extent {extent}")
        offset = offset * extent + int(index)
    return offset


def iter_coordinates(shape: ShapeLike) -> Iterator[Coordinate]:
    """Yield every coordinate of an array with the given *shape* in row-major order."""
    shape = normalize_shape(shape)
    for linear_index in range(size_of(shape)):
        yield coordinate_of(shape, linear_index)
