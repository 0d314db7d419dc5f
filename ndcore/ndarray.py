from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Any, Self

import numpy as np
from numpy.typing import NDArray as NumpyArray

import ndcore.ops as ops
from ndcore.exceptions import ShapeMismatchError
from ndcore.utils.shape import normalize_shape, size_of
from ndcore.utils.types import ArrayLike, Coordinate, Shape, ShapeLike


class NDArray:  # noqa: PLR0904
    """
    Dense, row-major, N-dimensional array of double-precision values.

    An array is a value: its buffer is owned exclusively by the instance and is read-only, and every
    transformation returns a new array backed by a freshly allocated buffer.

    Note:
        Instantiation is typically done through the constructors in :mod:`ndcore.ops`
        (:func:`~ndcore.ops.zeros`, :func:`~ndcore.ops.from_nested`, ...) rather than directly.

    """

    __slots__ = ("_data", "_shape")

    def __init__(self, data: Iterable[float] | NumpyArray[Any], shape: ShapeLike | None = None):
        """
        Initialize the array from a flat buffer.

        Args:
            data (Iterable[float] | NDArray): flat values in row-major order, copied into a new buffer.
            shape (ShapeLike | None): extent along each axis. Defaults to ``(len(data),)``.

        Raises:
            ShapeMismatchError: if *data* is not flat or its length is not the product of *shape*.

        """
        buffer = np.array(data if isinstance(data, np.ndarray) else list(data), dtype=np.float64)
        if buffer.ndim != 1:
            raise ShapeMismatchError(f"Buffer must be flat, got a buffer of shape {buffer.shape}")

        self._shape: Shape = normalize_shape(buffer.size if shape is None else shape)
        if buffer.size != size_of(self._shape):
            raise ShapeMismatchError(f"Buffer of {buffer.size} elements cannot have shape {self._shape}")

        buffer.flags.writeable = False
        self._data: NumpyArray[np.float64] = buffer

    @classmethod
    def _from_owned_buffer(cls, buffer: NumpyArray[np.float64], shape: Shape) -> Self:
        """Wrap a freshly allocated flat float64 buffer without copying it again."""
        array = cls.__new__(cls)
        buffer.flags.writeable = False
        array._data = buffer
        array._shape = shape
        return array

    @property
    def shape(self) -> Shape:
        """Extent along each axis."""
        return self._shape

    @property
    def ndim(self) -> int:
        """Number of axes."""
        return len(self._shape)

    @property
    def size(self) -> int:
        """Number of elements."""
        return int(self._data.size)

    @property
    def data(self) -> NumpyArray[np.float64]:
        """Read-only flat buffer in row-major order."""
        return self._data

    def reshape(self, *shape: int | Shape) -> NDArray:
        """
        Return a copy of this array with a new shape.

        Accepts either ``a.reshape(3, 2)`` or ``a.reshape((3, 2))``.

        Raises:
            ShapeMismatchError: if the new shape holds a different number of elements.

        """
        new_shape = shape[0] if len(shape) == 1 else shape
        return ops.reshape(self, new_shape)  # type: ignore[arg-type]

    def flatten(self) -> NDArray:
        """Return a rank-1 copy of this array."""
        return ops.flatten(self)

    def copy(self) -> NDArray:
        """Return a copy of this array."""
        return ops.copy(self)

    def with_value(self, coordinate: Coordinate | int, value: float) -> NDArray:
        """
        Return a copy of this array with the element at *coordinate* replaced by *value*.

        Args:
            coordinate: coordinate of the element to replace, or an int for rank-1 arrays
            value: the new element value

        Returns:
            a new array, this array is left unchanged

        Raises:
            TypeError: if *value* is not a real number.
            IndexError: if the coordinate has the wrong rank or lies outside the array.

        """
        if not isinstance(value, Real):
            raise TypeError(f"Element value must be a real number, got {type(value).__name__}")

        buffer = self._data.copy()
        buffer[ops.linear_index_of(self._shape, self._coordinate(coordinate))] = value
        return type(self)._from_owned_buffer(buffer, self._shape)

    def sum(self) -> float:
        """Sum of all elements, see :func:`ndcore.ops.sum`."""
        return ops.sum(self)

    def mean(self) -> float:
        """Mean of all elements, see :func:`ndcore.ops.mean`."""
        return ops.mean(self)

    def var(self, ddof: int = 0) -> float:
        """Variance of all elements, see :func:`ndcore.ops.var`."""
        return ops.var(self, ddof=ddof)

    def std(self, ddof: int = 0) -> float:
        """Standard deviation of all elements, see :func:`ndcore.ops.std`."""
        return ops.std(self, ddof=ddof)

    def min(self) -> float:
        """Smallest element, see :func:`ndcore.ops.min`."""
        return ops.min(self)

    def max(self) -> float:
        """Largest element, see :func:`ndcore.ops.max`."""
        return ops.max(self)

    def dot(self, other: ArrayLike) -> float:
        """Dot product with another rank-1 array, see :func:`ndcore.ops.dot`."""
        return ops.dot(self, other)

    def tolist(self) -> list[Any]:
        """Return the contents as nested python lists, one nesting level per axis."""
        return self._data.reshape(self._shape).tolist()  # type: ignore[no-any-return]

    def to_numpy(self) -> NumpyArray[np.float64]:
        """Return a writable NumPy copy with this array's shape."""
        return self._data.reshape(self._shape).copy()

    def _coordinate(self, key: Coordinate | int) -> Coordinate:
        if isinstance(key, int | np.integer):
            return (int(key),)
        return tuple(key)

    def __getitem__(self, key: Coordinate | int) -> float:
        """
        Read one element by coordinate.

        Args:
            key: full coordinate of the element, or an int for rank-1 arrays

        Returns:
            the element value

        Raises:
            IndexError: if the coordinate has the wrong rank or lies outside the array.

        """
        return float(self._data[ops.linear_index_of(self._shape, self._coordinate(key))])

    def __matmul__(self, other: ArrayLike) -> float:
        return ops.dot(self, other)

    def __rmatmul__(self, other: ArrayLike) -> float:
        return ops.dot(other, self)

    def __eq__(self, other: object) -> bool:
        """Arrays are equal when their shapes and their contents are equal."""
        if not isinstance(other, NDArray):
            return NotImplemented
        return self._shape == other._shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # adding 0.0 maps -0.0 to 0.0, which compare equal
        return hash((self._shape, (self._data + 0.0).tobytes()))

    def __len__(self) -> int:
        """Return the extent of the first axis."""
        return self._shape[0]

    def __iter__(self) -> Iterator[float | NDArray]:
        """
        Iterate over the first axis.

        Yields floats for rank-1 arrays and rank ``ndim - 1`` arrays otherwise.

        """
        if self.ndim == 1:
            yield from (float(value) for value in self._data)
            return

        row_shape = self._shape[1:]
        row_size = size_of(row_shape)
        for row in range(self._shape[0]):
            yield type(self)._from_owned_buffer(self._data[row * row_size : (row + 1) * row_size].copy(), row_shape)

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NumpyArray[Any]:  # noqa: PLW3201
        """
        Return a NumPy copy of the array, used by :func:`numpy.asarray`.

        Raises:
            ValueError: if *copy* is False, the read-only buffer cannot be exposed without copying.

        """
        if copy is False:
            raise ValueError("NDArray cannot be converted to a NumPy array without copying")
        return self.to_numpy() if dtype is None else self.to_numpy().astype(dtype)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"NDArray(shape={self._shape}, data={self.tolist()!r})"

    def __str__(self) -> str:
        """Return the user-friendly string representation of the object."""
        return str(self.tolist())
