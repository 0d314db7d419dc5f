"""Type definitions for arrays, shapes and coordinates."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ndcore.ndarray import NDArray


type Shape = tuple[int, ...]
"""
Extent along each axis of an array, outermost axis first.

alias of :class:`tuple` [:class:`int`, ...]
"""

type Coordinate = tuple[int, ...]
"""Per-axis index tuple identifying one element of an array."""

type Scalar = float | int | np.floating | np.integer
"""Real scalar accepted as an element value."""

type NestedData = Scalar | Sequence[NestedData] | np.ndarray
"""
Caller-provided nested structure of scalars, e.g. ``[[1, 2, 3], [4, 5, 6]]``.

Only rectangular structures are accepted by :func:`ndcore.ops.from_nested`.
"""

type ArrayLike = NDArray | NestedData
"""
Anything the reductions accept as an operand.

alias of :class:`~ndcore.ndarray.NDArray` | :data:`NestedData`
"""

type ShapeLike = Shape | Sequence[int] | int
"""Shape given either as a sequence of extents or as a single extent for rank-1 arrays."""
