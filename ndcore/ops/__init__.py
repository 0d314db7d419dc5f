"""
Functions that create, transform and reduce :class:`~ndcore.ndarray.NDArray` objects.

Every function is pure: inputs are never modified and every array returned is backed by a freshly allocated
buffer. Functions taking an existing array also accept any nested structure :func:`from_nested` accepts.
"""

from __future__ import annotations

from ._construction import (
    copy,
    from_nested,
    full,
    full_like,
    ones,
    ones_like,
    zeros,
    zeros_like,
)
from ._indexing import coordinate_of, iter_coordinates, linear_index_of
from ._reductions import (
    dot,
    max,  # noqa: A004
    mean,
    min,  # noqa: A004
    std,
    sum,  # noqa: A004
    var,
)
from ._reshape import flatten, reshape
from ._sequences import arange, linspace

__all__ = [  # noqa: RUF022
    # From _construction
    "copy",
    "from_nested",
    "full",
    "full_like",
    "ones",
    "ones_like",
    "zeros",
    "zeros_like",
    # From _indexing
    "coordinate_of",
    "iter_coordinates",
    "linear_index_of",
    # From _reshape
    "flatten",
    "reshape",
    # From _sequences
    "arange",
    "linspace",
    # From _reductions
    "dot",
    "max",
    "mean",
    "min",
    "std",
    "sum",
    "var",
]
