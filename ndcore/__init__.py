from ndcore import exceptions, ops, sampling
from ndcore.ndarray import NDArray

__all__ = [
    "NDArray",
    "exceptions",
    "ops",
    "sampling",
]
