"""Feature-vector sources consumed by the learners."""

from .base import DocumentNotFoundError, ForwardIndex, SparseVector
from .memory import InMemoryForwardIndex, load_libsvm

__all__ = [
    "DocumentNotFoundError",
    "ForwardIndex",
    "InMemoryForwardIndex",
    "SparseVector",
    "load_libsvm",
]
