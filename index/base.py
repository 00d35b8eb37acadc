"""Base types for document feature sources."""

from __future__ import annotations

from typing import Hashable, Iterable, Protocol, Tuple

SparseVector = Tuple[Tuple[int, float], ...]


class DocumentNotFoundError(KeyError):
    """Raised when a document id cannot be resolved by a forward index."""

    def __init__(self, doc_id: Hashable):
        super().__init__(doc_id)
        self.doc_id = doc_id

    def __str__(self) -> str:
        return f"document {self.doc_id!r} not found in forward index"


class ForwardIndex(Protocol):
    """Read-only mapping from document ids to sparse features and labels."""

    def search_primary(self, doc_id: int) -> SparseVector:
        """Return the ``(feature_id, value)`` pairs of ``doc_id``."""

    def label(self, doc_id: int) -> Hashable:
        """Return the gold class label of ``doc_id``."""

    def num_features(self) -> int:
        """Return the size of the feature vocabulary."""

    def docs(self) -> Iterable[int]:
        """Return every document id known to the index."""
