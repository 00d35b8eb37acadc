"""In-memory forward index and a libsvm-format loader."""

from __future__ import annotations

from pathlib import Path
from typing import Hashable, Iterable, Sequence, Tuple

from .base import DocumentNotFoundError, SparseVector


class InMemoryForwardIndex:
    """Forward index over a list of ``(label, features)`` documents.

    Document ids are the positions in ``documents``. Features may be given
    as a mapping or as ``(feature_id, value)`` pairs; ids must be unique
    within a document and non-negative.
    """

    def __init__(self, documents: Sequence[Tuple[Hashable, object]]):
        self._labels: list[Hashable] = []
        self._vectors: list[SparseVector] = []
        vocab = 0
        for pos, (label, features) in enumerate(documents):
            vector = _as_sparse(features, pos)
            if vector:
                vocab = max(vocab, max(fid for fid, _ in vector) + 1)
            self._labels.append(label)
            self._vectors.append(vector)
        self._num_features = vocab

    def __len__(self) -> int:
        return len(self._vectors)

    def search_primary(self, doc_id: int) -> SparseVector:
        return self._vectors[self._position(doc_id)]

    def label(self, doc_id: int) -> Hashable:
        return self._labels[self._position(doc_id)]

    def num_features(self) -> int:
        return self._num_features

    def docs(self) -> Iterable[int]:
        return range(len(self._vectors))

    def _position(self, doc_id: int) -> int:
        if isinstance(doc_id, bool) or not isinstance(doc_id, int):
            raise DocumentNotFoundError(doc_id)
        if doc_id < 0 or doc_id >= len(self._vectors):
            raise DocumentNotFoundError(doc_id)
        return doc_id


def _as_sparse(features: object, pos: int) -> SparseVector:
    pairs = features.items() if hasattr(features, "items") else features
    seen: set[int] = set()
    vector = []
    for fid, value in pairs:
        fid = int(fid)
        if fid < 0:
            raise ValueError(f"document {pos}: negative feature id {fid}")
        if fid in seen:
            raise ValueError(f"document {pos}: duplicate feature id {fid}")
        seen.add(fid)
        vector.append((fid, float(value)))
    return tuple(vector)


def load_libsvm(path: str | Path) -> InMemoryForwardIndex:
    """Read ``label fid:value ...`` lines into an in-memory index."""
    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(source)

    documents = []
    with source.open("r", encoding="utf-8") as handle:
        for lineno, raw in enumerate(handle, start=1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            label, *tokens = line.split()
            features = []
            for token in tokens:
                fid, sep, value = token.partition(":")
                if not sep:
                    raise ValueError(f"{source}:{lineno}: malformed feature {token!r}")
                try:
                    features.append((int(fid), float(value)))
                except ValueError as exc:
                    raise ValueError(
                        f"{source}:{lineno}: malformed feature {token!r}"
                    ) from exc
            documents.append((label, features))
    try:
        return InMemoryForwardIndex(documents)
    except ValueError as exc:
        raise ValueError(f"{source}: {exc}") from exc
