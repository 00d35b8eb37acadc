"""Shared behaviour of binary classifiers over a forward index."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Tuple

from evaluation import ConfusionMatrix
from index.base import DocumentNotFoundError, ForwardIndex, SparseVector


class BinaryClassifier(ABC):
    """Decides between a positive label and everything else.

    Subclasses supply ``train``, ``predict`` and ``reset``; a document is
    classified as ``positive`` when its score is non-negative.
    """

    def __init__(self, index: ForwardIndex, positive: Hashable, negative: Hashable):
        self.index = index
        self.positive = positive
        self.negative = negative

    @abstractmethod
    def train(self, doc_ids: Iterable[int]) -> None:
        ...

    @abstractmethod
    def predict(self, doc) -> float:
        ...

    @abstractmethod
    def reset(self) -> None:
        ...

    def classify(self, doc_id: int) -> Hashable:
        if self.predict(doc_id) >= 0.0:
            return self.positive
        return self.negative

    def test(self, doc_ids: Iterable[int]) -> ConfusionMatrix:
        matrix = ConfusionMatrix(self.positive, self.negative)
        for doc_id in doc_ids:
            _, gold = self._lookup(doc_id)
            matrix.add(gold, self.classify(doc_id))
        return matrix

    def _lookup(self, doc_id: int) -> Tuple[SparseVector, Hashable]:
        try:
            return self.index.search_primary(doc_id), self.index.label(doc_id)
        except DocumentNotFoundError:
            raise
        except (KeyError, IndexError) as exc:
            raise DocumentNotFoundError(doc_id) from exc
