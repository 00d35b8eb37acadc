"""Confusion-matrix bookkeeping for binary classifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable


@dataclass
class ConfusionMatrix:
    positive: Hashable
    negative: Hashable
    tp: int = 0
    fp: int = 0
    tn: int = 0
    fn: int = 0

    def add(self, gold: Hashable, predicted: Hashable) -> None:
        gold_pos = gold == self.positive
        pred_pos = predicted == self.positive
        if gold_pos and pred_pos:
            self.tp += 1
        elif pred_pos:
            self.fp += 1
        elif gold_pos:
            self.fn += 1
        else:
            self.tn += 1

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    @property
    def accuracy(self) -> float:
        return (self.tp + self.tn) / self.total if self.total else 0.0

    @property
    def precision(self) -> float:
        denom = self.tp + self.fp
        return self.tp / denom if denom else 0.0

    @property
    def recall(self) -> float:
        denom = self.tp + self.fn
        return self.tp / denom if denom else 0.0

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        return 2.0 * p * r / (p + r) if (p + r) else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "positive": self.positive,
            "negative": self.negative,
            "tp": self.tp,
            "fp": self.fp,
            "tn": self.tn,
            "fn": self.fn,
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
        }
