"""Orchestration of a single train/evaluate run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from config import Config
from evaluation import ConfusionMatrix
from index.base import ForwardIndex
from learners.factory import make_sgd
from learners.sgd import EpochRecord, SGDLearner

log = logging.getLogger(__name__)


@dataclass
class TrainingReport:
    history: list[EpochRecord]
    confusion: ConfusionMatrix
    train_ids: list[int]
    test_ids: list[int]
    bias_weight: float
    nonzero_weights: int
    weight_norm: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "epochs": len(self.history),
            "final_loss": self.history[-1].loss if self.history else None,
            "confusion": self.confusion.to_dict(),
            "train_size": len(self.train_ids),
            "test_size": len(self.test_ids),
            "bias_weight": self.bias_weight,
            "nonzero_weights": self.nonzero_weights,
            "weight_norm": self.weight_norm,
        }


def split_docs(
    doc_ids: Sequence[int],
    test_fraction: float,
    rng: np.random.Generator,
) -> tuple[list[int], list[int]]:
    """Randomly hold out ``test_fraction`` of ``doc_ids``."""
    ids = np.array(list(doc_ids), dtype=int)
    rng.shuffle(ids)
    n_test = int(len(ids) * test_fraction)
    test = sorted(int(i) for i in ids[:n_test])
    train = sorted(int(i) for i in ids[n_test:])
    return train, test


def run_training(cfg: Config, index: ForwardIndex) -> TrainingReport:
    rng = np.random.default_rng(cfg.run.seed)
    train_ids, test_ids = split_docs(list(index.docs()), cfg.run.test_fraction, rng)
    if cfg.run.shuffle:
        order = rng.permutation(len(train_ids))
        train_ids = [train_ids[i] for i in order]

    learner = make_sgd(cfg.learner, index, cfg.data.positive, cfg.data.negative)
    log.info(
        "training %s-loss sgd on %d documents (%d held out)",
        cfg.learner.loss, len(train_ids), len(test_ids),
    )
    learner.train(train_ids)

    eval_ids = test_ids or train_ids
    confusion = learner.test(eval_ids)
    log.info(
        "accuracy %.4f on %s set (%d documents)",
        confusion.accuracy, "test" if test_ids else "training", len(eval_ids),
    )
    return _report(learner, confusion, train_ids, test_ids)


def _report(
    learner: SGDLearner,
    confusion: ConfusionMatrix,
    train_ids: list[int],
    test_ids: list[int],
) -> TrainingReport:
    weights = learner.effective_weights()
    return TrainingReport(
        history=list(learner.history),
        confusion=confusion,
        train_ids=train_ids,
        test_ids=test_ids,
        bias_weight=learner.bias_weight,
        nonzero_weights=int(np.count_nonzero(weights)),
        weight_norm=float(np.linalg.norm(weights)),
    )
