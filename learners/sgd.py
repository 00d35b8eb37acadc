"""Stochastic gradient descent for binary linear classifiers.

The learner keeps its weights as ``coeff * weights``. L2 regularization
shrinks every effective weight by ``(1 - alpha * lambda)`` after each
example; that shrink is applied to the scalar ``coeff`` alone, and updates
to the stored weights are divided by ``coeff`` so that the effective change
is exactly ``alpha * scale * value``. When ``coeff`` gets close to
underflowing it is folded back into the stored weights.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Optional, Tuple, Union

import numpy as np

from index.base import ForwardIndex, SparseVector
from loss.base import LossFunction

from .base import BinaryClassifier

log = logging.getLogger(__name__)

DEFAULT_ALPHA = 0.001
DEFAULT_GAMMA = 1e-6
DEFAULT_BIAS = 1.0
DEFAULT_LAMBDA = 0.0001
DEFAULT_MAX_ITER = 50

COEFF_FLOOR = 1e-9


class LearnerConfigError(ValueError):
    pass


@dataclass
class SGDState:
    weights: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=float))
    coeff: float = 1.0
    bias_weight: float = 0.0

    def resize(self, size: int) -> None:
        if size > self.weights.size:
            grown = np.zeros(size, dtype=float)
            grown[: self.weights.size] = self.weights
            self.weights = grown

    def dot(self, features: Iterable[Tuple[int, float]]) -> float:
        weights = self.weights
        size = weights.size
        total = 0.0
        for fid, value in features:
            if 0 <= fid < size:
                total += float(weights[fid]) * value
        return total

    def margin(self, features: Iterable[Tuple[int, float]], bias: float) -> float:
        return self.coeff * self.dot(features) + self.bias_weight * bias

    def fold(self) -> None:
        """Multiply ``coeff`` into the stored weights and reset it to one."""
        if self.coeff != 1.0:
            self.weights *= self.coeff
            self.coeff = 1.0


def sgd_update(
    state: SGDState,
    features: SparseVector,
    scale: float,
    *,
    alpha: float,
    bias: float,
) -> None:
    """Move the effective weights by ``alpha * scale * value`` in place."""
    step = alpha * scale
    weights = state.weights
    for fid, value in features:
        weights[fid] += step * value / state.coeff
    state.bias_weight += step * bias


def shrink(state: SGDState, factor: float, *, floor: float = COEFF_FLOOR) -> bool:
    """Apply the L2 shrink to ``coeff``; return True if it had to be folded."""
    state.coeff *= factor
    if state.coeff < floor:
        state.fold()
        return True
    return False


@dataclass
class EpochRecord:
    epoch: int
    loss: float
    delta: Optional[float]
    coeff: float
    updates: int
    folds: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "epoch": self.epoch,
            "loss": self.loss,
            "delta": self.delta,
            "coeff": self.coeff,
            "updates": self.updates,
            "folds": self.folds,
        }


class SGDLearner(BinaryClassifier):
    """Binary linear classifier trained online with lazily regularized SGD."""

    coeff_floor = COEFF_FLOOR

    def __init__(
        self,
        index: ForwardIndex,
        positive: Hashable,
        negative: Hashable,
        loss: Optional[LossFunction],
        alpha: float = DEFAULT_ALPHA,
        gamma: float = DEFAULT_GAMMA,
        bias: float = DEFAULT_BIAS,
        lam: float = DEFAULT_LAMBDA,
        max_iter: int = DEFAULT_MAX_ITER,
    ):
        if loss is None:
            raise LearnerConfigError("sgd learner requires a loss function")
        if not alpha > 0:
            raise LearnerConfigError(f"alpha must be positive, got {alpha}")
        if not gamma >= 0:
            raise LearnerConfigError(f"gamma must be non-negative, got {gamma}")
        if not lam >= 0:
            raise LearnerConfigError(f"lambda must be non-negative, got {lam}")
        if alpha * lam >= 1.0:
            raise LearnerConfigError("alpha * lambda must be below 1")
        if int(max_iter) < 0:
            raise LearnerConfigError(f"max_iter must be non-negative, got {max_iter}")
        super().__init__(index, positive, negative)
        self.loss = loss
        self.alpha = float(alpha)
        self.gamma = float(gamma)
        self.bias = float(bias)
        self.lam = float(lam)
        self.max_iter = int(max_iter)

        self.state = SGDState()
        self.history: list[EpochRecord] = []

    @property
    def weights(self) -> np.ndarray:
        return self.state.weights.copy()

    @property
    def coeff(self) -> float:
        return self.state.coeff

    @property
    def bias_weight(self) -> float:
        return self.state.bias_weight

    def effective_weights(self) -> np.ndarray:
        return self.state.coeff * self.state.weights

    def train(self, doc_ids: Iterable[int]) -> None:
        docs = list(doc_ids)
        if not docs:
            return
        self.state.resize(self.index.num_features())

        shrink_factor = 1.0 - self.alpha * self.lam
        prev_loss = math.nan
        for it in range(self.max_iter):
            total_loss = 0.0
            updates = 0
            folds = 0
            for doc_id in docs:
                features, label = self._lookup(doc_id)
                features = _as_pairs(features)
                if features:
                    self.state.resize(max(fid for fid, _ in features) + 1)
                target = 1.0 if label == self.positive else -1.0
                margin = self.state.margin(features, self.bias)
                total_loss += self.loss.loss(margin, target)

                scale = self.loss.gradient_scale(margin, target)
                if scale != 0.0:
                    sgd_update(self.state, features, scale, alpha=self.alpha, bias=self.bias)
                    updates += 1
                if shrink(self.state, shrink_factor, floor=self.coeff_floor):
                    folds += 1

            coeff = self.state.coeff
            self.state.fold()
            mean_loss = total_loss / len(docs)
            delta = abs(prev_loss - mean_loss) if it else None
            record = EpochRecord(
                epoch=len(self.history),
                loss=mean_loss,
                delta=delta,
                coeff=coeff,
                updates=updates,
                folds=folds,
            )
            self.history.append(record)
            log.debug(
                "epoch %d: loss=%.6g delta=%s updates=%d folds=%d",
                record.epoch, mean_loss, delta, updates, folds,
            )
            if mean_loss <= self.gamma or (delta is not None and delta <= self.gamma):
                log.info("sgd converged after %d epochs (loss=%.6g)", it + 1, mean_loss)
                return
            prev_loss = mean_loss
        log.info("sgd stopped at max_iter=%d (loss=%.6g)", self.max_iter, prev_loss)

    def predict(self, doc: Union[int, SparseVector, Mapping[int, float]]) -> float:
        """Return the raw decision score for a document id or sparse vector."""
        if isinstance(doc, (int, np.integer)) and not isinstance(doc, bool):
            features = _as_pairs(self._lookup(int(doc))[0])
        elif isinstance(doc, Mapping):
            features = _as_pairs(doc.items())
        else:
            features = _as_pairs(doc)
        return self.state.margin(features, self.bias)

    def reset(self) -> None:
        self.state = SGDState(weights=np.zeros(self.state.weights.size, dtype=float))
        self.history = []


def _as_pairs(doc: Iterable[Tuple[int, float]]) -> SparseVector:
    pairs = tuple((int(fid), float(value)) for fid, value in doc)
    for fid, _ in pairs:
        if fid < 0:
            raise ValueError(f"negative feature id {fid}")
    return pairs
