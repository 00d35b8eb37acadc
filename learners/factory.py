"""Build learners from configuration sections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable

from index.base import ForwardIndex
from loss import make_loss

from .sgd import SGDLearner

if TYPE_CHECKING:
    from config import LearnerConfig


def make_sgd(
    cfg: LearnerConfig,
    index: ForwardIndex,
    positive: Hashable,
    negative: Hashable,
) -> SGDLearner:
    return SGDLearner(
        index,
        positive,
        negative,
        make_loss(cfg.loss),
        alpha=cfg.alpha,
        gamma=cfg.gamma,
        bias=cfg.bias,
        lam=cfg.lam,
        max_iter=cfg.max_iter,
    )
