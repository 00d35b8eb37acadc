"""Loss functions available to the SGD learner."""

from __future__ import annotations

from .base import LossFunction
from .functions import (
    Hinge,
    LeastSquares,
    Logistic,
    ModifiedHuber,
    Perceptron,
    SmoothHinge,
    SquaredHinge,
)

LOSSES = {
    "hinge": Hinge,
    "smooth_hinge": SmoothHinge,
    "squared_hinge": SquaredHinge,
    "perceptron": Perceptron,
    "logistic": Logistic,
    "least_squares": LeastSquares,
    "modified_huber": ModifiedHuber,
}


def make_loss(name: str) -> LossFunction:
    try:
        return LOSSES[name]()
    except KeyError:
        raise ValueError(f"unknown loss function: {name}") from None


__all__ = [
    "LOSSES",
    "Hinge",
    "LeastSquares",
    "Logistic",
    "LossFunction",
    "ModifiedHuber",
    "Perceptron",
    "SmoothHinge",
    "SquaredHinge",
    "make_loss",
]
