"""Margin-based loss functions.

Every loss is expressed in terms of ``z = target * margin``. The gradient
scale returned to the learner is the negated derivative with respect to
the margin, so a positive value pushes the margin towards ``target``.
"""

from __future__ import annotations

import math


class Hinge:
    def loss(self, margin: float, target: float) -> float:
        return max(0.0, 1.0 - target * margin)

    def gradient_scale(self, margin: float, target: float) -> float:
        if target * margin < 1.0:
            return target
        return 0.0


class SmoothHinge:
    def loss(self, margin: float, target: float) -> float:
        z = target * margin
        if z <= 0.0:
            return 0.5 - z
        if z < 1.0:
            return 0.5 * (1.0 - z) ** 2
        return 0.0

    def gradient_scale(self, margin: float, target: float) -> float:
        z = target * margin
        if z <= 0.0:
            return target
        if z < 1.0:
            return target * (1.0 - z)
        return 0.0


class SquaredHinge:
    def loss(self, margin: float, target: float) -> float:
        z = target * margin
        if z >= 1.0:
            return 0.0
        gap = 1.0 - z
        return gap * gap

    def gradient_scale(self, margin: float, target: float) -> float:
        z = target * margin
        if z >= 1.0:
            return 0.0
        return 2.0 * target * (1.0 - z)


class Perceptron:
    def loss(self, margin: float, target: float) -> float:
        return max(0.0, -target * margin)

    def gradient_scale(self, margin: float, target: float) -> float:
        if target * margin <= 0.0:
            return target
        return 0.0


class Logistic:
    def loss(self, margin: float, target: float) -> float:
        z = target * margin
        # log(1 + e^-z) without overflow for large |z|
        if z > 0.0:
            return math.log1p(math.exp(-z))
        return -z + math.log1p(math.exp(z))

    def gradient_scale(self, margin: float, target: float) -> float:
        z = target * margin
        if z > 0.0:
            e = math.exp(-z)
            return target * e / (1.0 + e)
        return target / (1.0 + math.exp(z))


class LeastSquares:
    def loss(self, margin: float, target: float) -> float:
        diff = margin - target
        return 0.5 * diff * diff

    def gradient_scale(self, margin: float, target: float) -> float:
        return target - margin


class ModifiedHuber:
    def loss(self, margin: float, target: float) -> float:
        z = target * margin
        if z < -1.0:
            return -4.0 * z
        if z < 1.0:
            return (1.0 - z) ** 2
        return 0.0

    def gradient_scale(self, margin: float, target: float) -> float:
        z = target * margin
        if z < -1.0:
            return 4.0 * target
        if z < 1.0:
            return 2.0 * target * (1.0 - z)
        return 0.0
