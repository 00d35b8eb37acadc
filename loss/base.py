"""Loss-function strategy used by the SGD learner."""

from __future__ import annotations

from typing import Protocol


class LossFunction(Protocol):
    """Margin-based loss for binary targets in ``{+1, -1}``."""

    def loss(self, margin: float, target: float) -> float:
        """Return the loss incurred by ``margin`` for ``target``."""

    def gradient_scale(self, margin: float, target: float) -> float:
        """Return ``-dloss/dmargin``; zero means no weight update is needed."""
