"""Binary linear learners."""

from .base import BinaryClassifier
from .factory import make_sgd
from .sgd import EpochRecord, LearnerConfigError, SGDLearner, SGDState

__all__ = [
    "BinaryClassifier",
    "EpochRecord",
    "LearnerConfigError",
    "SGDLearner",
    "SGDState",
    "make_sgd",
]
