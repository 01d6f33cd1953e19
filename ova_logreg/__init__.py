"""One-vs-all logistic regression trained by batch gradient descent on torch tensors."""

from .errors import (
    BackendError,
    ErrorKind,
    LogRegError,
    NumericDegeneracyError,
    ShapeMismatchError,
)
from .logistic import cost_and_gradient, predict, regularization_mask, sigmoid
from .training import Trainer, TrainingResult, TrainingStatus, train
from .utils import accuracy

__all__ = [
    "BackendError",
    "ErrorKind",
    "LogRegError",
    "NumericDegeneracyError",
    "ShapeMismatchError",
    "cost_and_gradient",
    "predict",
    "regularization_mask",
    "sigmoid",
    "Trainer",
    "TrainingResult",
    "TrainingStatus",
    "train",
    "accuracy",
]
