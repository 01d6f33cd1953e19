# training.py

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import torch

from .logistic import check_matrix, cost_and_gradient


class TrainingStatus(Enum):
    CONVERGED = "converged"   # loss dropped under the threshold
    EXHAUSTED = "exhausted"   # max_iter reached


@dataclass
class TrainingResult:
    weights: torch.Tensor
    loss: float
    iterations: int
    status: TrainingStatus
    loss_history: List[float] = field(default_factory=list)


class Trainer:
    """
    Batch gradient descent for one-vs-all logistic regression.

    Every iteration evaluates the loss on the full training set. Training
    stops as soon as the loss is below `threshold` (before the update of
    that iteration) or after `max_iter` iterations.

    The threshold is an absolute loss value. 0.1 suits MNIST-sized
    problems with a few classes and does not carry over to other loss
    scales.
    """

    def __init__(
        self,
        alpha: float = 0.1,
        lambda_: float = 1.0,
        max_iter: int = 1000,
        threshold: float = 0.1,
        strict: bool = False,
        log_interval: int = 0,
    ):
        self.alpha = alpha
        self.lambda_ = lambda_
        self.max_iter = max_iter
        self.threshold = threshold
        self.strict = strict
        self.log_interval = log_interval

    def fit(self, X: torch.Tensor, Y: torch.Tensor) -> TrainingResult:
        check_matrix("X", X)
        check_matrix("Y", Y)

        # Initialize parameters to 0
        W = torch.zeros(X.shape[1], Y.shape[1], dtype=X.dtype, device=X.device)

        history: List[float] = []
        status = TrainingStatus.EXHAUSTED
        loss = float("nan")

        for i in range(self.max_iter):
            J, dJ = cost_and_gradient(W, X, Y, self.lambda_, strict=self.strict)

            # .item() forces the pending device work so we can compare on host
            loss = J.item()
            history.append(loss)

            if self.log_interval and (i + 1) % self.log_interval == 0:
                print(f"  Iteration {i + 1}: loss = {loss:.4f}")

            if loss < self.threshold:
                status = TrainingStatus.CONVERGED
                break

            W = W - self.alpha * dJ

        return TrainingResult(
            weights=W,
            loss=loss,
            iterations=len(history),
            status=status,
            loss_history=history,
        )


def train(
    X: torch.Tensor,
    Y: torch.Tensor,
    alpha: float = 0.1,
    lambda_: float = 1.0,
    max_iter: int = 1000,
) -> torch.Tensor:
    """Train and return only the weight matrix (num_features, num_classes)."""
    trainer = Trainer(alpha=alpha, lambda_=lambda_, max_iter=max_iter)
    return trainer.fit(X, Y).weights
