# logistic.py

from typing import Tuple

import torch

from .errors import NumericDegeneracyError, ShapeMismatchError


def sigmoid(z: torch.Tensor) -> torch.Tensor:
    return 1 / (1 + torch.exp(-z))


def check_matrix(name: str, t: torch.Tensor) -> None:
    if t.dim() != 2:
        raise ShapeMismatchError(
            f"{name} must be a 2D matrix, got shape {tuple(t.shape)}"
        )


def predict(X: torch.Tensor, W: torch.Tensor) -> torch.Tensor:
    """
    Class probabilities for every sample.

    X: (num_samples, num_features), bias column included
    W: (num_features, num_classes)
    returns: (num_samples, num_classes), sigmoid(X @ W)
    """
    check_matrix("X", X)
    check_matrix("W", W)
    if X.shape[1] != W.shape[0]:
        raise ShapeMismatchError(
            f"X has {X.shape[1]} features but W has {W.shape[0]} rows"
        )
    return sigmoid(torch.matmul(X, W))


def regularization_mask(W: torch.Tensor, lambda_: float) -> torch.Tensor:
    # Row 0 holds the bias weights, which are not regularized
    mask = torch.full_like(W, lambda_)
    mask[0, :] = 0
    return mask


def cost_and_gradient(
    W: torch.Tensor,
    X: torch.Tensor,
    Y: torch.Tensor,
    lambda_: float = 1.0,
    strict: bool = False,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Regularized one-vs-all cross-entropy loss and its gradient w.r.t. W.

    Returns (J, dJ) where J is a 0-d tensor (left on the device, not
    materialized) and dJ has the shape of W.

    Predictions are not clipped away from 0 and 1, so a saturated sigmoid
    yields an inf/nan loss. With strict=True such values raise
    NumericDegeneracyError instead of being returned.
    """
    check_matrix("X", X)
    check_matrix("Y", Y)
    check_matrix("W", W)
    m = Y.shape[0]
    if m < 1:
        raise ShapeMismatchError("cost needs at least one sample")
    if X.shape[0] != m:
        raise ShapeMismatchError(
            f"X has {X.shape[0]} samples but Y has {m}"
        )
    if Y.shape[1] != W.shape[1]:
        raise ShapeMismatchError(
            f"Y has {Y.shape[1]} classes but W has {W.shape[1]} columns"
        )

    lambdat = regularization_mask(W, lambda_)

    H = predict(X, W)

    J = -torch.sum(Y * torch.log(H) + (1 - Y) * torch.log(1 - H)) / m
    J = J + 0.5 * torch.sum(lambdat * W * W) / m

    D = H - Y
    dJ = (torch.matmul(X.T, D) + lambdat * W) / m

    if strict:
        if not torch.isfinite(J).item():
            raise NumericDegeneracyError(f"non-finite loss: {J.item()}")
        if not torch.isfinite(dJ).all().item():
            raise NumericDegeneracyError("non-finite values in gradient")

    return J, dJ
