# features.py

import torch
import torch.nn.functional as F

from ..errors import ShapeMismatchError


def flatten_images(images: torch.Tensor) -> torch.Tensor:
    # (N, H, W) or (N, C, H, W) -> (N, features)
    if images.dim() < 2:
        raise ShapeMismatchError(
            f"expected a batch of images, got shape {tuple(images.shape)}"
        )
    return torch.flatten(images, start_dim=1)


def add_bias_column(feats: torch.Tensor) -> torch.Tensor:
    """Prepend a constant 1 column so the model can learn an intercept."""
    if feats.dim() != 2:
        raise ShapeMismatchError(
            f"feature matrix must be 2D, got shape {tuple(feats.shape)}"
        )
    ones = torch.ones(feats.shape[0], 1, dtype=feats.dtype, device=feats.device)
    return torch.cat([ones, feats], dim=1)


def one_hot(labels: torch.Tensor, num_classes: int, dtype=torch.float32) -> torch.Tensor:
    return F.one_hot(labels.long(), num_classes=num_classes).to(dtype)
