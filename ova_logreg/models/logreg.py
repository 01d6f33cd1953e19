# logreg.py
import torch
import torch.nn as nn

from ..logistic import predict


class OneVsAllLogReg(nn.Module):
    """
    One-vs-all logistic regression over flattened images with a bias column.

    The whole model is a single weight matrix:
    - W: (num_features, num_classes), row 0 holds the bias weights
    - forward: sigmoid(X @ W), one independent probability per class

    The weights are a buffer, not a Parameter: they are fitted by the
    closed-form gradient in `ova_logreg.logistic`, not by autograd.
    """

    def __init__(self, num_features: int, num_classes: int = 10):
        super().__init__()
        self.register_buffer("weights", torch.zeros(num_features, num_classes))

    @classmethod
    def from_weights(cls, weights: torch.Tensor) -> "OneVsAllLogReg":
        model = cls(weights.shape[0], weights.shape[1])
        model.weights = weights.detach().clone()
        return model

    @property
    def num_features(self) -> int:
        return self.weights.shape[0]

    @property
    def num_classes(self) -> int:
        return self.weights.shape[1]

    def forward(self, x):
        """
        x: (batch_size, num_features), first column constant 1
        returns: class probabilities of shape (batch_size, num_classes)
        """
        return predict(x, self.weights)
