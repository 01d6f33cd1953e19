import matplotlib

matplotlib.use("Agg")

import pytest
import torch


@pytest.fixture
def separable():
    """4 samples, bias + 2 features, two linearly separable classes."""
    X = torch.tensor([
        [1.0, 2.0, 2.0],
        [1.0, 3.0, 3.0],
        [1.0, -2.0, -2.0],
        [1.0, -3.0, -3.0],
    ])
    Y = torch.tensor([
        [1.0, 0.0],
        [1.0, 0.0],
        [0.0, 1.0],
        [0.0, 1.0],
    ])
    return X, Y
