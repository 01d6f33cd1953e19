import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import torch


def _finish(fig, save_path: Optional[str]):
    if save_path is not None:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(save_path, bbox_inches="tight")
        print(f"Saved plot to {save_path}")
    else:
        plt.show()
    plt.close(fig)


def display_results(
    test_images: torch.Tensor,
    test_outputs: torch.Tensor,
    count: int = 20,
    seed: Optional[int] = None,
    save_path: Optional[str] = None,
):
    """
    Show `count` random test images, each titled with its predicted class.

    test_images:  (num_test, H, W)
    test_outputs: (num_test, num_classes) class probabilities
    """
    num_test = test_images.shape[0]
    count = min(count, num_test)
    if count <= 0:
        return np.empty(0, dtype=np.int64)

    rng = np.random.default_rng(seed)
    picks = rng.choice(num_test, size=count, replace=False)

    images = test_images.detach().cpu().numpy()
    predicted = torch.argmax(test_outputs, dim=1).cpu().numpy()

    cols = min(count, 5)
    rows = max(1, (count + cols - 1) // cols)
    fig, axes = plt.subplots(rows, cols, figsize=(2 * cols, 2.2 * rows), squeeze=False)

    for ax in axes.flat:
        ax.axis("off")

    for ax, idx in zip(axes.flat, picks):
        ax.imshow(images[idx], cmap="gray")
        ax.set_title(f"Predicted: {predicted[idx]}", fontsize=9)

    fig.tight_layout()
    _finish(fig, save_path)
    return picks


def plot_loss_curve(loss_history: Sequence[float], save_path: Optional[str] = None):
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(range(1, len(loss_history) + 1), loss_history)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Loss")
    ax.set_title("Training loss")
    ax.grid(True)
    fig.tight_layout()
    _finish(fig, save_path)
