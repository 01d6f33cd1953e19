# utils.py

import random

import numpy as np
import torch

from .errors import BackendError, ShapeMismatchError


def set_global_seed(seed: int) -> None:
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)


def get_torch_device(index: int = 0) -> str:
    """
    Pick the compute device: CUDA device `index` if CUDA is usable, else CPU.

    Raises BackendError if CUDA is available but `index` is out of range.
    """
    if not torch.cuda.is_available():
        return "cpu"

    count = torch.cuda.device_count()
    if index < 0 or index >= count:
        raise BackendError(
            f"CUDA device {index} requested but only {count} device(s) available"
        )
    return f"cuda:{index}"


def describe_device(device: str) -> str:
    dev = torch.device(device)
    lines = [f"torch {torch.__version__}"]
    if dev.type == "cuda":
        props = torch.cuda.get_device_properties(dev)
        lines.append(
            f"Device [{dev.index}]: {props.name}, "
            f"{props.total_memory // (1024 ** 2)} MB, "
            f"compute {props.major}.{props.minor}"
        )
        lines.append(f"CUDA devices available: {torch.cuda.device_count()}")
    else:
        lines.append(f"Device: CPU ({torch.get_num_threads()} threads)")
    return "\n".join(lines)


def accuracy(predicted: torch.Tensor, target: torch.Tensor) -> float:
    """
    Percentage of rows whose argmax in `predicted` matches the one in `target`.

    Ties resolve to the lowest index (torch.argmax returns the first
    maximal value).
    """
    if predicted.dim() != 2 or target.dim() != 2:
        raise ShapeMismatchError("accuracy expects 2D prediction and target matrices")
    if predicted.shape != target.shape:
        raise ShapeMismatchError(
            f"predicted {tuple(predicted.shape)} vs target {tuple(target.shape)}"
        )
    num_rows = target.shape[0]
    if num_rows == 0:
        raise ShapeMismatchError("accuracy needs at least one row")

    plabels = torch.argmax(predicted, dim=1)
    tlabels = torch.argmax(target, dim=1)

    correct = (plabels == tlabels).sum().item()
    return 100.0 * correct / num_rows
