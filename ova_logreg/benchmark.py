# benchmark.py

import time
from contextlib import contextmanager
from dataclasses import dataclass

import torch

from .models import OneVsAllLogReg
from .training import Trainer


class BenchmarkContext:
    """
    Timing state for one device.

    Passed explicitly to the benchmark routines so timers and device
    synchronization are never global.
    """

    def __init__(self, device: str = "cpu"):
        self.device = torch.device(device)

    def synchronize(self) -> None:
        # Make sure all GPU work is finished before reading the clock
        if self.device.type == "cuda" and torch.cuda.is_available():
            torch.cuda.synchronize(self.device)

    @contextmanager
    def timed(self):
        """Yield a dict whose "seconds" entry is filled in on exit."""
        timing = {"seconds": 0.0}
        self.synchronize()
        start = time.perf_counter()
        try:
            yield timing
        finally:
            self.synchronize()
            timing["seconds"] = time.perf_counter() - start


@dataclass
class BenchmarkReport:
    train_seconds: float
    predict_seconds: float   # average over the prediction runs


def benchmark_lr(
    ctx: BenchmarkContext,
    train_feats: torch.Tensor,
    train_targets: torch.Tensor,
    test_feats: torch.Tensor,
    learning,
    iterations: int = 100,
) -> BenchmarkReport:
    trainer = Trainer(
        alpha=learning.alpha,
        lambda_=learning.lambda_,
        max_iter=learning.max_iter,
        threshold=learning.threshold,
    )

    with ctx.timed() as t_train:
        result = trainer.fit(train_feats, train_targets)
    print(f"Training time: {t_train['seconds']:.4f} s")

    model = OneVsAllLogReg.from_weights(result.weights)
    with ctx.timed() as t_pred:
        for _ in range(iterations):
            model(test_feats)
    predict_seconds = t_pred["seconds"] / max(iterations, 1)
    print(f"Prediction time: {predict_seconds:.4f} s")

    return BenchmarkReport(
        train_seconds=t_train["seconds"],
        predict_seconds=predict_seconds,
    )
