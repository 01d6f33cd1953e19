from dataclasses import asdict, dataclass, field
from typing import Optional
from dataclasses_json import dataclass_json
import json

@dataclass_json
@dataclass
class LearningSettings:
    """
    Hyperparameters of the gradient descent run.
    """
    alpha: float = 0.1
    lambda_: float = 1.0
    max_iter: int = 1000
    threshold: float = 0.1
    strict: bool = False
    log_interval: int = 0

    def __str__(self):
        return json.dumps(asdict(self), indent=4)

@dataclass_json
@dataclass
class SessionSettings:
    """
    All settings related to a training session.
    """
    learning: LearningSettings = field(default_factory=LearningSettings)
    dataset: str = "mnist"
    data_root: str = "./data"
    perc: int = 60
    console: bool = False
    seed: int = 42
    bench_iterations: int = 100
    num_display: int = 20
    plots_dir: Optional[str] = None
    torch_device_name: str = "cpu"

    def __str__(self):
        return json.dumps(asdict(self), indent=4)
