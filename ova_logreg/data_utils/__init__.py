from .dataset_factory import DatasetFactory, MnistSplit, split_by_fraction
from .features import add_bias_column, flatten_images, one_hot

__all__ = [
    "DatasetFactory",
    "MnistSplit",
    "split_by_fraction",
    "add_bias_column",
    "flatten_images",
    "one_hot",
]
