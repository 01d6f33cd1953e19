# dataset_factory.py

from dataclasses import dataclass
from typing import Optional, Tuple

import torch
from torchvision import datasets

from .features import add_bias_column, flatten_images, one_hot

# Never train on more than this share of the pool, so a test split remains
MAX_TRAIN_FRACTION = 0.8


@dataclass
class MnistSplit:
    train_feats: torch.Tensor      # (num_train, 1 + H*W), bias column first
    train_targets: torch.Tensor    # (num_train, num_classes), one-hot
    test_feats: torch.Tensor
    test_targets: torch.Tensor
    test_images: torch.Tensor      # (num_test, H, W) in [0, 1], for display
    num_classes: int

    @property
    def num_train(self) -> int:
        return self.train_feats.shape[0]

    @property
    def num_test(self) -> int:
        return self.test_feats.shape[0]


def split_by_fraction(
    images: torch.Tensor,
    labels: torch.Tensor,
    frac: float,
    generator: Optional[torch.Generator] = None,
) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor, torch.Tensor]:
    """
    Randomly assign every sample to train (probability min(frac, 0.8)) or test.

    Returns train_images, train_labels, test_images, test_labels.
    """
    r = torch.rand(images.shape[0], generator=generator)
    cond = r < min(frac, MAX_TRAIN_FRACTION)
    return images[cond], labels[cond], images[~cond], labels[~cond]


class DatasetFactory:
    @staticmethod
    def create(
        dataset_name: str = "mnist",
        perc: int = 60,
        data_root: str = "./data",
        seed: int = 42,
        device: str = "cpu",
    ) -> MnistSplit:
        """
        Load a 28x28 grayscale dataset and turn it into feature/label matrices.

        The 10k-image test split of the dataset is used as the sample pool and
        randomly divided into a train and a test part.

        Args:
            dataset_name: "mnist" or "fashionmnist" (case-insensitive)
            perc:         percentage of the pool used for training (capped at 80)
            data_root:    where to store/download the data
            seed:         seed of the train/test assignment
            device:       device the returned tensors are placed on

        Returns:
            MnistSplit with bias-augmented features and one-hot targets
        """
        name = dataset_name.lower()

        if name == "mnist":
            pool = datasets.MNIST(root=data_root, train=False, download=True)
        elif name == "fashionmnist":
            pool = datasets.FashionMNIST(root=data_root, train=False, download=True)
        else:
            raise ValueError(f"Unknown dataset: {dataset_name}")

        num_classes = len(pool.classes)
        images = pool.data.to(torch.float32) / 255
        labels = pool.targets

        g = torch.Generator()
        g.manual_seed(seed)
        train_images, train_labels, test_images, test_labels = split_by_fraction(
            images, labels, perc / 100.0, generator=g
        )

        return MnistSplit(
            train_feats=add_bias_column(flatten_images(train_images)).to(device),
            train_targets=one_hot(train_labels, num_classes).to(device),
            test_feats=add_bias_column(flatten_images(test_images)).to(device),
            test_targets=one_hot(test_labels, num_classes).to(device),
            test_images=test_images,
            num_classes=num_classes,
        )
