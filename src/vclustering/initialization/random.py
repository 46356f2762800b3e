"""
Random initialization by selecting vectors from the dataset.
"""

from typing import Optional
import torch

from ..base.dataset import Dataset
from ..base.interfaces import Vector


class DatasetSampler:
    """Uses randomly chosen dataset vectors as initial centroids.

    A permutation of the dataset is drawn once on construction, so distinct
    indices always yield distinct dataset positions (no replacement). The
    ``max_length`` argument of the sampler signature is ignored.
    """

    def __init__(self, dataset: Dataset,
                 generator: Optional[torch.Generator] = None):
        self.dataset = dataset
        self._order = torch.randperm(dataset.count(), generator=generator).tolist()

    def __call__(self, index: int, max_length: float) -> Vector:
        n_points = len(self._order)
        if index >= n_points:
            raise ValueError(f"Cannot create {index + 1} clusters from {n_points} points")
        return self.dataset[self._order[index]]
