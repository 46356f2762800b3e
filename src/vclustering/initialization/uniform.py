"""
Uniform initialization of centroids inside a ball around the origin.
"""

from typing import Optional
import warnings

import torch

from ..base.interfaces import Vector, VectorCreator

# Above this many dimensions almost every cube sample falls outside the ball.
HIGH_DIMENSION = 10


class UniformSampler:
    """Samples initial centroids uniformly from the unit ball, scaled.

    Components are drawn uniformly from [0, 1) and the resulting vector is
    kept only when it lies in the closed unit ball and is not the null
    vector. This is fine for a handful of dimensions, but the acceptance rate
    drops quickly as the dimension grows.

    Instances are callables matching the ``Sampler`` signature.
    """

    def __init__(self, creator: VectorCreator,
                 generator: Optional[torch.Generator] = None):
        """
        Args:
            creator: Creator of the vector space to sample from
            generator: Source of randomness (torch's default if None)
        """
        if creator.dimension == 0:
            raise ValueError("Cannot sample from a 0-dimensional vector space")
        self.creator = creator
        self.generator = generator
        self._warned = False

    def _uniform_component(self, _: int) -> float:
        return torch.rand((), generator=self.generator, dtype=torch.float64).item()

    def __call__(self, index: int, max_length: float) -> Vector:
        """Sample the ``index``-th centroid, scaled by ``max_length``."""
        if self.creator.dimension > HIGH_DIMENSION and not self._warned:
            warnings.warn(
                f"Uniform sampling in {self.creator.dimension} dimensions rejects "
                f"most candidates; consider another sampler"
            )
            self._warned = True

        vector = self.creator.null()
        while vector.length() == 0 or vector.length() > 1:
            vector = self.creator.new(self._uniform_component)
        return vector.mul_scalar(max_length)


def uniform_sampler(creator: VectorCreator,
                    generator: Optional[torch.Generator] = None) -> UniformSampler:
    """Default sampler for the space of ``creator``."""
    return UniformSampler(creator, generator)
