"""Initial-centroid samplers."""

from .uniform import UniformSampler, uniform_sampler
from .random import DatasetSampler

__all__ = [
    'UniformSampler',
    'uniform_sampler',
    'DatasetSampler'
]
