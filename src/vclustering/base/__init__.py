"""Base classes, interfaces and containers for vclustering."""

from .interfaces import (
    Cluster,
    Sampler,
    Vector,
    VectorCreator,
    SimpleFlatClusterer,
    ConvergenceCriterion
)

from .exceptions import (
    ClusteringError,
    TypeMismatchError,
    EmptyClustererError,
    EmptyDatasetError,
    ClusterNotFoundError,
    NotFittedError
)

from .dataset import Dataset
from .data_structures import RefinementPass

__all__ = [
    # Interfaces
    'Cluster',
    'Sampler',
    'Vector',
    'VectorCreator',
    'SimpleFlatClusterer',
    'ConvergenceCriterion',

    # Exceptions
    'ClusteringError',
    'TypeMismatchError',
    'EmptyClustererError',
    'EmptyDatasetError',
    'ClusterNotFoundError',
    'NotFittedError',

    # Data structures
    'Dataset',
    'RefinementPass'
]
