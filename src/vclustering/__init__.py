"""
vclustering: K-means clustering over abstract real vector spaces.

The clustering code only relies on the ``Vector`` contract (addition,
scaling, inner product, distance and a creator for vectors of the same kind),
so callers can plug in 2D, 3D, tensor-backed or any other vector type.

Example usage:
    >>> from vclustering import Dataset, kmeans_with_centroids, vector2d
    >>>
    >>> data = Dataset.from_vectors([
    ...     vector2d(0, 0), vector2d(0.1, 0.1),
    ...     vector2d(10, 10), vector2d(10.1, 9.9),
    ... ])
    >>>
    >>> # Refine two centroids until they settle
    >>> clusterer = kmeans_with_centroids(data, vector2d(0, 0), vector2d(10, 10))
    >>>
    >>> # Group the data by cluster
    >>> partition = clusterer.clustered_partition(data)
"""

__version__ = '0.1.0'

# Core contracts and containers
from .base import (
    Cluster,
    Sampler,
    Vector,
    VectorCreator,
    SimpleFlatClusterer,
    Dataset,
    RefinementPass,
    ClusteringError,
    TypeMismatchError,
    EmptyClustererError,
    EmptyDatasetError,
    ClusterNotFoundError,
    NotFittedError
)

# Vector spaces
from .vectors import TensorVector, TensorVectorCreator, Vector2, Vector2Creator, vector2d

# Clustering
from .clustering import (
    CentroidClusterer,
    KMeans,
    kmeans,
    kmeans_with_sampler,
    kmeans_with_centroids
)
from .initialization import UniformSampler, uniform_sampler, DatasetSampler
from .utils import CONVERGENCE_THRESHOLD

__all__ = [
    # Contracts
    'Cluster',
    'Sampler',
    'Vector',
    'VectorCreator',
    'SimpleFlatClusterer',

    # Data
    'Dataset',
    'RefinementPass',

    # Vector spaces
    'TensorVector',
    'TensorVectorCreator',
    'Vector2',
    'Vector2Creator',
    'vector2d',

    # Clustering
    'CentroidClusterer',
    'KMeans',
    'kmeans',
    'kmeans_with_sampler',
    'kmeans_with_centroids',
    'UniformSampler',
    'uniform_sampler',
    'DatasetSampler',
    'CONVERGENCE_THRESHOLD',

    # Errors
    'ClusteringError',
    'TypeMismatchError',
    'EmptyClustererError',
    'EmptyDatasetError',
    'ClusterNotFoundError',
    'NotFittedError',

    # Version
    '__version__'
]
