"""Clusterers and the K-means engine."""

from .clusterer import CentroidClusterer
from .kmeans import KMeans, kmeans, kmeans_with_sampler, kmeans_with_centroids

__all__ = [
    'CentroidClusterer',
    'KMeans',
    'kmeans',
    'kmeans_with_sampler',
    'kmeans_with_centroids'
]
