"""
Centroid-based flat clusterer.

A vector belongs to the cluster whose centroid is nearest to it.
"""

from typing import Dict, Iterable, Iterator, List, Tuple

from ..base.interfaces import Cluster, SimpleFlatClusterer, Vector
from ..base.dataset import Dataset
from ..base.exceptions import ClusterNotFoundError, EmptyClustererError


class CentroidClusterer(SimpleFlatClusterer):
    """Assigns a vector to the cluster with the nearest centroid.

    The centroid at position ``i`` defines cluster ``i``. Centroids need not be
    distinct. The list is copied on construction and never changes, so a
    clusterer can be handed out without aliasing anyone's working state.
    """

    def __init__(self, centroids: Iterable[Vector] = ()):
        self._centroids: Tuple[Vector, ...] = tuple(centroids)

    def clusters(self) -> List[Cluster]:
        """All clusters, in ascending order."""
        return list(range(len(self._centroids)))

    def centroid_of(self, cluster: Cluster) -> Vector:
        """Centroid of ``cluster``."""
        if not 0 <= cluster < len(self._centroids):
            raise ClusterNotFoundError(
                f"Cluster {cluster} not in 0..{len(self._centroids) - 1}"
            )
        return self._centroids[cluster]

    def centroids(self) -> Dict[Cluster, Vector]:
        """Mapping from every cluster to its centroid."""
        return {cluster: centroid for cluster, centroid in enumerate(self._centroids)}

    def find_cluster(self, vector: Vector) -> Cluster:
        """Cluster whose centroid is nearest to ``vector``.

        Centroids are scanned in cluster order and only a strictly closer
        centroid replaces the current best, so ties go to the lower cluster.

        Raises:
            EmptyClustererError: If there are no centroids
        """
        if self.is_empty():
            raise EmptyClustererError("There are no centroids in the CentroidClusterer")

        assigned = 0
        assigned_distance = self._centroids[0].distance_to(vector)
        for cluster, centroid in enumerate(self._centroids):
            distance = centroid.distance_to(vector)
            if distance < assigned_distance:
                assigned = cluster
                assigned_distance = distance
        return assigned

    def clustered_partition(self, dataset: Dataset) -> Dict[Cluster, List[Vector]]:
        """Split ``dataset`` by cluster.

        Each list keeps the dataset order of its vectors. Clusters that get
        no vector are not present in the result.
        """
        partition: Dict[Cluster, List[Vector]] = {}
        for vector in dataset.as_slice():
            partition.setdefault(self.find_cluster(vector), []).append(vector)
        return partition

    def labels(self, dataset: Dataset) -> List[Cluster]:
        """Cluster of every dataset vector, in dataset order."""
        return [self.find_cluster(vector) for vector in dataset.as_slice()]

    def inertia(self, dataset: Dataset) -> float:
        """Sum of squared distances from each vector to its nearest centroid."""
        total = 0.0
        for vector in dataset.as_slice():
            total += self._centroids[self.find_cluster(vector)].distance_to(vector)
        return total

    def is_empty(self) -> bool:
        return len(self._centroids) == 0

    def __len__(self) -> int:
        return len(self._centroids)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._centroids)

    def __repr__(self) -> str:
        return f"CentroidClusterer(centroids={list(self._centroids)!r})"
