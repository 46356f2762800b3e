"""
K-means clustering over abstract vector spaces.

Lloyd's algorithm: vectors are assigned to their nearest centroid, every
centroid that received vectors moves to their mean, and this repeats until no
centroid moves by more than ``CONVERGENCE_THRESHOLD`` in one pass. Only the
``Vector`` contract is used, so any vector space implementation works.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
import time
import warnings

import torch

from ..base.interfaces import Sampler, Vector
from ..base.dataset import Dataset
from ..base.data_structures import RefinementPass
from ..base.exceptions import NotFittedError, TypeMismatchError
from ..initialization.uniform import UniformSampler
from ..initialization.random import DatasetSampler
from ..utils.convergence import CentroidMovement
from ..utils.validation import check_n_clusters, check_random_state
from .clusterer import CentroidClusterer


class _BucketCollector:
    """Running sum of the vectors assigned to one centroid during a pass."""

    __slots__ = ('total', 'count')

    def __init__(self):
        self.total: Optional[Vector] = None
        self.count = 0

    def collect(self, vector: Vector) -> None:
        self.total = vector if self.total is None else self.total.add(vector)
        self.count += 1

    def average(self) -> Optional[Vector]:
        """Mean of the collected vectors, None if nothing was collected."""
        if self.total is None:
            return None
        return self.total.mul_scalar(1.0 / self.count)


def _collect_clusters(dataset: Dataset, centroids: Sequence[Vector]) -> List[_BucketCollector]:
    """Assignment step: put every vector in the bucket of its nearest centroid."""
    buckets = [_BucketCollector() for _ in centroids]
    if not centroids:
        return buckets

    for vector in dataset.as_slice():
        cluster = 0
        distance_to_cluster = centroids[0].distance_to(vector)
        for k, centroid in enumerate(centroids):
            distance = vector.distance_to(centroid)
            if distance < distance_to_cluster:
                cluster = k
                distance_to_cluster = distance
        buckets[cluster].collect(vector)
    return buckets


def _create_new_centroids(centroids: Sequence[Vector],
                          buckets: Sequence[_BucketCollector]) -> Tuple[List[Vector], List[float]]:
    """Update step: move centroids to the mean of their buckets.

    Returns a fresh centroid list and the movement of every centroid. A
    centroid with an empty bucket stays where it is and moves 0.
    """
    new_centroids = list(centroids)
    deltas = [0.0] * len(centroids)
    for k, bucket in enumerate(buckets):
        new_centroid = bucket.average()
        if new_centroid is not None:
            deltas[k] = centroids[k].distance_to(new_centroid)
            new_centroids[k] = new_centroid
    return new_centroids, deltas


class KMeans:
    """K-means clustering algorithm.

    Partitions a ``Dataset`` into K clusters by alternating nearest-centroid
    assignment and mean updates until the largest centroid movement of a pass
    is at most ``CONVERGENCE_THRESHOLD`` (a squared distance, as are all
    vector lengths here).

    Parameters
    ----------
    n_clusters : int, optional
        Number of clusters. May be omitted when ``init`` is a sequence of
        vectors, in which case it is the length of that sequence.
    init : str, callable or sequence of vectors, default='uniform'
        Initialization method:
        - 'uniform' : sample from the ball whose radius is the dataset's
          largest vector length (see ``UniformSampler``)
        - 'random' : pick distinct vectors of the dataset
        - callable ``(index, max_length) -> Vector`` : custom sampler
        - sequence of vectors : use as initial centroids
    max_iter : int, optional
        Maximum number of passes. None (default) refines until convergence,
        however long that takes.
    verbose : int, default=0
        Verbosity level (0=silent, 1=progress, 2=every pass)
    random_state : int or torch.Generator, optional
        Seed or generator for the built-in samplers

    Attributes
    ----------
    clusterer_ : CentroidClusterer
        Clusterer holding the final centroids
    labels_ : list of int
        Cluster of every training vector (empty when there are no centroids)
    n_iter_ : int
        Number of passes run
    converged_ : bool
        Whether the last pass met the convergence threshold
    history_ : list of RefinementPass
        Per-pass centroid movements and bucket sizes
    inertia_ : float
        Sum of squared distances of the training vectors to their centroids
    """

    def __init__(self,
                 n_clusters: Optional[int] = None,
                 init: Union[str, Sampler, Sequence[Vector]] = 'uniform',
                 max_iter: Optional[int] = None,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        self.n_clusters = n_clusters
        self.init = init
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state

        self.fitted_ = False
        self._n_iter = 0
        self._converged = False
        self._history: List[RefinementPass] = []
        self._labels = None
        self._inertia = 0.0
        self._clusterer: Optional[CentroidClusterer] = None

    def _resolve_n_clusters(self) -> int:
        n_clusters = self.n_clusters
        if not isinstance(self.init, str) and not callable(self.init):
            n_init = len(self.init)
            if n_clusters is None:
                n_clusters = n_init
            elif n_clusters != n_init:
                raise ValueError(f"Initial centroids has {n_init} clusters, "
                                 f"but n_clusters={n_clusters}")
        if n_clusters is None:
            raise ValueError("n_clusters is required unless initial centroids are given")
        check_n_clusters(n_clusters)
        return n_clusters

    def _initial_centroids(self, dataset: Dataset, n_clusters: int) -> List[Vector]:
        """Create the starting centroids for ``dataset``."""
        if isinstance(self.init, str):
            generator = check_random_state(self.random_state)
            if self.init == 'uniform':
                sampler = UniformSampler(dataset.creator, generator)
            elif self.init == 'random':
                sampler = DatasetSampler(dataset, generator)
            else:
                raise ValueError(f"Unknown init method: {self.init}")
        elif callable(self.init):
            sampler = self.init
        else:
            centroids = list(self.init)
            for k, centroid in enumerate(centroids):
                if not isinstance(centroid, Vector) or centroid.creator() != dataset.creator:
                    raise TypeMismatchError(
                        f"Initial centroid {k} does not belong to {dataset.creator!r}"
                    )
            return centroids

        max_length = dataset.max().length()
        return [sampler(k, max_length) for k in range(n_clusters)]

    def fit(self, dataset: Dataset) -> 'KMeans':
        """Fit K-means clustering.

        An empty dataset yields a clusterer without centroids; no error is
        raised.

        Parameters
        ----------
        dataset : Dataset
            Training data

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        if not isinstance(dataset, Dataset):
            raise TypeError(f"Expected a Dataset, got {type(dataset).__name__}")
        if self.max_iter is not None and self.max_iter < 1:
            raise ValueError(f"max_iter must be positive, got {self.max_iter}")

        n_clusters = self._resolve_n_clusters()

        self._n_iter = 0
        self._history = []

        if dataset.is_empty():
            self._clusterer = CentroidClusterer()
            self._converged = True
            self._labels = []
            self._inertia = 0.0
            self.fitted_ = True
            return self

        if self.verbose:
            print(f"Initializing {n_clusters} clusters...")

        start_time = time.time()
        centroids = self._initial_centroids(dataset, n_clusters)
        centroids = self._refine(dataset, centroids)
        total_time = time.time() - start_time

        self._clusterer = CentroidClusterer(centroids)
        self._labels = [] if self._clusterer.is_empty() else self._clusterer.labels(dataset)
        self._inertia = 0.0 if self._clusterer.is_empty() else self._clusterer.inertia(dataset)
        self.fitted_ = True

        if self.verbose:
            print(f"Total fitting time: {total_time:.3f}s")

        return self

    def _refine(self, dataset: Dataset, centroids: List[Vector]) -> List[Vector]:
        """Run assignment/update passes until the centroids settle."""
        criterion = CentroidMovement()
        converged = False
        iteration = 0

        while self.max_iter is None or iteration < self.max_iter:
            iter_start_time = time.time()

            buckets = _collect_clusters(dataset, centroids)
            centroids, deltas = _create_new_centroids(centroids, buckets)

            converged = criterion.check({'iteration': iteration, 'deltas': deltas})
            state = RefinementPass(
                iteration=iteration,
                deltas=deltas,
                bucket_sizes=[bucket.count for bucket in buckets],
                converged=converged
            )
            self._history.append(state)
            iteration += 1

            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and state.iteration % 10 == 0):
                print(f"Iteration {state.iteration:3d}: max delta = {state.max_delta:.6f} "
                      f"({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {state.iteration}")
                break

        self._n_iter = iteration
        self._converged = converged

        if not converged:
            warnings.warn(f"Failed to converge after {self.max_iter} iterations")

        return centroids

    @property
    def clusterer_(self) -> CentroidClusterer:
        """Clusterer holding the fitted centroids."""
        self._check_fitted()
        return self._clusterer

    @property
    def cluster_centers_(self) -> List[Vector]:
        """Fitted centroids, in cluster order."""
        return list(self.clusterer_)

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise NotFittedError("Model must be fitted first")

    @property
    def labels_(self) -> List[int]:
        """Cluster of every training vector."""
        self._check_fitted()
        return self._labels

    @property
    def inertia_(self) -> float:
        """Final K-means objective on the training data."""
        self._check_fitted()
        return self._inertia

    @property
    def n_iter_(self) -> int:
        """Number of passes run."""
        self._check_fitted()
        return self._n_iter

    @property
    def converged_(self) -> bool:
        """Whether the last pass met the convergence threshold."""
        self._check_fitted()
        return self._converged

    @property
    def history_(self) -> List[RefinementPass]:
        """Per-pass record of the last fit."""
        self._check_fitted()
        return self._history

    def predict(self, dataset: Dataset) -> List[int]:
        """Predict the cluster of every vector of ``dataset``.

        Raises:
            NotFittedError: If called before fit
            EmptyClustererError: If the fitted clusterer has no centroids
        """
        if not self.fitted_:
            raise NotFittedError("Model must be fitted before calling predict")
        return self._clusterer.labels(dataset)

    def fit_predict(self, dataset: Dataset) -> List[int]:
        """Fit and return labels."""
        self.fit(dataset)
        return self.labels_

    def score(self, dataset: Dataset) -> float:
        """Opposite of the K-means objective (sum of squared distances) on ``dataset``."""
        return -self.clusterer_.inertia(dataset)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'init': self.init,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'KMeans':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key} for KMeans")
            setattr(self, key, value)
        return self


def kmeans(dataset: Dataset, k: int,
           generator: Optional[torch.Generator] = None) -> CentroidClusterer:
    """K-means with initial centroids from a uniform sampler.

    The sampler draws from the ball whose radius is the length of the
    dataset's longest vector.
    """
    return KMeans(n_clusters=k, init='uniform', random_state=generator).fit(dataset).clusterer_


def kmeans_with_sampler(dataset: Dataset, k: int, sampler: Sampler) -> CentroidClusterer:
    """K-means with the ``k`` initial centroids drawn from ``sampler``."""
    return KMeans(n_clusters=k, init=sampler).fit(dataset).clusterer_


def kmeans_with_centroids(dataset: Dataset, *centroids: Vector) -> CentroidClusterer:
    """K-means starting from the provided centroids."""
    return KMeans(n_clusters=len(centroids), init=list(centroids)).fit(dataset).clusterer_
