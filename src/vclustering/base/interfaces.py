"""
Core interfaces for vector-space clustering.

This module defines the abstract base classes that vector spaces, clusterers
and convergence criteria must implement. The clustering code only ever talks
to these contracts, so it never needs to know the concrete dimensionality or
storage of the vectors it works on.
"""

import math
from abc import ABC, abstractmethod
from typing import Callable, Dict, Any, List, Optional, TYPE_CHECKING

import torch

if TYPE_CHECKING:
    from .dataset import Dataset


# A cluster is identified by its position in the clusterer's centroid list.
Cluster = int


class VectorCreator(ABC):
    """Creates vectors of one real abstract vector space.

    A creator is a separate object because an algorithm must be able to build
    a vector of the right kind without holding one first (e.g. the null
    vector of an empty dataset). Two creators compare equal iff they create
    vectors of the same space.
    """

    @abstractmethod
    def new(self, component_fn: Callable[[int], float]) -> 'Vector':
        """Create a vector with component ``i`` set to ``component_fn(i)``.

        Only ``component_fn(0) .. component_fn(dimension - 1)`` are called.
        """
        pass

    @abstractmethod
    def null(self) -> 'Vector':
        """Create the null vector of this space."""
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Dimension of the vectors this creator builds."""
        pass


class Vector(ABC):
    """A vector of an abstract real vector space.

    Vectors are immutable: every operation returns a new vector. Binary
    operations raise ``TypeMismatchError`` when the other operand belongs to
    a different space.

    Note that ``length`` is the *squared* Euclidean norm (the inner product of
    the vector with itself) and ``distance_to`` is therefore a squared
    distance. Both preserve the ordering of true norms and distances.
    """

    @abstractmethod
    def add(self, other: 'Vector') -> 'Vector':
        """Component-wise addition."""
        pass

    @abstractmethod
    def subtract(self, other: 'Vector') -> 'Vector':
        """Subtract ``other`` from this vector, i.e. ``self - other``."""
        pass

    @abstractmethod
    def mul_scalar(self, scalar: float) -> 'Vector':
        """Multiply this vector with a scalar."""
        pass

    @abstractmethod
    def transposed_mul(self, other: 'Vector') -> float:
        """Multiply the transpose of this vector with ``other``."""
        pass

    @abstractmethod
    def creator(self) -> VectorCreator:
        """Return the creator building vectors of this kind."""
        pass

    def length(self) -> float:
        """Squared Euclidean norm ``self^T self``."""
        return self.transposed_mul(self)

    def distance_to(self, other: 'Vector') -> float:
        """Squared Euclidean distance between this vector and ``other``."""
        return self.subtract(other).length()

    def normalize(self, generator: Optional[torch.Generator] = None) -> 'Vector':
        """Vector with the same direction and a length of 1.

        The null vector has no direction; a uniformly random unit vector is
        returned for it instead, drawn from ``generator``. A 0-dimensional
        space has no unit vectors, so its null vector raises ``ValueError``.
        """
        length = self.length()
        if length == 0:
            return _random_direction(self.creator(), generator)
        return self.mul_scalar(1.0 / math.sqrt(length))

    def __add__(self, other: 'Vector') -> 'Vector':
        return self.add(other)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return self.subtract(other)

    def __mul__(self, scalar: float) -> 'Vector':
        return self.mul_scalar(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> 'Vector':
        return self.mul_scalar(-1.0)


def _random_direction(creator: VectorCreator,
                      generator: Optional[torch.Generator]) -> Vector:
    """Draw a uniformly distributed unit vector of ``creator``'s space."""
    if creator.dimension == 0:
        raise ValueError("A 0-dimensional vector space has no unit vectors")

    # Isotropic gaussian components give a uniform direction after scaling.
    def gaussian_component(_: int) -> float:
        return torch.randn((), generator=generator, dtype=torch.float64).item()

    direction = creator.new(gaussian_component)
    while direction.length() == 0:
        direction = creator.new(gaussian_component)
    return direction.mul_scalar(1.0 / math.sqrt(direction.length()))


# Samples the ``index``-th initial centroid, at most ``max_length`` long.
Sampler = Callable[[int, float], Vector]


class SimpleFlatClusterer(ABC):
    """Assigns every vector to exactly one cluster."""

    @abstractmethod
    def find_cluster(self, vector: Vector) -> Cluster:
        """Return the unique cluster ``vector`` belongs to."""
        pass

    @abstractmethod
    def clusters(self) -> List[Cluster]:
        """Return all clusters of this clusterer."""
        pass

    @abstractmethod
    def clustered_partition(self, dataset: 'Dataset') -> Dict[Cluster, List[Vector]]:
        """Split ``dataset`` by cluster.

        Every vector of the dataset is assigned to exactly one cluster and the
        union of the returned lists equals the dataset.
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
