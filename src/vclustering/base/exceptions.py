"""Exceptions raised by vclustering.

Every error is a precondition violation detected synchronously. The classes
also derive from the matching builtin, so callers catching ``TypeError`` or
``ValueError`` keep working.
"""


class ClusteringError(Exception):
    """Base exception for all vclustering errors."""


class TypeMismatchError(ClusteringError, TypeError):
    """Raised when a vector from another vector space is used.

    This exception is raised when:
    - a binary vector operation gets an operand of a different space
    - a dataset is constructed with a vector outside its creator's space
    """


class EmptyClustererError(ClusteringError, ValueError):
    """Raised when a cluster lookup is attempted on a clusterer without centroids."""


class EmptyDatasetError(ClusteringError, ValueError):
    """Raised when a dataset must infer its vector space from zero vectors."""


class ClusterNotFoundError(ClusteringError, KeyError):
    """Raised when a cluster identifier is not part of the clusterer."""


class NotFittedError(ClusteringError, RuntimeError):
    """Raised when a fitted attribute or predict() is used before fit()."""
