"""Utility functions for vclustering."""

from .convergence import (
    CONVERGENCE_THRESHOLD,
    CentroidMovement
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_random_state
)

__all__ = [
    # Convergence criteria
    'CONVERGENCE_THRESHOLD',
    'CentroidMovement',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_random_state'
]
