"""
Input validation utilities.

Provides functions for validating arguments before clustering, including
conversion of array-like data and resolution of random states.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required

    Returns:
        Validated (n, d) tensor

    Raises:
        TypeError: If X cannot be converted
        ValueError: If validation fails
    """
    if isinstance(X, Tensor):
        X = X.detach().to(dtype=dtype)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X).to(dtype=dtype)
    elif isinstance(X, list):
        X = torch.tensor(X, dtype=dtype)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1:
        X = X.unsqueeze(1)
    elif X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    n_samples = X.shape[0]
    if n_samples < ensure_min_samples:
        raise ValueError(f"Found {n_samples} samples, but need at least "
                         f"{ensure_min_samples}")

    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int) -> None:
    """Validate number of clusters.

    More clusters than vectors is allowed: surplus centroids simply never
    receive a vector and keep their initial position.

    Raises:
        TypeError: If n_clusters is not an int
        ValueError: If n_clusters is negative
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, int):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters < 0:
        raise ValueError(f"n_clusters must be non-negative, got {n_clusters}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None (torch's default generator is used then)
    """
    if random_state is None:
        return None
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, int) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(random_state)
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
