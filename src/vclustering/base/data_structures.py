"""
Data structures recorded while refining centroids.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class RefinementPass:
    """State of one assignment/update pass of the K-means loop.

    Used for convergence diagnostics and debugging.
    """
    iteration: int
    deltas: List[float]          # (K,) movement of each centroid in this pass
    bucket_sizes: List[int]      # (K,) number of vectors assigned to each centroid
    converged: bool = False

    @property
    def max_delta(self) -> float:
        """Largest centroid movement of the pass, 0 without centroids."""
        return max(self.deltas, default=0.0)

    @property
    def empty_clusters(self) -> List[int]:
        """Clusters that received no vector and kept their centroid."""
        return [k for k, size in enumerate(self.bucket_sizes) if size == 0]
