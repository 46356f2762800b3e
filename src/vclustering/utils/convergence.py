"""
Convergence criteria for centroid refinement.
"""

from typing import Dict, Any

from ..base.interfaces import ConvergenceCriterion


# Largest centroid movement, in squared distance, still considered converged.
CONVERGENCE_THRESHOLD = 0.1


class CentroidMovement(ConvergenceCriterion):
    """Convergence once no centroid moved more than ``threshold`` in a pass.

    Movement is measured with ``Vector.distance_to``, i.e. as a squared
    distance, so the threshold bounds the squared displacement.
    """

    def __init__(self, threshold: float = CONVERGENCE_THRESHOLD):
        """
        Args:
            threshold: Largest per-centroid movement that counts as stable
        """
        super().__init__()
        self.threshold = threshold

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the largest centroid delta is within the threshold."""
        max_delta = max(current_state['deltas'], default=0.0)

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_delta': max_delta
        })

        return max_delta <= self.threshold
