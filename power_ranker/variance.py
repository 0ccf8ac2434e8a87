"""
Variance estimator.

Models each unordered pair's outcome as Beta(alpha, beta) with
alpha = matrix[i][j] + 1 and beta = matrix[j][i] + 1 (a Beta(1, 1) prior)
and reports its variance.
"""

import numpy as np

from .indexer import ItemIndexer
from .models import VarianceEntry


def beta_variance(alpha: np.ndarray | float, beta: np.ndarray | float) -> np.ndarray | float:
    """Variance of Beta(alpha, beta)."""
    total = alpha + beta
    return alpha * beta / ((total + 1) * total ** 2)


class VarianceEstimator:
    """Derives per-pair Beta variances from a preference matrix."""

    def __init__(self, indexer: ItemIndexer):
        self.indexer = indexer

    def estimate(self, matrix: np.ndarray) -> list[VarianceEntry]:
        """
        Return one entry per pair (i, j) with i < j, ordered by (i, j).

        The ordering is significant: samplers look up cumulative sums over it.
        """
        rows, cols = np.triu_indices(matrix.shape[0], k=1)
        alpha = matrix[rows, cols] + 1
        beta = matrix[cols, rows] + 1
        variances = beta_variance(alpha, beta)

        return [
            VarianceEntry(
                item_a=self.indexer.item_at(i),
                item_b=self.indexer.item_at(j),
                variance=float(variance),
            )
            for i, j, variance in zip(rows.tolist(), cols.tolist(), variances)
        ]
