"""
Preference matrix builder.

Builds and incrementally updates the n x n preference matrix from pairwise
votes. Entry [i][j] accumulates the strength of preference flowing from item
i toward item j; the diagonal always holds the column sums of the
off-diagonal entries and is recomputed after every update.
"""

from collections.abc import Iterable

import numpy as np

from .exceptions import InvalidArgumentError
from .indexer import ItemIndexer
from .logging_config import get_logger
from .models import Preference

logger = get_logger("preference_matrix")


class PreferenceMatrixBuilder:
    """
    Owns the preference matrix for one ranker.

    When seeded with ``num_participants`` every off-diagonal cell starts at
    0.5 (an assumed tie). Each real vote on a pair retracts
    ``1 / (2 * num_participants)`` from both directions of that pair, so once
    every participant has voted on it the prior contributes nothing. Further
    votes on the pair retract nothing; the prior is never removed past zero.
    """

    def __init__(self, indexer: ItemIndexer, num_participants: int | None = None):
        if num_participants is not None and num_participants < 0:
            raise InvalidArgumentError(f"num_participants must be non-negative, got {num_participants}")

        self.indexer = indexer
        self.num_participants = num_participants or 0
        self.num_preferences = 0

        n = len(indexer)
        self._matrix = np.zeros((n, n), dtype=np.float64)

        if self.num_participants > 0:
            self.implicit_pref = 1.0 / self.num_participants / 2
            prior = (np.ones((n, n)) - np.identity(n)) * self.implicit_pref * self.num_participants
        else:
            self.implicit_pref = 0.0
            prior = np.zeros((n, n), dtype=np.float64)

        # Prior mass still held by each cell; symmetric, shrinks as votes arrive
        self._remaining_prior = prior.copy()
        self._matrix += prior

        self._update_diagonal()
        logger.debug(f"Matrix initialized: n={n}, num_participants={self.num_participants}")

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the current matrix."""
        return self._matrix.copy()

    @property
    def remaining_prior(self) -> np.ndarray:
        """Copy of the prior mass not yet retracted, per cell."""
        return self._remaining_prior.copy()

    @property
    def size(self) -> int:
        return self._matrix.shape[0]

    def add_preferences(self, preferences: Iterable[Preference]) -> None:
        """Record a batch of votes and recompute the diagonal."""
        # Resolve every index before touching the matrix so a bad record leaves it unchanged
        resolved = [
            (self.indexer.index_of(p.source), self.indexer.index_of(p.target), p.value)
            for p in preferences
        ]

        for source_ix, target_ix, value in resolved:
            retract = min(self.implicit_pref, self._remaining_prior[source_ix, target_ix])
            for i, j in ((source_ix, target_ix), (target_ix, source_ix)):
                self._matrix[i, j] -= retract
                self._remaining_prior[i, j] -= retract

            # Only the dominant direction is recorded
            if value >= 0.5:
                self._matrix[source_ix, target_ix] += value
            else:
                self._matrix[target_ix, source_ix] += 1 - value

        self._update_diagonal()
        self.num_preferences += len(resolved)
        logger.debug(f"Recorded {len(resolved)} preferences ({self.num_preferences} total)")

    def _update_diagonal(self) -> None:
        np.fill_diagonal(self._matrix, 0.0)
        np.fill_diagonal(self._matrix, self._matrix.sum(axis=0))
