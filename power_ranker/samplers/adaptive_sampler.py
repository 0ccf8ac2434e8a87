"""
Adaptive sampler implementation.

Suggests the next pair to compare with probability proportional to the
pair's outcome variance.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from typing_extensions import override

from ..exceptions import InvalidArgumentError
from ..interfaces import Sampler
from ..logging_config import get_logger
from ..models import Item, SampleSuggestion, VarianceEntry

# Module-level logger
logger = get_logger("adaptive_sampler")


@dataclass(frozen=True)
class CumulativeEntry:
    item_a: Item
    item_b: Item
    cum_sum_variance: float


class AdaptiveSampler(Sampler):
    """Variance-proportional pair sampler."""

    def __init__(self, variances: Sequence[VarianceEntry], rng: np.random.Generator | None = None):
        """
        Initialize adaptive sampler.

        Args:
            variances: Pair variances, typically from Ranker.get_variances()
            rng: Random generator; pass a seeded one for reproducible draws
        """
        if len(variances) < 1:
            raise InvalidArgumentError("Cannot sample less than one pair")

        values = np.array([entry.variance for entry in variances], dtype=np.float64)
        if np.any(values < 0) or not np.all(np.isfinite(values)):
            raise InvalidArgumentError("Variances must be finite and non-negative")

        self.rng = rng if rng is not None else np.random.default_rng()

        self._cum_sums = np.cumsum(values)
        # The grand total is the last running sum so the two always agree exactly
        self.sum_variance = float(self._cum_sums[-1])
        self.entries: tuple[CumulativeEntry, ...] = tuple(
            CumulativeEntry(item_a=entry.item_a, item_b=entry.item_b, cum_sum_variance=float(cum_sum))
            for entry, cum_sum in zip(variances, self._cum_sums)
        )

    @override
    def sample_pair(self) -> SampleSuggestion:
        """Suggest a pair of items, proportional to the variance."""
        threshold = self.rng.random() * self.sum_variance

        # Cumulative sums increase monotonically: first entry with cum_sum >= threshold
        ix = int(np.searchsorted(self._cum_sums, threshold, side="left"))
        entry = self.entries[min(ix, len(self.entries) - 1)]

        logger.debug(f"Sampled pair {entry.item_a!r} vs {entry.item_b!r} (threshold {threshold:.4g})")
        return SampleSuggestion(
            item_a=entry.item_a,
            item_b=entry.item_b,
            cum_sum_variance=entry.cum_sum_variance,
        )
