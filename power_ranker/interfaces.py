"""
Abstract base classes defining the interfaces for the power ranker system.

All interfaces are synchronous; the ranker's matrix has a single writer.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from .models import Item, Preference, SampleSuggestion, VarianceEntry


class Ranker(ABC):
    """Interface for ranking items from pairwise preferences."""

    @abstractmethod
    def add_preferences(self, preferences: Iterable[Preference | Mapping[str, Any]]) -> None:
        """
        Record a batch of votes.

        Not safe to interleave; concurrent callers must serialize calls.
        """
        pass

    @abstractmethod
    def run(self, d: float = 1.0, epsilon: float = 0.001, n_iter: int = 1000) -> dict[Item, float]:
        """Compute ranking weights (summing to 1) for every item."""
        pass

    @abstractmethod
    def get_variances(self) -> list[VarianceEntry]:
        """Get the outcome variance of every unordered pair, in index order."""
        pass


class Sampler(ABC):
    """Interface for choosing the next pair to compare."""

    @abstractmethod
    def sample_pair(self) -> SampleSuggestion:
        """Suggest a pair of items to vote on."""
        pass


class Judge(ABC):
    """Interface for answering pairwise comparisons."""

    @abstractmethod
    def compare(self, item_a: Item, item_b: Item) -> Preference:
        """
        Compare two items.

        May block (human judges, remote calls).

        Returns:
            Preference between the two items
        """
        pass
