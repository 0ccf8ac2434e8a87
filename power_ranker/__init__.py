"""
Power Ranker - Pairwise Preference Ranking with Adaptive Sampling

Ranks items from pairwise comparison votes by damped power iteration over a
preference matrix, and suggests the next pair to compare with probability
proportional to its outcome variance.
"""

from .exceptions import (
    PowerRankerError,
    InvalidArgumentError,
    DegenerateMatrixError,
    DimensionMismatchError,
)
from .models import Preference, VarianceEntry, SampleSuggestion, parse_preferences
from .interfaces import Ranker, Sampler, Judge
from .rankers.power_ranker import PowerRanker
from .samplers.adaptive_sampler import AdaptiveSampler
from .session import AdaptiveSession, SessionConfig

__version__ = "0.1.0"
__all__ = [
    "PowerRankerError",
    "InvalidArgumentError",
    "DegenerateMatrixError",
    "DimensionMismatchError",
    "Preference",
    "VarianceEntry",
    "SampleSuggestion",
    "parse_preferences",
    "Ranker",
    "Sampler",
    "Judge",
    "PowerRanker",
    "AdaptiveSampler",
    "AdaptiveSession",
    "SessionConfig",
]
