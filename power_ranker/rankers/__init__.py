"""
Ranker implementations.

Provides implementations of the Ranker interface for ranking items from
pairwise preferences.

Available implementations:
- PowerRanker: Damped power iteration over a pairwise preference matrix,
  with an optional implicit neutral prior and per-pair variance estimates
"""

from .power_ranker import PowerRanker

__all__ = ["PowerRanker"]
