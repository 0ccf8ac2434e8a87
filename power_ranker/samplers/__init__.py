"""
Sampler implementations.

Provides implementations of the Sampler interface for choosing which pair
to compare next.

Available implementations:
- AdaptiveSampler: Samples pairs with probability proportional to variance
"""

from .adaptive_sampler import AdaptiveSampler

__all__ = ["AdaptiveSampler"]
