"""
Exception classes for the power ranker system.

Centralized location for all custom exceptions to avoid circular imports.
"""


class PowerRankerError(Exception):
    """Base exception for all power ranker errors."""
    pass


class InvalidArgumentError(PowerRankerError, ValueError):
    """Raised for bad caller input: too few items, unknown items, bad parameters."""
    pass


class DegenerateMatrixError(PowerRankerError, ArithmeticError):
    """Raised when a preference matrix row sums to zero and cannot be normalized."""
    pass


class DimensionMismatchError(PowerRankerError, AssertionError):
    """Internal invariant violation: eigenvector length differs from item count."""
    pass
