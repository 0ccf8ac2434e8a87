"""
Power iteration solver.

Normalizes a preference matrix into a row-stochastic matrix, blends in
uniform teleportation mass (damping) and runs power iteration to the
dominant left eigenvector, which serves as the ranking weights.
"""

from dataclasses import dataclass

import numpy as np

from .exceptions import DegenerateMatrixError, InvalidArgumentError
from .logging_config import get_logger

logger = get_logger("power_iteration")


@dataclass
class SolverConfig:
    """Parameters for power iteration."""

    d: float = 1.0  # damping factor, 1 means no damping
    epsilon: float = 0.001  # stop when the step norm drops below this
    n_iter: int = 1000  # maximum number of iterations

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not (0.0 < self.d <= 1.0):
            raise InvalidArgumentError(f"d must be in (0, 1], got {self.d}")
        if self.epsilon <= 0:
            raise InvalidArgumentError(f"epsilon must be positive, got {self.epsilon}")
        if self.n_iter < 1:
            raise InvalidArgumentError(f"n_iter must be positive, got {self.n_iter}")


@dataclass
class PowerIterationResult:
    """Final iterate of a power iteration run."""

    weights: np.ndarray
    iterations: int
    converged: bool
    residual: float


class PowerIterationSolver:
    """Damped power iteration over a preference matrix."""

    def __init__(self, config: SolverConfig | None = None, verbose: bool = False):
        self.config = config or SolverConfig()
        self.verbose = verbose

    def normalize(self, matrix: np.ndarray) -> np.ndarray:
        """
        Return a row-stochastic copy of the matrix.

        Raises:
            DegenerateMatrixError: if some row sums to zero
        """
        row_sums = matrix.sum(axis=1)
        zero_rows = np.flatnonzero(row_sums == 0)
        if zero_rows.size:
            raise DegenerateMatrixError(
                f"Cannot normalize matrix: rows {zero_rows.tolist()} have no outgoing preference"
            )
        return matrix / row_sums[:, np.newaxis]

    def solve(self, matrix: np.ndarray) -> PowerIterationResult:
        """Run power iteration and return the final weight vector."""
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise InvalidArgumentError(f"Matrix must be square, got shape {matrix.shape}")

        n = matrix.shape[0]
        d, epsilon, n_iter = self.config.d, self.config.epsilon, self.config.n_iter

        weights = np.full(n, 1.0 / n)

        # No information at all: every item is equally likely
        if not np.any(matrix):
            logger.debug("Matrix has no preference mass, returning uniform weights")
            return PowerIterationResult(weights=weights, iterations=0, converged=True, residual=0.0)

        transition = self.normalize(np.array(matrix, dtype=np.float64, copy=True))
        transition = d * transition + (1 - d) / n

        converged = False
        residual = float("inf")
        iterations = 0
        for iterations in range(1, n_iter + 1):
            next_weights = weights @ transition
            residual = float(np.linalg.norm(next_weights - weights))
            weights = next_weights
            if residual < epsilon:
                converged = True
                break

        if converged:
            message = f"Eigenvector convergence after {iterations} iterations (residual {residual:.3g})"
            if self.verbose:
                logger.info(message)
            else:
                logger.debug(message)
        else:
            logger.warning(f"Power iteration did not converge in {n_iter} iterations (residual {residual:.3g})")

        return PowerIterationResult(weights=weights, iterations=iterations, converged=converged, residual=residual)
