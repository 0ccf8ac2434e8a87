"""
Power ranker implementation.

Ranks items from pairwise votes by damped power iteration over the
preference matrix, and exposes per-pair variances for adaptive sampling.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TYPE_CHECKING

import numpy as np
from typing_extensions import override

if TYPE_CHECKING:
    from loguru import Logger

from ..exceptions import InvalidArgumentError
from ..indexer import ItemIndexer
from ..interfaces import Ranker
from ..logging_config import get_logger
from ..matrix import PreferenceMatrixBuilder
from ..models import Item, Preference, VarianceEntry, parse_preferences
from ..solver import PowerIterationResult, PowerIterationSolver, SolverConfig
from ..variance import VarianceEstimator


class PowerRanker(Ranker):
    """
    Pairwise preference ranker.

    Rankings and variances are recomputed from the current matrix on every
    call; nothing is cached across mutations.

    Thread Safety: The matrix has a single writer. Callers submitting
    preferences from several threads must serialize add_preferences.
    """

    def __init__(
        self,
        items: Iterable[Item],
        num_participants: int | None = None,
        preferences: Iterable[Preference | Mapping[str, Any]] | None = None,
        verbose: bool = False,
    ):
        """
        Initialize power ranker.

        Args:
            items: The items being voted on (at least two)
            num_participants: Number of participants; enables the implicit neutral prior
            preferences: Initial votes
            verbose: Log solver convergence at INFO instead of DEBUG
        """
        self._indexer = ItemIndexer(items)
        if len(self._indexer) < 2:
            raise InvalidArgumentError("Cannot rank less than two items")

        self.verbose = verbose
        self._builder = PreferenceMatrixBuilder(self._indexer, num_participants)
        self._variance_estimator = VarianceEstimator(self._indexer)

        self.logger: Logger = get_logger("power_ranker")

        if preferences is not None:
            self.add_preferences(preferences)

        self.logger.info(
            f"Power ranker initialized: {len(self._indexer)} items, num_participants={num_participants}"
        )

    @property
    def items(self) -> tuple[Item, ...]:
        """Items in canonical (index) order."""
        return self._indexer.items

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the current preference matrix."""
        return self._builder.matrix

    @property
    def num_preferences(self) -> int:
        return self._builder.num_preferences

    def index_of(self, item: Item) -> int:
        return self._indexer.index_of(item)

    @override
    def add_preferences(self, preferences: Iterable[Preference | Mapping[str, Any]]) -> None:
        """Record a batch of votes, given as Preference objects or mappings."""
        self._builder.add_preferences(parse_preferences(preferences))

    def solve(self, d: float = 1.0, epsilon: float = 0.001, n_iter: int = 1000) -> PowerIterationResult:
        """Run power iteration and return the raw result, indexed by matrix position."""
        solver = PowerIterationSolver(SolverConfig(d=d, epsilon=epsilon, n_iter=n_iter), verbose=self.verbose)
        # Solver works on a copy; the live matrix is never shared
        return solver.solve(self._builder.matrix)

    @override
    def run(self, d: float = 1.0, epsilon: float = 0.001, n_iter: int = 1000) -> dict[Item, float]:
        """
        Compute the ranking.

        Args:
            d: Damping factor in (0, 1], 1 means no damping
            epsilon: Convergence tolerance on the step norm
            n_iter: Maximum number of iterations

        Returns:
            Mapping of item to weight, in canonical item order
        """
        result = self.solve(d=d, epsilon=epsilon, n_iter=n_iter)
        return self._indexer.label(result.weights)

    @override
    def get_variances(self) -> list[VarianceEntry]:
        """Get Beta variances for every pair (i < j) in index order."""
        return self._variance_estimator.estimate(self._builder.matrix)
