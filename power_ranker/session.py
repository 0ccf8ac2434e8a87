"""
Adaptive comparison session.

Coordinates ranker, sampler and judge: each round samples the most
uncertain pair, asks the judge, and records the vote.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import InvalidArgumentError
from .interfaces import Judge, Ranker
from .logging_config import get_logger
from .models import Item
from .samplers.adaptive_sampler import AdaptiveSampler
from .solver import SolverConfig


@dataclass
class SessionConfig:
    """Configuration for an adaptive session."""

    budget: int = 100  # total judge calls allowed
    d: float = 1.0
    epsilon: float = 0.001
    n_iter: int = 1000
    progress_every: int = 10  # log progress every N rounds

    def __post_init__(self):
        """Validate configuration."""
        if self.budget <= 0:
            raise InvalidArgumentError(f"budget must be positive, got {self.budget}")
        if self.progress_every <= 0:
            raise InvalidArgumentError(f"progress_every must be positive, got {self.progress_every}")
        # Reuse solver validation for d, epsilon and n_iter
        _ = self.solver_config()

    def solver_config(self) -> SolverConfig:
        return SolverConfig(d=self.d, epsilon=self.epsilon, n_iter=self.n_iter)


class AdaptiveSession:
    """
    Sequential active-learning loop over a single ranker.

    Rounds run strictly one after another, so the ranker's matrix only ever
    has one writer.
    """

    def __init__(
        self,
        ranker: Ranker,
        judge: Judge,
        config: SessionConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        """Initialize session with all components."""
        self.ranker: Ranker = ranker
        self.judge: Judge = judge
        self.config: SessionConfig = config or SessionConfig()
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()

        self.evaluated_rounds: int = 0
        self.pair_counts = dict[tuple[Item, Item], int]()

        self.logger: Logger = get_logger("session")

    def step(self) -> None:
        """Run a single round: sample a pair, ask the judge, record the vote."""
        sampler = AdaptiveSampler(self.ranker.get_variances(), rng=self.rng)
        suggestion = sampler.sample_pair()

        preference = self.judge.compare(suggestion.item_a, suggestion.item_b)
        self.ranker.add_preferences([preference])

        pair = (suggestion.item_a, suggestion.item_b)
        self.pair_counts[pair] = self.pair_counts.get(pair, 0) + 1
        self.evaluated_rounds += 1
        self.logger.debug(f"Round {self.evaluated_rounds}: {pair[0]!r} vs {pair[1]!r} -> {preference.value}")

    def run(self) -> dict[Item, float]:
        """Run until the budget is spent and return the final ranking."""
        self.logger.info(f"Starting adaptive session with config: {self.config}")

        while self.evaluated_rounds < self.config.budget:
            self.step()
            if self.evaluated_rounds % self.config.progress_every == 0:
                self.logger.info(f"Progress: {self.evaluated_rounds}/{self.config.budget} comparisons")

        solver_config = self.config.solver_config()
        rankings = self.ranker.run(d=solver_config.d, epsilon=solver_config.epsilon, n_iter=solver_config.n_iter)
        self.logger.info(f"Session complete: {self.evaluated_rounds} comparisons evaluated")
        return rankings
