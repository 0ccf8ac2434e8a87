"""
Tests for AdaptiveSession.

End-to-end: sampler picks pairs, simulated judge votes, ranker converges.
"""

import numpy as np
import pytest

from power_ranker.exceptions import InvalidArgumentError
from power_ranker.judges.sim_judge import SimulatedJudge
from power_ranker.rankers.power_ranker import PowerRanker
from power_ranker.session import AdaptiveSession, SessionConfig


class TestSessionConfig:
    """Test configuration validation."""

    @pytest.mark.parametrize("kwargs", [
        {"budget": 0}, {"progress_every": 0}, {"d": 0.0}, {"epsilon": 0.0}, {"n_iter": 0},
    ])
    def test_invalid_values(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(InvalidArgumentError):
            SessionConfig(**kwargs)


class TestAdaptiveSession:
    """Test the adaptive comparison loop."""

    def test_recovers_ground_truth_order(self) -> None:
        # Arrange
        ground_truth = {"a": 3.0, "b": 2.0, "c": 1.0}
        ranker = PowerRanker(ground_truth)
        judge = SimulatedJudge(ground_truth, noise=0.0)
        session = AdaptiveSession(
            ranker, judge, SessionConfig(budget=30, d=0.85), rng=np.random.default_rng(11)
        )

        # Act
        rankings = session.run()

        # Assert
        assert rankings["a"] > rankings["b"] > rankings["c"], f"Unexpected ranking: {rankings}"
        assert sum(rankings.values()) == pytest.approx(1.0, abs=1e-9)

    def test_spends_exact_budget(self) -> None:
        items = ["w", "x", "y", "z"]
        ranker = PowerRanker(items, num_participants=50)
        judge = SimulatedJudge({item: float(i + 1) for i, item in enumerate(items)}, noise=0.2,
                               rng=np.random.default_rng(5))
        session = AdaptiveSession(ranker, judge, SessionConfig(budget=25, progress_every=5),
                                  rng=np.random.default_rng(6))

        session.run()

        assert session.evaluated_rounds == 25
        assert ranker.num_preferences == 25
        assert sum(session.pair_counts.values()) == 25

    def test_small_prior_with_large_budget_completes(self) -> None:
        """A budget far above num_participants votes per pair should run to the end."""
        # Arrange
        ground_truth = {"a": 3.0, "b": 2.0, "c": 1.0}
        ranker = PowerRanker(ground_truth, num_participants=3)
        judge = SimulatedJudge(ground_truth, noise=0.0)
        session = AdaptiveSession(
            ranker, judge, SessionConfig(budget=100, d=0.85), rng=np.random.default_rng(21)
        )

        # Act
        rankings = session.run()

        # Assert
        assert session.evaluated_rounds == 100
        assert all(entry.variance > 0 for entry in ranker.get_variances())
        assert all(weight >= 0 for weight in rankings.values())
        assert rankings["a"] > rankings["b"] > rankings["c"], f"Unexpected ranking: {rankings}"

    def test_step_records_one_vote(self) -> None:
        ranker = PowerRanker(["a", "b"], num_participants=3)
        judge = SimulatedJudge({"a": 2.0, "b": 1.0}, noise=0.0)
        session = AdaptiveSession(ranker, judge, rng=np.random.default_rng(0))

        session.step()

        assert ranker.num_preferences == 1
        assert session.pair_counts == {("a", "b"): 1}
