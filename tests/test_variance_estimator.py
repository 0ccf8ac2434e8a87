"""
Tests for Beta variance estimation.

Focus on known Beta(alpha, beta) variances and pair ordering.
"""

import pytest

from power_ranker.models import Preference
from power_ranker.rankers.power_ranker import PowerRanker
from power_ranker.variance import beta_variance


class TestVarianceEstimator:
    """Test variances exposed through PowerRanker.get_variances."""

    def test_beta_variance_formula(self) -> None:
        assert beta_variance(1.0, 1.0) == pytest.approx(1 / 12)
        assert beta_variance(2.0, 2.0) == pytest.approx(1 / 20)
        assert beta_variance(3.0, 1.0) == pytest.approx(3 / 80)
        assert beta_variance(1.0, 3.0) == pytest.approx(3 / 80)

    def test_default_variance_without_votes(self) -> None:
        """Every pair should start at Beta(1, 1)."""
        ranker = PowerRanker(["a", "b", "c", "d"])

        variances = ranker.get_variances()

        assert len(variances) == 6, "Should have one entry per unordered pair"
        for entry in variances:
            assert entry.variance == pytest.approx(1 / 12)

    def test_pairs_in_index_order(self) -> None:
        ranker = PowerRanker(["c", "a", "b"])

        pairs = [(entry.item_a, entry.item_b) for entry in ranker.get_variances()]

        assert pairs == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_one_vote_each_way(self) -> None:
        """One full vote in each direction gives Beta(2, 2)."""
        ranker = PowerRanker(["a", "b", "c"])
        ranker.add_preferences([
            Preference(source="a", target="b", value=1.0),
            Preference(source="b", target="a", value=1.0),
        ])

        variances = {(e.item_a, e.item_b): e.variance for e in ranker.get_variances()}

        assert variances[("a", "b")] == pytest.approx(1 / 20)
        assert variances[("a", "c")] == pytest.approx(1 / 12), "Untouched pair keeps default"

    @pytest.mark.parametrize("source,target", [("a", "b"), ("b", "a")])
    def test_lopsided_votes(self, source: str, target: str) -> None:
        """Two full votes one way give Beta(3, 1), symmetric in direction."""
        ranker = PowerRanker(["a", "b"])
        ranker.add_preferences([Preference(source=source, target=target, value=1.0)] * 2)

        (entry,) = ranker.get_variances()

        assert entry.variance == pytest.approx(3 / 80)

    def test_prior_counts_toward_variance(self) -> None:
        """The neutral prior contributes 0.5 each way until retracted."""
        ranker = PowerRanker(["a", "b"], num_participants=1)

        (before,) = ranker.get_variances()
        ranker.add_preferences([Preference(source="a", target="b", value=1.0)])
        (after,) = ranker.get_variances()

        assert before.variance == pytest.approx(beta_variance(1.5, 1.5))
        assert after.variance == pytest.approx(beta_variance(2.0, 1.0))

    def test_variances_are_idempotent(self) -> None:
        ranker = PowerRanker(["a", "b", "c"], num_participants=2)
        ranker.add_preferences([Preference(source="a", target="c", value=0.8)])

        assert ranker.get_variances() == ranker.get_variances()

    def test_variance_shrinks_with_votes(self) -> None:
        ranker = PowerRanker(["a", "b"])
        seen = [ranker.get_variances()[0].variance]

        for _ in range(4):
            ranker.add_preferences([
                Preference(source="a", target="b", value=1.0),
                Preference(source="b", target="a", value=1.0),
            ])
            seen.append(ranker.get_variances()[0].variance)

        assert seen == sorted(seen, reverse=True)
