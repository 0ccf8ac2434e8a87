"""
Simulated judge implementation.

Answers pairwise comparisons from latent scores with a noise parameter, for
testing and demos.
"""

import numpy as np
from typing_extensions import override

from ..exceptions import InvalidArgumentError
from ..interfaces import Judge
from ..models import Item, Preference


class SimulatedJudge(Judge):
    """
    Simulated judge for testing purposes.

    Votes with strength given by a logistic function of the noisy score
    difference, so close items get votes near 0.5 and distant ones near 0 or 1.
    """

    def __init__(self, ground_truth: dict[Item, float], noise: float = 0.1, rng: np.random.Generator | None = None):
        """
        Initialize simulated judge.

        Args:
            ground_truth: Dict mapping item to its true score
            noise: Amount of noise to add (0-1, where 1 = full noise)
            rng: Random generator for the noise
        """
        self.ground_truth = ground_truth
        self.noise = max(0.0, min(1.0, noise))  # Clamp to [0, 1]
        self.rng = rng if rng is not None else np.random.default_rng()
        self.judge_id = "simulated"

    def _noisy_score(self, item: Item) -> float:
        if item not in self.ground_truth:
            raise InvalidArgumentError(f"No ground truth for item: {item!r}")
        score = self.ground_truth[item]
        if self.noise == 0:
            return score

        # Scale noise by score magnitude
        return score + self.rng.normal(0.0, abs(score) * self.noise)

    @override
    def compare(self, item_a: Item, item_b: Item) -> Preference:
        """Return a vote whose value is the logistic of score_b - score_a."""
        score_a = self._noisy_score(item_a)
        score_b = self._noisy_score(item_b)

        # Logistic via tanh, which cannot overflow; above 0.5 means item_b wins
        value = float(0.5 * (1.0 + np.tanh((score_b - score_a) / 2.0)))
        return Preference(source=item_a, target=item_b, value=value)
