"""
Unit tests for difficulty distribution.

Verified: 2026-10-18
"""

import pytest

from exam_toolkit.core.models import ConfigurationError, Difficulty, DifficultyWeights
from exam_toolkit.selection.distribution import (
    calculate_distribution,
    count_by_difficulty,
    round_half_up,
)

E, M, H = Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD
PLENTY = {E: 100, M: 100, H: 100}


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (1.49, 1), (1.667, 2), (0.0, 0)])
    def test_round_when_value_then_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestCalculateDistribution:
    """Tests for calculate_distribution."""

    def test_distribution_when_five_equal_weights_then_hard_trimmed(self):
        """5 * 1/3 rounds to 2 each; the excess comes off Hard."""
        result = calculate_distribution(5, DifficultyWeights(1, 1, 1), {E: 3, M: 4, H: 3})

        assert result == {E: 2, M: 2, H: 1}

    def test_distribution_when_divisible_then_exact(self):
        result = calculate_distribution(9, DifficultyWeights(1, 1, 1), PLENTY)

        assert result == {E: 3, M: 3, H: 3}

    def test_distribution_when_weighted_then_proportional(self):
        result = calculate_distribution(10, DifficultyWeights(easy=2, medium=2, hard=1), PLENTY)

        assert result == {E: 4, M: 4, H: 2}

    def test_distribution_when_zero_weight_then_level_excluded(self):
        result = calculate_distribution(6, DifficultyWeights(easy=1, medium=0, hard=1), PLENTY)

        assert result == {E: 3, M: 0, H: 3}

    def test_distribution_when_supply_short_then_clamped(self):
        result = calculate_distribution(9, DifficultyWeights(1, 1, 1), {E: 1, M: 3, H: 0})

        assert result == {E: 1, M: 3, H: 0}

    def test_distribution_when_rounding_down_then_shortfall_kept(self):
        """4 at 1:1:1 rounds to 1 each; the missing question is not reassigned."""
        result = calculate_distribution(4, DifficultyWeights(1, 1, 1), PLENTY)

        assert result == {E: 1, M: 1, H: 1}

    def test_distribution_when_excess_exceeds_hard_then_trims_medium(self):
        # 0.5 rounds up for Easy and Medium; Hard is empty so Medium is trimmed
        result = calculate_distribution(1, DifficultyWeights(easy=1, medium=1, hard=0), PLENTY)

        assert result == {E: 1, M: 0, H: 0}

    def test_distribution_when_any_input_then_bounds_hold(self):
        for n in range(1, 25):
            for weights in (DifficultyWeights(1, 1, 1), DifficultyWeights(3, 2, 1), DifficultyWeights(0, 1, 4)):
                available = {E: 5, M: 2, H: 7}
                result = calculate_distribution(n, weights, available)

                assert sum(result.values()) <= n
                assert all(result[d] <= available[d] for d in Difficulty)

    def test_distribution_when_weights_zero_then_raises(self):
        weights = DifficultyWeights(easy=0, medium=0, hard=0)

        with pytest.raises(ConfigurationError, match="weight must be positive"):
            calculate_distribution(5, weights, PLENTY)


class TestCountByDifficulty:

    def test_count_when_sample_questions_then_three_four_three(self, sample_questions):
        assert count_by_difficulty(sample_questions) == {E: 3, M: 4, H: 3}

    def test_count_when_empty_then_zeros(self):
        assert count_by_difficulty([]) == {E: 0, M: 0, H: 0}
