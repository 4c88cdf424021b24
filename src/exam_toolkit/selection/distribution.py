"""
Module: selection.distribution

Purpose:
    Apportion the requested question count across difficulty levels
    according to the configured weights, bounded by what the candidate
    pool can supply.

Key Functions:
    - calculate_distribution(): Target count per difficulty
    - count_by_difficulty(): Availability per difficulty in a pool

Algorithm:
    1. target[d] = round_half_up(weight[d] / total_weight * num_questions)
    2. Clamp each target to the number available for that difficulty
    3. Sum < num_questions: accept the shortfall
    4. Sum > num_questions (rounding only): trim one at a time from
       Hard, then Medium, then Easy
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Mapping

from exam_toolkit.core.models import ConfigurationError, Difficulty, DifficultyWeights, Question
from exam_toolkit.core.models.taxonomy import TRIM_ORDER

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero (2.5 -> 3).

    Python's round() uses banker's rounding (2.5 -> 2), which would
    under-allocate evenly split weights.
    """
    return int(math.floor(value + 0.5))


def count_by_difficulty(questions: Iterable[Question]) -> Dict[Difficulty, int]:
    """Number of questions per difficulty (all three present)."""
    counts = {d: 0 for d in Difficulty}
    for q in questions:
        counts[q.difficulty] += 1
    return counts


def calculate_distribution(
    num_questions: int,
    weights: DifficultyWeights,
    available: Mapping[Difficulty, int],
) -> Dict[Difficulty, int]:
    """
    Calculate how many questions to draw per difficulty.

    Args:
        num_questions: Requested exam size
        weights: Difficulty weights
        available: Questions available per difficulty in the pool

    Returns:
        Dict of Difficulty -> target count, in canonical order. The sum
        never exceeds num_questions and each entry never exceeds its
        availability.

    Raises:
        ConfigurationError: If the weights sum to zero

    Example:
        >>> calculate_distribution(5, DifficultyWeights(1, 1, 1), {E: 3, M: 4, H: 3})
        {Easy: 2, Medium: 2, Hard: 1}
    """
    total_weight = weights.total
    if total_weight <= 0:
        raise ConfigurationError("At least one difficulty weight must be positive")

    desired = {
        d: round_half_up(weights.weight_for(d) / total_weight * num_questions)
        for d in Difficulty
    }
    distribution = {
        d: min(desired[d], available.get(d, 0))
        for d in Difficulty
    }

    total = sum(distribution.values())
    if total < num_questions:
        logger.debug(
            f"Distribution {_fmt(distribution)} short of {num_questions} "
            f"(desired {_fmt(desired)})"
        )
        return distribution

    excess = total - num_questions
    for difficulty in TRIM_ORDER:
        while excess > 0 and distribution[difficulty] > 0:
            distribution[difficulty] -= 1
            excess -= 1

    logger.debug(f"Distribution for {num_questions} questions: {_fmt(distribution)}")
    return distribution


def _fmt(counts: Mapping[Difficulty, int]) -> str:
    return ", ".join(f"{d.value}={n}" for d, n in counts.items())
