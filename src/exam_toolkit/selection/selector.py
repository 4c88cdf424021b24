"""
Module: selection.selector

Purpose:
    Main exam selection algorithm. Turns an ExamConfig (question count,
    difficulty weights, topic filter) into a concrete, topic-diverse set
    of questions drawn from a question source.

Key Functions:
    - generate_exam(): Main entry point for exam generation

Key Classes:
    - ExamSelector: Orchestrates pool building, apportionment and sampling
    - QuestionSource: Protocol satisfied by QuestionRepository and QuestionBank

Algorithm:
    1. Build the candidate pool (all questions, or the requested topics)
    2. Apportion the question count across difficulties
    3. Diversity-aware selection per difficulty (Easy, Medium, Hard)
    4. Wrap in an ExamResult; log a warning on shortfall

Dependencies:
    - exam_toolkit.core.models: ExamConfig, ExamResult, Question
    - selection.distribution, selection.diversity

Used By:
    - bank.store.QuestionBank.generate_exam
    - cli: generate command
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Protocol

from exam_toolkit.core.models import Difficulty, ExamConfig, ExamResult, Question, Topic

from .distribution import calculate_distribution, count_by_difficulty
from .diversity import select_with_diversity

logger = logging.getLogger(__name__)


class QuestionSource(Protocol):
    """Read side of a question store used for pool building."""

    def get_all(self) -> List[Question]: ...

    def get_by_topic(self, topic: Topic) -> List[Question]: ...


def generate_exam(
    source: QuestionSource,
    config: ExamConfig,
    rng: Optional[random.Random] = None,
) -> ExamResult:
    """
    Generate an exam from a question source.

    Args:
        source: Repository or bank to draw from
        config: Exam configuration
        rng: Random source; built from config.seed when omitted

    Returns:
        ExamResult with at most config.num_questions questions

    Invariants:
        - Every question matches the topic filter (if any)
        - No duplicate questions
        - Fewer questions than requested only when the pool runs short

    Example:
        >>> result = generate_exam(repo, ExamConfig(num_questions=9))
        >>> result.difficulty_counts
        {Easy: 3, Medium: 3, Hard: 3}
    """
    return ExamSelector(source, rng=rng).generate_exam(config)


class ExamSelector:
    """
    Exam generation orchestrator.

    Holds a question source and an optional injected random source.
    When no random source is injected, each call builds one from
    ``config.seed`` so equal seeds give equal exams.

    Attributes:
        source: Question store to draw from
    """

    def __init__(self, source: QuestionSource, rng: Optional[random.Random] = None) -> None:
        self.source = source
        self._rng = rng

    def generate_exam(self, config: ExamConfig) -> ExamResult:
        """
        Execute the selection algorithm.

        Returns:
            ExamResult with selected questions in Easy, Medium, Hard order
        """
        rng = self._rng if self._rng is not None else random.Random(config.seed)

        # Step 1: Candidate pool
        pool = self._build_pool(config)

        # Step 2: Distribution
        distribution = calculate_distribution(
            config.num_questions,
            config.difficulties,
            count_by_difficulty(pool),
        )

        # Step 3: Per-difficulty diverse selection
        selected: List[Question] = []
        for difficulty in Difficulty:
            target = distribution[difficulty]
            if target <= 0:
                continue
            candidates = [q for q in pool if q.difficulty == difficulty]
            picked = select_with_diversity(
                candidates,
                min(target, len(candidates)),
                config.ordered_topics,
                rng,
            )
            selected.extend(picked)

        result = ExamResult(questions=tuple(selected), config=config)

        # Step 4: Warnings
        self._check_warnings(result, len(pool))
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Step 1: Candidate Pool
    # ─────────────────────────────────────────────────────────────────────────

    def _build_pool(self, config: ExamConfig) -> List[Question]:
        """Questions eligible under the topic filter."""
        if not config.topics:
            pool = self.source.get_all()
        else:
            pool = []
            for topic in config.ordered_topics:
                pool.extend(self.source.get_by_topic(topic))

        logger.debug(
            f"Candidate pool has {len(pool)} questions "
            f"(topics: {', '.join(t.value for t in config.ordered_topics) or 'all'})"
        )
        return pool

    # ─────────────────────────────────────────────────────────────────────────
    # Step 4: Warnings
    # ─────────────────────────────────────────────────────────────────────────

    def _check_warnings(self, result: ExamResult, pool_size: int) -> None:
        """Log if the exam came out shorter than requested."""
        if result.shortfall > 0:
            logger.warning(
                f"Only {result.question_count} of {result.config.num_questions} "
                f"questions could be selected (pool of {pool_size})"
            )
        else:
            logger.debug(f"Selected {result.question_count} questions")
