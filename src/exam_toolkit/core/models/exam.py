"""
Module: exam

Purpose:
    Provides the exam configuration (input) and exam result (output)
    dataclasses for the exam selection algorithm.

Key Classes:
    - DifficultyWeights: Per-difficulty weights (Easy, Medium, Hard)
    - ExamConfig: Requested size, difficulty mix and topic filter
    - ExamResult: Selected questions plus the config that produced them
    - ConfigurationError: Raised for an unusable configuration

Dependencies:
    - dataclasses (std)
    - datetime (std)
    - .questions.Question
    - .taxonomy: Difficulty, Topic

Used By:
    - selection.distribution, selection.selector
    - cli
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import cached_property
from typing import Dict, Mapping, Optional, Set, Union

from .questions import Question
from .taxonomy import Difficulty, Topic


class ConfigurationError(ValueError):
    """Exam configuration cannot be used for selection."""
    pass


@dataclass(frozen=True)
class DifficultyWeights:
    """
    Relative weights for each difficulty level (immutable).

    Weights are ratios, not counts: (1, 1, 1) over 9 questions asks for
    three of each.

    Invariants:
        - every weight is a non-negative integer
    """

    easy: int = 1
    medium: int = 1
    hard: int = 1

    def __post_init__(self) -> None:
        """Validate weights on construction."""
        for name in ("easy", "medium", "hard"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} weight must be an integer: {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} weight must be non-negative: {value}")

    @classmethod
    def from_mapping(cls, weights: Mapping) -> DifficultyWeights:
        """
        Build weights from a label -> weight mapping.

        Keys may be Difficulty members or labels ("Easy", "hard"); levels
        not named get weight 0.

        Raises:
            ConfigurationError: If a key names no difficulty
        """
        from exam_toolkit.common.topics import resolve_difficulty

        values = {d: 0 for d in Difficulty}
        for key, value in weights.items():
            try:
                values[resolve_difficulty(key)] = value
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        return cls(
            easy=values[Difficulty.EASY],
            medium=values[Difficulty.MEDIUM],
            hard=values[Difficulty.HARD],
        )

    @property
    def total(self) -> int:
        """Sum of all three weights."""
        return self.easy + self.medium + self.hard

    def weight_for(self, difficulty: Difficulty) -> int:
        """Weight configured for a single difficulty."""
        return {
            Difficulty.EASY: self.easy,
            Difficulty.MEDIUM: self.medium,
            Difficulty.HARD: self.hard,
        }[difficulty]

    def as_dict(self) -> Dict[Difficulty, int]:
        """Weights keyed by Difficulty in canonical order."""
        return {d: self.weight_for(d) for d in Difficulty}


@dataclass(frozen=True)
class ExamConfig:
    """
    Configuration for generating an exam (immutable).

    Attributes:
        num_questions: Target number of questions
        difficulties: Difficulty weights (a label -> weight mapping is
            converted with DifficultyWeights.from_mapping)
        topics: Topics to draw from (empty = all topics)
        seed: Random seed for reproducible selection (None = OS entropy)

    Invariants:
        - num_questions > 0
        - difficulties.total > 0

    Example:
        >>> config = ExamConfig(num_questions=9, topics=["Arrays", "Trees"])
        >>> config.topic_set == {Topic.ARRAYS, Topic.TREES}
        True
    """

    num_questions: int
    difficulties: Union[DifficultyWeights, Mapping] = field(default_factory=DifficultyWeights)
    topics: tuple[Topic, ...] = ()
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if (
            not isinstance(self.num_questions, int)
            or isinstance(self.num_questions, bool)
            or self.num_questions <= 0
        ):
            raise ConfigurationError(
                f"num_questions must be positive: {self.num_questions!r}"
            )
        if isinstance(self.difficulties, Mapping):
            object.__setattr__(
                self, "difficulties", DifficultyWeights.from_mapping(self.difficulties)
            )
        elif not isinstance(self.difficulties, DifficultyWeights):
            raise ConfigurationError(
                f"difficulties must be DifficultyWeights or a mapping: {self.difficulties!r}"
            )
        if self.difficulties.total <= 0:
            raise ConfigurationError(
                "At least one difficulty weight must be positive"
            )

        from exam_toolkit.common.topics import resolve_topic

        try:
            topics = tuple(resolve_topic(t) for t in self.topics)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        object.__setattr__(self, "topics", topics)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def ordered_topics(self) -> tuple[Topic, ...]:
        """Requested topics, de-duplicated, in declaration order."""
        return tuple(dict.fromkeys(self.topics))

    @property
    def topic_set(self) -> Set[Topic]:
        """Requested topics as a set (empty if all topics allowed)."""
        return set(self.topics)

    def to_dict(self) -> dict:
        """Serialize with labels instead of enum members."""
        return {
            "num_questions": self.num_questions,
            "difficulties": {d.value: w for d, w in self.difficulties.as_dict().items()},
            "topics": [t.value for t in self.topics],
            "seed": self.seed,
        }


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ExamResult:
    """
    Result of exam generation.

    Attributes:
        questions: Selected questions, Easy then Medium then Hard
        config: Configuration that produced the exam
        created_at: UTC creation time

    Invariants:
        - No duplicate question ids
        - question_count <= config.num_questions

    Example:
        >>> result = generate_exam(bank, ExamConfig(num_questions=100))
        >>> result.shortfall  # bank only holds 10 questions
        90
    """

    questions: tuple[Question, ...]
    config: ExamConfig
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate result on construction."""
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate questions in exam result")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def question_count(self) -> int:
        """Number of questions in the exam."""
        return len(self.questions)

    @property
    def question_ids(self) -> list[str]:
        """Question ids in exam order."""
        return [q.id for q in self.questions]

    @property
    def shortfall(self) -> int:
        """
        How many questions short of the requested count.

        The selector never pads or raises when the bank runs dry;
        callers check this to inform the user.
        """
        return max(0, self.config.num_questions - self.question_count)

    @property
    def is_complete(self) -> bool:
        """True if the requested number of questions was reached."""
        return self.shortfall == 0

    @cached_property
    def difficulty_counts(self) -> Dict[Difficulty, int]:
        """Selected questions per difficulty (all three present)."""
        counts = {d: 0 for d in Difficulty}
        for q in self.questions:
            counts[q.difficulty] += 1
        return counts

    @cached_property
    def topic_counts(self) -> Dict[Topic, int]:
        """Selected questions per topic (only topics present)."""
        counts: Dict[Topic, int] = {}
        for q in self.questions:
            counts[q.topic] = counts.get(q.topic, 0) + 1
        return counts

    @property
    def covered_topics(self) -> Set[Topic]:
        """Topics represented in the exam."""
        return set(self.topic_counts)

    @property
    def timestamp(self) -> int:
        """Creation time in epoch milliseconds."""
        return int(self.created_at.timestamp() * 1000)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def get_question(self, question_id: str) -> Optional[Question]:
        """
        Find a selected question by id.

        Returns:
            Matching Question or None
        """
        for q in self.questions:
            if q.id == question_id:
                return q
        return None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "questions": [q.to_dict() for q in self.questions],
            "config": self.config.to_dict(),
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"ExamResult(questions={self.question_count}/{self.config.num_questions}, "
            f"topics={len(self.covered_topics)})"
        )
