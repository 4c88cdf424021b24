"""
Module: questions

Purpose:
    Provides the Question dataclass - the record stored in the question
    bank and returned inside generated exams. Immutable once created;
    updates are modelled as remove + reinsert.

Key Functions:
    - Question.create(): Build a question with a fresh UUID4 id
    - Question.is_multiple_choice: True when options are present
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - uuid (std)
    - .taxonomy: Difficulty, Topic

Used By:
    - bank.repository, bank.topic_tree, bank.graph
    - core.models.exam.ExamResult
    - core.utils.serialization
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .taxonomy import Difficulty, Topic


@dataclass(frozen=True)
class Question:
    """
    Single exam question (immutable).

    Attributes:
        id: Unique identifier, typically a UUID string
        text: Question prompt
        difficulty: Difficulty level
        topic: Subject-matter topic
        options: Multiple-choice options; None for free-response
        answer: Answer key or model answer
        explanation: Optional explanation of the answer

    Invariants:
        - id and text are non-empty
        - difficulty and topic are enum members
        - options, when present, is a tuple of strings

    Example:
        >>> q = Question(
        ...     id="1",
        ...     text="What is the time complexity of binary search?",
        ...     difficulty=Difficulty.EASY,
        ...     topic=Topic.SEARCHING,
        ...     options=("O(n)", "O(log n)"),
        ...     answer="O(log n)",
        ... )
        >>> q.is_multiple_choice
        True
    """

    id: str
    text: str
    difficulty: Difficulty
    topic: Topic
    options: Optional[tuple[str, ...]] = None
    answer: Optional[str] = None
    explanation: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError(f"id must be a non-empty string: {self.id!r}")
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError(f"text must be a non-empty string for question {self.id!r}")
        if not isinstance(self.difficulty, Difficulty):
            raise ValueError(f"difficulty must be a Difficulty: {self.difficulty!r}")
        if not isinstance(self.topic, Topic):
            raise ValueError(f"topic must be a Topic: {self.topic!r}")

        if self.options is not None:
            # Frozen: normalise list input to a tuple in place
            if not isinstance(self.options, tuple):
                object.__setattr__(self, "options", tuple(self.options))
            if not all(isinstance(opt, str) for opt in self.options):
                raise ValueError(f"options must be strings for question {self.id!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def create(
        cls,
        text: str,
        difficulty: Difficulty,
        topic: Topic,
        options: Optional[Sequence[str]] = None,
        answer: Optional[str] = None,
        explanation: Optional[str] = None,
    ) -> Question:
        """
        Create a question with a freshly generated UUID4 id.

        Returns:
            New Question instance
        """
        return cls(
            id=str(uuid.uuid4()),
            text=text,
            difficulty=difficulty,
            topic=topic,
            options=tuple(options) if options is not None else None,
            answer=answer,
            explanation=explanation,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_multiple_choice(self) -> bool:
        """Whether the question offers answer options."""
        return bool(self.options)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary for JSON storage.

        Enums are written as their labels; optional fields are omitted
        when absent.

        Returns:
            Dict representation
        """
        d: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "difficulty": self.difficulty.value,
            "topic": self.topic.value,
        }
        if self.options is not None:
            d["options"] = list(self.options)
        if self.answer is not None:
            d["answer"] = self.answer
        if self.explanation is not None:
            d["explanation"] = self.explanation
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation (labels resolved leniently)

        Returns:
            Question instance
        """
        from exam_toolkit.common.topics import resolve_difficulty, resolve_topic

        options = data.get("options")
        return cls(
            id=data["id"],
            text=data["text"],
            difficulty=resolve_difficulty(data["difficulty"]),
            topic=resolve_topic(data["topic"]),
            options=tuple(options) if options is not None else None,
            answer=data.get("answer"),
            explanation=data.get("explanation"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, topic={self.topic.value!r}, "
            f"difficulty={self.difficulty.value!r})"
        )
