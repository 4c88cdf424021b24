"""
Module: bank.repository

Purpose:
    Canonical in-memory question store. Questions are filed in a two-level
    map, topic -> difficulty -> list, giving O(1) lookup of any
    (topic, difficulty) bucket. A separate id index enforces uniqueness
    without scanning on insert.

Key Classes:
    - QuestionRepository: add / get / remove / counts

Dependencies:
    - exam_toolkit.core.models: Question, QuestionCounts, Topic, Difficulty

Used By:
    - bank.store.QuestionBank
    - selection.selector.ExamSelector
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from exam_toolkit.core.models import Difficulty, Question, QuestionCounts, Topic

logger = logging.getLogger(__name__)


def _empty_buckets() -> Dict[Difficulty, List[Question]]:
    return {d: [] for d in Difficulty}


class QuestionRepository:
    """
    Question store indexed by topic and difficulty.

    Owns question identity: no two stored questions share an id. All
    query methods return independent copies, never live bucket lists.

    Example:
        >>> repo = QuestionRepository()
        >>> repo.add(question)
        True
        >>> repo.add(question)  # same id
        False
        >>> repo.get(Topic.SEARCHING, Difficulty.EASY)
        [Question('1', topic='Searching', difficulty='Easy')]
    """

    def __init__(self) -> None:
        """Initialize with an empty bucket for every topic."""
        self._store: Dict[Topic, Dict[Difficulty, List[Question]]] = {
            topic: _empty_buckets() for topic in Topic
        }
        self._by_id: Dict[str, Question] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, question: Question) -> bool:
        """
        Add a question.

        Args:
            question: Question to file

        Returns:
            False if a question with the same id is already stored
        """
        if question.id in self._by_id:
            logger.warning(f"Question with ID {question.id} already exists")
            return False

        buckets = self._store.setdefault(question.topic, _empty_buckets())
        buckets[question.difficulty].append(question)
        self._by_id[question.id] = question
        return True

    def remove(self, question_id: str) -> bool:
        """
        Remove a question by id.

        Returns:
            True if a question was removed, False if the id is unknown
        """
        question = self._by_id.get(question_id)
        if question is None:
            return False

        bucket = self._store[question.topic][question.difficulty]
        for index, stored in enumerate(bucket):
            if stored.id == question_id:
                del bucket[index]
                break
        del self._by_id[question_id]
        return True

    def clear(self) -> None:
        """Remove every question."""
        for buckets in self._store.values():
            for bucket in buckets.values():
                bucket.clear()
        self._by_id.clear()

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, topic: Topic, difficulty: Difficulty) -> List[Question]:
        """Copy of the (topic, difficulty) bucket; empty if unknown."""
        buckets = self._store.get(topic)
        if buckets is None:
            return []
        return list(buckets.get(difficulty, ()))

    def get_by_id(self, question_id: str) -> Optional[Question]:
        """Stored question with this id, or None."""
        return self._by_id.get(question_id)

    def get_by_topic(self, topic: Topic) -> List[Question]:
        """All questions of a topic: Easy, then Medium, then Hard."""
        buckets = self._store.get(topic)
        if buckets is None:
            return []
        result: List[Question] = []
        for difficulty in Difficulty:
            result.extend(buckets[difficulty])
        return result

    def get_by_difficulty(self, difficulty: Difficulty) -> List[Question]:
        """All questions of a difficulty, in topic order."""
        result: List[Question] = []
        for buckets in self._store.values():
            result.extend(buckets.get(difficulty, ()))
        return result

    def get_all(self) -> List[Question]:
        """All questions, topic-major and difficulty-minor."""
        result: List[Question] = []
        for buckets in self._store.values():
            for difficulty in Difficulty:
                result.extend(buckets[difficulty])
        return result

    def counts(self) -> QuestionCounts:
        """
        Count stored questions.

        Returns:
            QuestionCounts with every topic and difficulty present
        """
        by_topic: Dict[str, int] = {}
        by_difficulty: Dict[Difficulty, int] = {d: 0 for d in Difficulty}
        total = 0
        for topic, buckets in self._store.items():
            by_topic[topic] = 0
            for difficulty, bucket in buckets.items():
                by_topic[topic] += len(bucket)
                by_difficulty[difficulty] += len(bucket)
                total += len(bucket)
        return QuestionCounts(total=total, by_topic=by_topic, by_difficulty=by_difficulty)

    # ─────────────────────────────────────────────────────────────────────────
    # Container Protocol
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def __iter__(self) -> Iterator[Question]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"QuestionRepository(questions={len(self)})"
