"""
Module: counts

Purpose:
    QuestionCounts - summary of how many questions a store holds, in
    total and broken down by topic and by difficulty. Shared by the
    repository and both auxiliary indices.

Used By:
    - bank.repository.QuestionRepository.counts()
    - bank.topic_tree.TopicTree.get_question_counts()
    - bank.graph.RelationshipGraph.get_question_counts()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping

from .questions import Question
from .taxonomy import Difficulty, Topic


@dataclass(frozen=True)
class QuestionCounts:
    """
    Question totals (immutable).

    Attributes:
        total: Number of questions
        by_topic: Topic label -> count. Topic members compare equal to
            their labels, so ``by_topic[Topic.ARRAYS]`` also works.
        by_difficulty: Difficulty -> count, all three levels present
    """

    total: int = 0
    by_topic: Mapping[str, int] = field(default_factory=dict)
    by_difficulty: Mapping[Difficulty, int] = field(default_factory=dict)

    @classmethod
    def tally(cls, questions: Iterable[Question]) -> QuestionCounts:
        """
        Count questions, reporting every Topic and Difficulty (0 default).

        Args:
            questions: Questions to count

        Returns:
            QuestionCounts over the given questions
        """
        by_topic: Dict[str, int] = {topic: 0 for topic in Topic}
        by_difficulty: Dict[Difficulty, int] = {d: 0 for d in Difficulty}
        total = 0
        for question in questions:
            by_topic[question.topic] = by_topic.get(question.topic, 0) + 1
            by_difficulty[question.difficulty] += 1
            total += 1
        return cls(total=total, by_topic=by_topic, by_difficulty=by_difficulty)

    def to_dict(self) -> dict:
        """Serialize with plain string keys."""
        return {
            "total": self.total,
            "by_topic": {str(k): v for k, v in self.by_topic.items()},
            "by_difficulty": {str(k): v for k, v in self.by_difficulty.items()},
        }
