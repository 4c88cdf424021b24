"""
Module: bank.store

Purpose:
    Unified question bank. One explicitly constructed object owns the
    canonical QuestionRepository and keeps the optional topic hierarchy
    and relationship graph in step with it, so callers never mutate
    three independent copies of the question list.

Key Classes:
    - BankConfig: Which indices to maintain (immutable)
    - Capability: Query kinds a bank supports
    - QuestionBank: Repository + index maintenance + exam generation

Key Functions:
    - create_default_bank(): Bank seeded with the bundled sample questions

Used By:
    - cli
    - integration tests
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Protocol

from exam_toolkit import config as defaults
from exam_toolkit.core.models import (
    Difficulty,
    ExamConfig,
    ExamResult,
    Question,
    QuestionCounts,
    Topic,
)
from exam_toolkit.selection import generate_exam

from .graph import RelationshipGraph
from .repository import QuestionRepository
from .topic_tree import TopicNode, TopicTree

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Query kinds offered by a QuestionBank."""

    BY_ID = "by_id"
    BY_TOPIC = "by_topic"
    BY_DIFFICULTY = "by_difficulty"
    HIERARCHY = "hierarchy"
    RELATED = "related"


class QuestionIndex(Protocol):
    """Auxiliary index maintained alongside the repository."""

    def add_question(self, question: Question) -> bool: ...

    def remove_question(self, question_id: str) -> bool: ...


@dataclass(frozen=True)
class BankConfig:
    """
    Configuration for a question bank (immutable).

    Attributes:
        enable_topic_tree: Maintain the topic hierarchy index
        enable_graph: Maintain the relationship graph index
        max_related_edges: Peers linked per insertion in the graph
        seed: Seed for the graph's peer sampling (None = OS entropy)
        load_samples: Seed the bank with the bundled sample questions
    """

    enable_topic_tree: bool = True
    enable_graph: bool = True
    max_related_edges: int = defaults.MAX_INITIAL_RELATED_EDGES
    seed: Optional[int] = None
    load_samples: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_related_edges < 0:
            raise ValueError(
                f"max_related_edges must be non-negative: {self.max_related_edges}"
            )


class QuestionBank:
    """
    Question store with consistent auxiliary indices.

    The repository is the source of truth: a question reaches the
    indices only after the repository accepts it, and removal cascades
    from the repository to every index.

    Example:
        >>> bank = QuestionBank.from_config(BankConfig(seed=1, load_samples=True))
        >>> bank.counts().total
        10
        >>> bank.related("3")
        []
    """

    def __init__(
        self,
        repository: Optional[QuestionRepository] = None,
        topic_tree: Optional[TopicTree] = None,
        graph: Optional[RelationshipGraph] = None,
    ) -> None:
        self.repository = repository if repository is not None else QuestionRepository()
        self.topic_tree = topic_tree
        self.graph = graph

        # Mirror a pre-populated repository into the indices
        for question in self.repository.get_all():
            for index in self._indices():
                index.add_question(question)

    @classmethod
    def from_config(cls, bank_config: BankConfig) -> QuestionBank:
        """
        Build a bank from a BankConfig.

        Returns:
            New QuestionBank, optionally seeded with sample questions
        """
        topic_tree = TopicTree() if bank_config.enable_topic_tree else None
        graph = (
            RelationshipGraph(
                rng=random.Random(bank_config.seed),
                max_initial_edges=bank_config.max_related_edges,
            )
            if bank_config.enable_graph else None
        )
        bank = cls(topic_tree=topic_tree, graph=graph)

        if bank_config.load_samples:
            from .samples import load_sample_questions

            added = bank.add_many(load_sample_questions())
            logger.info(f"Seeded question bank with {added} sample questions")
        return bank

    def _indices(self) -> List[QuestionIndex]:
        return [index for index in (self.topic_tree, self.graph) if index is not None]

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        """Query kinds this bank can answer."""
        caps = {Capability.BY_ID, Capability.BY_TOPIC, Capability.BY_DIFFICULTY}
        if self.topic_tree is not None:
            caps.add(Capability.HIERARCHY)
        if self.graph is not None:
            caps.add(Capability.RELATED)
        return frozenset(caps)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, question: Question) -> bool:
        """
        Add a question to the repository and every index.

        Returns:
            False if the id is already stored (indices untouched)
        """
        if not self.repository.add(question):
            return False
        for index in self._indices():
            index.add_question(question)
        return True

    def add_many(self, questions: Iterable[Question]) -> int:
        """
        Add several questions.

        Returns:
            Number of questions actually added
        """
        return sum(1 for q in questions if self.add(q))

    def remove(self, question_id: str) -> bool:
        """
        Remove a question everywhere.

        Returns:
            False if the id is unknown (no state change)
        """
        if not self.repository.remove(question_id):
            return False
        for index in self._indices():
            index.remove_question(question_id)
        return True

    def replace(self, question: Question) -> bool:
        """
        Replace the stored question that has the same id.

        Questions are immutable, so an update is a remove and reinsert.

        Returns:
            False if no question with that id exists
        """
        if not self.remove(question.id):
            return False
        return self.add(question)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def get_by_id(self, question_id: str) -> Optional[Question]:
        return self.repository.get_by_id(question_id)

    def get(self, topic: Topic, difficulty: Difficulty) -> List[Question]:
        return self.repository.get(topic, difficulty)

    def get_by_topic(self, topic: Topic) -> List[Question]:
        return self.repository.get_by_topic(topic)

    def get_by_difficulty(self, difficulty: Difficulty) -> List[Question]:
        return self.repository.get_by_difficulty(difficulty)

    def get_all(self) -> List[Question]:
        return self.repository.get_all()

    def counts(self) -> QuestionCounts:
        return self.repository.counts()

    def related(
        self, question_id: str, max_depth: int = defaults.DEFAULT_RELATED_DEPTH
    ) -> List[Question]:
        """
        Questions related to `question_id` via the relationship graph.

        Returns:
            BFS-ordered related questions; empty without a graph index
        """
        if self.graph is None:
            logger.debug("Related-question query on a bank without a graph index")
            return []
        return self.graph.get_related(question_id, max_depth)

    def find_topic_node(self, name: str) -> Optional[TopicNode]:
        """Topic hierarchy node by name; None without a hierarchy index."""
        if self.topic_tree is None:
            return None
        return self.topic_tree.find_node_by_name(name)

    # ─────────────────────────────────────────────────────────────────────────
    # Exam Generation
    # ─────────────────────────────────────────────────────────────────────────

    def generate_exam(
        self, exam_config: ExamConfig, rng: Optional[random.Random] = None
    ) -> ExamResult:
        """Generate an exam from this bank's questions."""
        return generate_exam(self, exam_config, rng=rng)

    def __len__(self) -> int:
        return len(self.repository)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self.repository

    def __repr__(self) -> str:
        caps = ", ".join(sorted(c.value for c in self.capabilities))
        return f"QuestionBank(questions={len(self)}, capabilities=[{caps}])"


def create_default_bank(seed: Optional[int] = None) -> QuestionBank:
    """
    Bank with both indices, seeded with the bundled sample questions.

    Args:
        seed: Seed for relationship graph sampling
    """
    return QuestionBank.from_config(BankConfig(seed=seed, load_samples=True))
