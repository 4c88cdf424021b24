"""
Module: bank.graph

Purpose:
    Undirected relationship graph over question ids. When a question is
    inserted it is linked to up to three randomly chosen questions of the
    same topic; related questions are found by breadth-first expansion.

Key Classes:
    - RelationshipGraph: Adjacency-list graph with bounded-depth BFS

Invariants:
    - Edges are symmetric: b in neighbors(a) iff a in neighbors(b)
    - Edges only connect questions sharing a topic
    - At most max_initial_edges edges are created per insertion; a node's
      degree can still grow past that as later questions link to it

Dependencies:
    - collections.deque (std)
    - random (std)
    - selection.sampling: sample_without_replacement

Used By:
    - bank.store.QuestionBank (RELATED capability)
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Dict, Iterator, List, Optional

from exam_toolkit import config
from exam_toolkit.core.models import Difficulty, Question, QuestionCounts, Topic
from exam_toolkit.selection.sampling import sample_without_replacement

logger = logging.getLogger(__name__)


class RelationshipGraph:
    """
    Graph of same-topic question relationships.

    Args:
        rng: Random source for peer sampling (seed it for reproducible edges)
        max_initial_edges: Peers linked when a question is inserted

    Example:
        >>> graph = RelationshipGraph(rng=random.Random(7))
        >>> for q in questions:
        ...     graph.add_question(q)
        >>> graph.get_related("3", max_depth=1)  # direct neighbours only
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_initial_edges: int = config.MAX_INITIAL_RELATED_EDGES,
    ) -> None:
        if max_initial_edges < 0:
            raise ValueError(f"max_initial_edges must be non-negative: {max_initial_edges}")
        self._rng = rng if rng is not None else random.Random()
        self._max_initial_edges = max_initial_edges
        self._nodes: Dict[str, Question] = {}
        self._edges: Dict[str, List[str]] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def add_question(self, question: Question) -> bool:
        """
        Add a question node and link it to same-topic peers.

        Returns:
            False if the id is already a node
        """
        if question.id in self._nodes:
            return False

        self._nodes[question.id] = question
        self._edges[question.id] = []
        self._link_same_topic(question)
        return True

    def _link_same_topic(self, question: Question) -> None:
        """Create symmetric edges to randomly sampled same-topic questions."""
        peers = [
            qid for qid, q in self._nodes.items()
            if qid != question.id and q.topic == question.topic
        ]
        selected = sample_without_replacement(peers, self._max_initial_edges, self._rng)

        for peer_id in selected:
            self._add_edge(question.id, peer_id)

        if selected:
            logger.debug(f"Linked question {question.id} to {len(selected)} peers")

    def _add_edge(self, a: str, b: str) -> None:
        if b not in self._edges[a]:
            self._edges[a].append(b)
        if a not in self._edges[b]:
            self._edges[b].append(a)

    def remove_question(self, question_id: str) -> bool:
        """
        Remove a node and every edge touching it.

        Returns:
            False if the id is not a node
        """
        if question_id not in self._nodes:
            return False

        del self._nodes[question_id]
        del self._edges[question_id]
        for node_id, neighbors in self._edges.items():
            if question_id in neighbors:
                self._edges[node_id] = [n for n in neighbors if n != question_id]
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    def get_related(
        self, question_id: str, max_depth: int = config.DEFAULT_RELATED_DEPTH
    ) -> List[Question]:
        """
        Breadth-first expansion from a question.

        Args:
            question_id: Starting question
            max_depth: Maximum number of hops (0 returns nothing)

        Returns:
            Related questions in discovery order, each at most once,
            excluding the start. Empty if the id is unknown.
        """
        if question_id not in self._nodes:
            return []

        visited = {question_id}
        result: List[Question] = []
        queue = deque([(question_id, 0)])

        while queue:
            node_id, depth = queue.popleft()
            if depth > 0:
                result.append(self._nodes[node_id])
            if depth >= max_depth:
                continue
            for neighbor_id in self._edges.get(node_id, ()):
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    queue.append((neighbor_id, depth + 1))

        return result

    def neighbors(self, question_id: str) -> List[str]:
        """Ids directly linked to a question (copy; empty if unknown)."""
        return list(self._edges.get(question_id, ()))

    def has_edge(self, a: str, b: str) -> bool:
        return b in self._edges.get(a, ())

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(n) for n in self._edges.values()) // 2

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def get_question(self, question_id: str) -> Optional[Question]:
        return self._nodes.get(question_id)

    def get_all_questions(self) -> List[Question]:
        """All nodes in insertion order."""
        return list(self._nodes.values())

    def get_questions_by_topic(self, topic: Topic) -> List[Question]:
        return [q for q in self._nodes.values() if q.topic == topic]

    def get_questions_by_difficulty(self, difficulty: Difficulty) -> List[Question]:
        return [q for q in self._nodes.values() if q.difficulty == difficulty]

    def get_question_counts(self) -> QuestionCounts:
        """Counts with every topic and difficulty present."""
        return QuestionCounts.tally(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._nodes

    def __iter__(self) -> Iterator[Question]:
        return iter(list(self._nodes.values()))
