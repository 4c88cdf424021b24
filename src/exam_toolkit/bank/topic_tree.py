"""
Module: bank.topic_tree

Purpose:
    Hierarchical topic index. A root node ("All Topics") holds one child
    per Topic; further sub-topic nodes can be attached anywhere. Each
    node lists the questions filed directly under it, and the root keeps
    a flat aggregate of every filed question.

Key Classes:
    - TopicNode: Mutable tree node
    - TopicTree: Node search (DFS by id, BFS by name) and question filing

Algorithm:
    - find_node_by_id: recursive depth-first pre-order search
    - find_node_by_name: breadth-first search from the root
    - remove_question: pre-order walk over every node, no early exit

Dependencies:
    - collections.deque (std)
    - uuid (std)

Used By:
    - bank.store.QuestionBank (HIERARCHY capability)
"""

from __future__ import annotations

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from exam_toolkit import config
from exam_toolkit.core.models import Difficulty, Question, QuestionCounts, Topic

logger = logging.getLogger(__name__)


@dataclass
class TopicNode:
    """
    Node in the topic hierarchy.

    Attributes:
        id: Node id ("root" for the root, UUID4 otherwise)
        name: Display name, e.g. "Graphs"
        children: Child nodes in insertion order
        questions: Questions filed directly under this node
    """

    id: str
    name: str
    children: List[TopicNode] = field(default_factory=list)
    questions: List[Question] = field(default_factory=list)

    def iter_nodes(self) -> Iterator[TopicNode]:
        """Yield this node then every descendant, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def has_question(self, question_id: str) -> bool:
        return any(q.id == question_id for q in self.questions)

    def __repr__(self) -> str:
        return (
            f"TopicNode({self.name!r}, children={len(self.children)}, "
            f"questions={len(self.questions)})"
        )


class TopicTree:
    """
    Topic hierarchy with per-node question lists.

    The root's question list is a flat union of everything filed in the
    tree; it holds shared references, not copies.

    Example:
        >>> tree = TopicTree()
        >>> tree.add_question(question)  # filed under question.topic
        True
        >>> tree.find_node_by_name("Searching").questions
        [Question('1', topic='Searching', difficulty='Easy')]
    """

    def __init__(self) -> None:
        """Create the root and one child per Topic."""
        self.root = TopicNode(id=config.ROOT_NODE_ID, name=config.ROOT_NODE_NAME)
        for topic in Topic:
            self.add_topic_node(topic.value)

    # ─────────────────────────────────────────────────────────────────────────
    # Structure
    # ─────────────────────────────────────────────────────────────────────────

    def add_topic_node(self, name: str, parent_id: str = config.ROOT_NODE_ID) -> TopicNode:
        """
        Create a topic node under a parent.

        Args:
            name: Display name of the new node
            parent_id: Id of the parent node (root by default)

        Returns:
            The new node. If the parent does not exist the node is
            returned detached and an error is logged.
        """
        node = TopicNode(id=str(uuid.uuid4()), name=name)
        parent = self.find_node_by_id(parent_id)
        if parent is not None:
            parent.children.append(node)
        else:
            logger.error(f"Parent node with ID {parent_id} not found")
        return node

    def find_node_by_id(
        self, node_id: str, start: Optional[TopicNode] = None
    ) -> Optional[TopicNode]:
        """
        Depth-first (pre-order) search by node id.

        Args:
            node_id: Id to look for
            start: Node to search from (root by default)

        Returns:
            Matching node or None
        """
        current = self.root if start is None else start
        if current.id == node_id:
            return current
        for child in current.children:
            found = self.find_node_by_id(node_id, child)
            if found is not None:
                return found
        return None

    def find_node_by_name(self, name: str) -> Optional[TopicNode]:
        """
        Breadth-first search by node name, starting at the root.

        Returns:
            First matching node in level order, or None
        """
        queue = deque([self.root])
        while queue:
            current = queue.popleft()
            if current.name == name:
                return current
            queue.extend(current.children)
        return None

    def iter_nodes(self) -> Iterator[TopicNode]:
        """Every node in the tree, pre-order from the root."""
        return self.root.iter_nodes()

    # ─────────────────────────────────────────────────────────────────────────
    # Questions
    # ─────────────────────────────────────────────────────────────────────────

    def add_question(self, question: Question, topic_name: Optional[str] = None) -> bool:
        """
        File a question under a topic node.

        Args:
            question: Question to file
            topic_name: Node name to file under (defaults to the question's topic)

        Returns:
            False if the node does not exist or already holds this id
        """
        name = topic_name if topic_name is not None else question.topic.value
        node = self.find_node_by_name(name)
        if node is None:
            logger.debug(f"No topic node named {name!r} for question {question.id}")
            return False
        if node.has_question(question.id):
            return False

        node.questions.append(question)
        self.root.questions.append(question)
        return True

    def remove_question(self, question_id: str) -> bool:
        """
        Remove a question from the root aggregate and from every node.

        Returns:
            True if the question was in the root aggregate
        """
        removed = False
        for index, q in enumerate(self.root.questions):
            if q.id == question_id:
                del self.root.questions[index]
                removed = True
                break

        # Visit every node; a question may have been filed under more than one
        for node in self.root.iter_nodes():
            node.questions[:] = [q for q in node.questions if q.id != question_id]

        return removed

    def get_questions_by_topic(self, topic_name: str) -> List[Question]:
        """Questions filed directly under the named node (copy)."""
        node = self.find_node_by_name(topic_name)
        return list(node.questions) if node is not None else []

    def get_questions_by_difficulty(self, difficulty: Difficulty) -> List[Question]:
        """Questions of a difficulty from the root aggregate."""
        return [q for q in self.root.questions if q.difficulty == difficulty]

    def get_all_questions(self) -> List[Question]:
        """Copy of the root aggregate."""
        return list(self.root.questions)

    def get_question_counts(self) -> QuestionCounts:
        """
        Count questions per node and per difficulty.

        Returns:
            QuestionCounts where by_topic maps each non-root node name to
            the length of its direct question list
        """
        by_difficulty: Dict[Difficulty, int] = {d: 0 for d in Difficulty}
        for q in self.root.questions:
            by_difficulty[q.difficulty] += 1

        by_topic: Dict[str, int] = {}
        for node in self.root.iter_nodes():
            if node is not self.root:
                by_topic[node.name] = len(node.questions)

        return QuestionCounts(
            total=len(self.root.questions),
            by_topic=by_topic,
            by_difficulty=by_difficulty,
        )

    def __len__(self) -> int:
        return len(self.root.questions)

    def __contains__(self, question_id: object) -> bool:
        return any(q.id == question_id for q in self.root.questions)
