"""
Module: bank

Purpose:
    In-memory question storage. The repository is the canonical store;
    the topic tree and relationship graph are optional alternate views
    kept consistent by QuestionBank.

Key Classes:
    - QuestionRepository: Topic/difficulty bucketed store
    - TopicTree, TopicNode: Topic hierarchy (DFS/BFS search)
    - RelationshipGraph: Same-topic graph (bounded-depth BFS)
    - QuestionBank, BankConfig, Capability: Unified store

Key Functions:
    - create_default_bank(): Bank seeded with the sample questions
    - load_sample_questions(): Bundled sample data
"""

from .repository import QuestionRepository
from .topic_tree import TopicNode, TopicTree
from .graph import RelationshipGraph
from .store import BankConfig, Capability, QuestionBank, create_default_bank
from .samples import load_sample_questions

__all__ = [
    "QuestionRepository",
    "TopicNode",
    "TopicTree",
    "RelationshipGraph",
    "BankConfig",
    "Capability",
    "QuestionBank",
    "create_default_bank",
    "load_sample_questions",
]
