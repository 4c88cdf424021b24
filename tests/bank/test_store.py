"""
Unit tests for QuestionBank and BankConfig.

Verified: 2026-10-18
"""

import pytest

from exam_toolkit.bank import (
    BankConfig,
    Capability,
    QuestionBank,
    QuestionRepository,
    RelationshipGraph,
    TopicTree,
    create_default_bank,
)
from exam_toolkit.core.models import Difficulty, ExamConfig, Question, Topic


def make_question(qid: str, topic: Topic = Topic.RECURSION, difficulty: Difficulty = Difficulty.HARD) -> Question:
    """Helper to create test questions."""
    return Question(id=qid, text=f"Question {qid}", difficulty=difficulty, topic=topic)


class TestBankConfig:
    """Tests for BankConfig."""

    def test_init_when_negative_edges_then_raises(self):
        with pytest.raises(ValueError, match="max_related_edges"):
            BankConfig(max_related_edges=-1)

    def test_from_config_when_indices_disabled_then_base_capabilities(self):
        bank = QuestionBank.from_config(BankConfig(enable_topic_tree=False, enable_graph=False))

        assert bank.capabilities == frozenset(
            {Capability.BY_ID, Capability.BY_TOPIC, Capability.BY_DIFFICULTY}
        )

    def test_from_config_when_defaults_then_all_capabilities(self):
        bank = QuestionBank.from_config(BankConfig())

        assert bank.capabilities == frozenset(Capability)
        assert len(bank) == 0


class TestConsistency:
    """The repository and both indices agree after every mutation."""

    @pytest.fixture
    def bank(self):
        return create_default_bank(seed=3)

    def test_add_when_new_then_present_in_every_index(self, bank):
        q = make_question("new", topic=Topic.RECURSION)

        assert bank.add(q) is True

        assert bank.get_by_id("new") is q
        assert "new" in bank.topic_tree
        assert "new" in bank.graph
        # Only other Recursion question is "8"
        assert bank.graph.neighbors("new") == ["8"]

    def test_add_when_duplicate_then_indices_untouched(self, bank):
        duplicate = make_question("1", topic=Topic.GRAPHS)

        assert bank.add(duplicate) is False

        assert bank.topic_tree.get_questions_by_topic("Graphs") == bank.get_by_topic(Topic.GRAPHS)
        assert bank.graph.get_question("1").topic == Topic.SEARCHING
        assert len(bank.topic_tree) == len(bank) == len(bank.graph) == 10

    def test_remove_when_known_then_cascades(self, bank):
        bank.add(make_question("extra", topic=Topic.GRAPHS))

        assert bank.remove("5") is True

        assert "5" not in bank
        assert "5" not in bank.topic_tree
        assert "5" not in bank.graph
        assert bank.graph.neighbors("extra") == []

    def test_remove_when_unknown_then_false(self, bank):
        assert bank.remove("nope") is False
        assert len(bank) == 10

    def test_replace_when_known_then_updated_everywhere(self, bank):
        updated = Question(id="2", text="Reverse an array in place.",
                           difficulty=Difficulty.MEDIUM, topic=Topic.ARRAYS)

        assert bank.replace(updated) is True

        assert bank.get_by_id("2") is updated
        assert bank.get(Topic.ARRAYS, Difficulty.EASY) == []
        assert bank.topic_tree.get_questions_by_topic("Arrays") == [updated]

    def test_replace_when_unknown_then_false(self, bank):
        assert bank.replace(make_question("ghost")) is False
        assert "ghost" not in bank

    def test_counts_when_indices_compared_then_agree(self, bank):
        counts = bank.counts()

        assert counts.total == bank.graph.get_question_counts().total
        assert counts.by_difficulty == bank.topic_tree.get_question_counts().by_difficulty


class TestQueries:
    """Tests for QuestionBank queries."""

    def test_related_when_no_graph_then_empty(self):
        bank = QuestionBank.from_config(BankConfig(enable_graph=False, load_samples=True))

        assert bank.related("1") == []

    def test_related_when_same_topic_questions_then_found(self):
        bank = QuestionBank.from_config(BankConfig(seed=1))
        bank.add(make_question("a"))
        bank.add(make_question("b"))

        assert [q.id for q in bank.related("a")] == ["b"]

    def test_find_topic_node_when_no_tree_then_none(self):
        bank = QuestionBank.from_config(BankConfig(enable_topic_tree=False))

        assert bank.find_topic_node("Graphs") is None

    def test_find_topic_node_when_tree_then_node(self):
        bank = create_default_bank()

        node = bank.find_topic_node("Graphs")

        assert [q.id for q in node.questions] == ["5"]

    def test_init_when_repository_prepopulated_then_indices_mirrored(self, sample_questions):
        repo = QuestionRepository()
        for q in sample_questions:
            repo.add(q)

        bank = QuestionBank(repository=repo, topic_tree=TopicTree(), graph=RelationshipGraph())

        assert len(bank.topic_tree) == 10
        assert len(bank.graph) == 10

    def test_generate_exam_when_seeded_then_reproducible(self):
        bank = create_default_bank(seed=0)
        config = ExamConfig(num_questions=6, seed=99)

        first = bank.generate_exam(config)
        second = bank.generate_exam(config)

        assert first.question_ids == second.question_ids
        assert first.question_count == 6
