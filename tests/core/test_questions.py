"""
Unit tests for the Question model.

Verified: 2026-10-18
"""

import pytest

from exam_toolkit.core.models import Difficulty, Question, Topic


def make_question(**overrides) -> Question:
    """Helper to create a valid test question."""
    fields = dict(
        id="q1",
        text="What is the time complexity of binary search?",
        difficulty=Difficulty.EASY,
        topic=Topic.SEARCHING,
    )
    fields.update(overrides)
    return Question(**fields)


class TestQuestionValidation:
    """Tests for Question.__post_init__ validation."""

    def test_init_when_valid_then_creates_question(self):
        """Valid fields should create a question."""
        # Act
        q = make_question(options=("O(n)", "O(log n)"), answer="O(log n)")

        # Assert
        assert q.id == "q1"
        assert q.options == ("O(n)", "O(log n)")
        assert q.is_multiple_choice is True

    def test_init_when_empty_id_then_raises_error(self):
        """An empty id should raise ValueError."""
        with pytest.raises(ValueError, match="id must be a non-empty string"):
            make_question(id="")

    def test_init_when_blank_text_then_raises_error(self):
        """Whitespace-only text should raise ValueError."""
        with pytest.raises(ValueError, match="text must be a non-empty string"):
            make_question(text="   ")

    def test_init_when_difficulty_is_string_then_raises_error(self):
        """Difficulty must be a Difficulty member, not a label."""
        with pytest.raises(ValueError, match="difficulty must be a Difficulty"):
            make_question(difficulty="Easy")

    def test_init_when_topic_is_string_then_raises_error(self):
        """Topic must be a Topic member, not a label."""
        with pytest.raises(ValueError, match="topic must be a Topic"):
            make_question(topic="Arrays")

    def test_init_when_options_list_then_converted_to_tuple(self):
        """List options are normalised to a tuple."""
        # Act
        q = make_question(options=["a", "b"])

        # Assert
        assert q.options == ("a", "b")
        hash(q)  # still hashable

    def test_init_when_option_not_string_then_raises_error(self):
        """Non-string options should raise ValueError."""
        with pytest.raises(ValueError, match="options must be strings"):
            make_question(options=("a", 2))

    def test_is_multiple_choice_when_no_options_then_false(self):
        """Free-response questions have no options."""
        assert make_question().is_multiple_choice is False

    def test_question_when_assigning_field_then_raises(self):
        """Questions are immutable."""
        q = make_question()
        with pytest.raises(AttributeError):
            q.text = "changed"


class TestQuestionCreate:
    """Tests for Question.create factory."""

    def test_create_when_called_then_generates_unique_ids(self):
        """Each created question gets a distinct UUID."""
        # Act
        a = Question.create("Reverse a string.", Difficulty.EASY, Topic.STRINGS)
        b = Question.create("Reverse a string.", Difficulty.EASY, Topic.STRINGS)

        # Assert
        assert a.id != b.id
        assert len(a.id) == 36

    def test_create_when_options_given_then_stored_as_tuple(self):
        q = Question.create("Pick one", Difficulty.HARD, Topic.GRAPHS, options=["x", "y"])
        assert q.options == ("x", "y")


class TestQuestionSerialization:
    """Tests for to_dict / from_dict."""

    def test_to_dict_when_optional_fields_absent_then_omitted(self):
        """Absent optional fields are not written."""
        # Act
        d = make_question().to_dict()

        # Assert
        assert d == {
            "id": "q1",
            "text": "What is the time complexity of binary search?",
            "difficulty": "Easy",
            "topic": "Searching",
        }

    def test_from_dict_when_full_payload_then_restores_question(self):
        """from_dict should restore every field."""
        # Arrange
        original = make_question(
            options=("O(n)", "O(log n)"),
            answer="O(log n)",
            explanation="Halves the search space.",
        )

        # Act
        restored = Question.from_dict(original.to_dict())

        # Assert
        assert restored == original

    def test_from_dict_when_loose_labels_then_resolved(self):
        """Loose label spellings resolve to enum members."""
        # Act
        q = Question.from_dict({
            "id": "x",
            "text": "Detect a cycle.",
            "difficulty": "medium",
            "topic": "linked_lists",
        })

        # Assert
        assert q.difficulty is Difficulty.MEDIUM
        assert q.topic is Topic.LINKED_LISTS
