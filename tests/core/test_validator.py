"""
Unit Tests for Schema Validation

Tests for the validator module.
"""

import pytest

from exam_toolkit.core.schemas.validator import validate_question, ValidationError


class TestValidateQuestion:
    """Tests for validate_question function."""

    @pytest.fixture
    def valid_question_data(self) -> dict:
        """Create valid question data for testing."""
        return {
            "id": "1",
            "text": "What is the time complexity of a binary search algorithm?",
            "difficulty": "Easy",
            "topic": "Searching",
            "options": ["O(n)", "O(log n)", "O(n log n)", "O(n²)"],
            "answer": "O(log n)",
        }

    def test_valid_data_passes(self, valid_question_data):
        """Valid data should not raise."""
        validate_question(valid_question_data)
        validate_question(valid_question_data, strict=True)

    def test_not_a_dict_raises(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_question(["id", "text"])

    def test_missing_required_field_raises(self, valid_question_data):
        """Missing required field should raise ValidationError."""
        del valid_question_data["topic"]

        with pytest.raises(ValidationError, match="Missing required fields") as exc_info:
            validate_question(valid_question_data)

        assert exc_info.value.errors == ["Missing field: topic"]

    def test_empty_text_raises(self, valid_question_data):
        valid_question_data["text"] = ""

        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_question_data)

        assert exc_info.value.path == "text"

    def test_unknown_difficulty_raises(self, valid_question_data):
        valid_question_data["difficulty"] = "Impossible"

        with pytest.raises(ValidationError, match="Unknown difficulty") as exc_info:
            validate_question(valid_question_data)

        assert exc_info.value.path == "difficulty"

    def test_unknown_topic_raises(self, valid_question_data):
        valid_question_data["topic"] = "Cooking"

        with pytest.raises(ValidationError, match="Unknown topic"):
            validate_question(valid_question_data)

    def test_non_string_option_raises(self, valid_question_data):
        valid_question_data["options"] = ["a", 3]

        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_question_data)

        assert exc_info.value.path == "options[1]"

    def test_non_string_answer_raises(self, valid_question_data):
        valid_question_data["answer"] = 42

        with pytest.raises(ValidationError, match="Invalid answer"):
            validate_question(valid_question_data)

    def test_loose_label_passes_basic_but_fails_strict(self, valid_question_data):
        """Basic mode accepts loose labels; strict mode requires exact ones."""
        valid_question_data["topic"] = "searching"

        validate_question(valid_question_data)
        with pytest.raises(ValidationError, match="Schema validation failed") as exc_info:
            validate_question(valid_question_data, strict=True)

        assert exc_info.value.path == "topic"

    def test_unknown_field_fails_strict(self, valid_question_data):
        valid_question_data["marks"] = 5

        validate_question(valid_question_data)
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question(valid_question_data, strict=True)
