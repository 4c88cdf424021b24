"""
Serialization Utilities

Provides to/from dict and JSONL utilities for questions.

- `serialize_question` / `deserialize_question` wrap the model's
  `to_dict()` / `from_dict()` with validation on the way in.
- `load_questions_jsonl` reads one question object per line, used to
  seed a bank from a file. The bank itself keeps no durable state.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import Question
from ..schemas.validator import validate_question, ValidationError


logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    The output can be written to JSON and will pass strict validation.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before deserializing
        strict: Use full JSON Schema validation (implies validate)

    Returns:
        Question instance

    Raises:
        ValidationError: If validation is enabled and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate or strict:
        validate_question(data, strict=strict)
    return Question.from_dict(data)


def deserialize_questions(
    items: Iterable[dict[str, Any]],
    *,
    validate: bool = True,
) -> list[Question]:
    """Deserialize a sequence of question dictionaries."""
    return [deserialize_question(item, validate=validate) for item in items]


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_jsonl(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Question]:
    """
    Load questions from a JSONL file.

    Blank lines and lines starting with '#' are skipped.

    Args:
        path: Path to a .jsonl file
        validate: Whether to validate each question
        strict: Use full JSON Schema validation

    Returns:
        List of Question instances in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the path is not a readable file, or any line
            is not UTF-8, malformed or invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")
    if not path.is_file():
        raise ValidationError(f"Not a regular file: {path}", path=str(path))

    try:
        f = open(path, "rb")
    except OSError as e:
        raise ValidationError(f"Cannot open questions file: {e}", path=str(path)) from e

    questions = []
    with f:
        # Decode per line so encoding errors carry a line number
        for line_no, raw in enumerate(f, 1):
            try:
                line = raw.decode("utf-8").strip()
            except UnicodeDecodeError as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)]
                ) from e
            if not line or line.startswith("#"):
                continue

            try:
                data = json.loads(line)
                question = deserialize_question(data, validate=validate, strict=strict)
                questions.append(question)
            except (json.JSONDecodeError, ValidationError, ValueError, KeyError) as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)]
                )

    logger.debug(f"Loaded {len(questions)} questions from {path}")
    return questions
