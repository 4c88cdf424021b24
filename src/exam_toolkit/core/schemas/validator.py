"""
Schema Validation Utilities

Validates question dictionaries before they become Question objects.

Two levels:
- Basic (default): required fields, types and enum labels, with loose
  label spellings accepted ("linked_lists").
- Strict: full JSON Schema validation with `jsonschema` against the
  bundled question.schema.json (exact labels, no unknown fields).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from exam_toolkit.common.topics import resolve_difficulty, resolve_topic


QUESTION_SCHEMA_NAME = "question"

_REQUIRED_FIELDS = ("id", "text", "difficulty", "topic")
_OPTIONAL_TEXT_FIELDS = ("answer", "explanation")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: Any, *, strict: bool = False) -> None:
    """
    Validate question data.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question must be an object, got {type(data).__name__}",
            path="",
        )

    missing = [f for f in _REQUIRED_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    for name in ("id", "text"):
        value = data[name]
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(
                f"Invalid {name}: {value!r} (must be a non-empty string)",
                path=name
            )

    try:
        resolve_difficulty(data["difficulty"])
    except ValueError as e:
        raise ValidationError(str(e), path="difficulty")
    try:
        resolve_topic(data["topic"])
    except ValueError as e:
        raise ValidationError(str(e), path="topic")

    options = data.get("options")
    if options is not None:
        if not isinstance(options, list):
            raise ValidationError(
                "options must be a list",
                path="options"
            )
        for i, option in enumerate(options):
            if not isinstance(option, str):
                raise ValidationError(
                    f"Invalid option: {option!r} (must be a string)",
                    path=f"options[{i}]"
                )

    for name in _OPTIONAL_TEXT_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"Invalid {name}: {value!r} (must be a string)",
                path=name
            )

    if strict:
        schema = _load_schema(QUESTION_SCHEMA_NAME)
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )
