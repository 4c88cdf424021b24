"""
Utilities Package

Serialization helpers for core models.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    deserialize_questions,
    load_questions_jsonl,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "deserialize_questions",
    "load_questions_jsonl",
]
