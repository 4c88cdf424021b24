"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_question,
    ValidationError,
    QUESTION_SCHEMA_NAME,
)

__all__ = [
    "validate_question",
    "ValidationError",
    "QUESTION_SCHEMA_NAME",
]
