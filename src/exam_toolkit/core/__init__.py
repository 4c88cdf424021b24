"""
Exam Toolkit Core Package

Shared data models, schema validation and serialization helpers.
These models are the single source of truth for the bank and selection
packages.
"""

from .models import (
    ConfigurationError,
    Difficulty,
    DifficultyWeights,
    ExamConfig,
    ExamResult,
    Question,
    QuestionCounts,
    Topic,
)

__all__ = [
    "ConfigurationError",
    "Difficulty",
    "DifficultyWeights",
    "ExamConfig",
    "ExamResult",
    "Question",
    "QuestionCounts",
    "Topic",
]
