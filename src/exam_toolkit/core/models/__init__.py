"""
Core Models Package

Immutable, validated data models shared by the bank and the selector.

All models in this package are frozen dataclasses. Questions are never
edited in place: an update is a remove followed by a reinsert.
"""

from .taxonomy import Difficulty, Topic
from .questions import Question
from .counts import QuestionCounts
from .exam import ConfigurationError, DifficultyWeights, ExamConfig, ExamResult

__all__ = [
    "Difficulty",
    "Topic",
    "Question",
    "QuestionCounts",
    "ConfigurationError",
    "DifficultyWeights",
    "ExamConfig",
    "ExamResult",
]
