"""
Module: selection

Purpose:
    Exam selection algorithm. Turns an ExamConfig into a balanced,
    topic-diverse list of questions drawn from a question store.

Key Functions:
    - generate_exam(): Main entry point for exam generation
    - calculate_distribution(): Per-difficulty target counts
    - select_with_diversity(): Topic-balanced sampling
    - sample_without_replacement(): Seedable uniform sampling

Key Classes:
    - ExamSelector: Main selection orchestrator

Used By:
    - bank.store.QuestionBank
    - cli
"""

from .sampling import sample_without_replacement
from .distribution import calculate_distribution, count_by_difficulty, round_half_up
from .diversity import select_with_diversity
from .selector import ExamSelector, QuestionSource, generate_exam

__all__ = [
    "sample_without_replacement",
    "calculate_distribution",
    "count_by_difficulty",
    "round_half_up",
    "select_with_diversity",
    "ExamSelector",
    "QuestionSource",
    "generate_exam",
]
