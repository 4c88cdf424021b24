"""
Module: taxonomy

Purpose:
    Closed enumerations used to classify questions: the three difficulty
    levels and the ten subject topics. Both are string-valued so that a
    member compares equal to its display label.

Key Classes:
    - Difficulty: Easy / Medium / Hard
    - Topic: The ten fixed subject-matter categories

Used By:
    - core.models.questions.Question
    - bank.repository, bank.topic_tree, bank.graph
    - selection.distribution, selection.selector
"""

from __future__ import annotations

from enum import Enum


class Difficulty(str, Enum):
    """
    Difficulty level of a question.

    Declaration order (Easy, Medium, Hard) is the canonical order used
    for bucket concatenation and exam assembly.

    Example:
        >>> Difficulty.EASY == "Easy"
        True
    """

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    def __str__(self) -> str:
        return self.value


class Topic(str, Enum):
    """
    Subject-matter category of a question.

    Declaration order is the repository's topic iteration order.
    """

    ARRAYS = "Arrays"
    STRINGS = "Strings"
    LINKED_LISTS = "Linked Lists"
    TREES = "Trees"
    GRAPHS = "Graphs"
    DYNAMIC_PROGRAMMING = "Dynamic Programming"
    SORTING = "Sorting"
    SEARCHING = "Searching"
    RECURSION = "Recursion"
    GREEDY_ALGORITHMS = "Greedy Algorithms"

    def __str__(self) -> str:
        return self.value


DIFFICULTY_ORDER: tuple[Difficulty, ...] = tuple(Difficulty)
TOPIC_ORDER: tuple[Topic, ...] = tuple(Topic)

# Trimming order when rounding overshoots the requested question count
TRIM_ORDER: tuple[Difficulty, ...] = (Difficulty.HARD, Difficulty.MEDIUM, Difficulty.EASY)
