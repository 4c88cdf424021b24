"""
Module: common.topics

Purpose:
    Helpers for turning user-supplied labels into Topic and Difficulty
    members. Accepts enum members, display labels and loose spellings
    such as "linked_lists" or "dynamic-programming".

Key Functions:
    - normalise_label(): Canonical comparison key for a label
    - resolve_topic(): Label or member -> Topic
    - resolve_difficulty(): Label or member -> Difficulty
    - topic_labels(): Display labels in declaration order

Dependencies:
    - re (std)
    - exam_toolkit.core.models.taxonomy

Used By:
    - core.models.questions.Question.from_dict
    - core.models.exam.ExamConfig
    - cli: argument parsing
"""

from __future__ import annotations

import re
from typing import Dict, List, Union

from exam_toolkit.core.models.taxonomy import Difficulty, Topic


__all__ = [
    "normalise_label",
    "resolve_topic",
    "resolve_difficulty",
    "topic_labels",
    "difficulty_labels",
]


_SEPARATOR_RE = re.compile(r"[\s_\-]+")


def normalise_label(value: str) -> str:
    """
    Normalize a label for comparison.

    Args:
        value: Raw label (e.g., "Linked Lists", "linked_lists", " LINKED-lists ")

    Returns:
        Lowercase label with runs of whitespace, underscores and hyphens
        collapsed to a single space.

    Example:
        >>> normalise_label("dynamic_programming")
        'dynamic programming'
    """
    return _SEPARATOR_RE.sub(" ", value.strip()).lower()


_TOPIC_LOOKUP: Dict[str, Topic] = {}
for _topic in Topic:
    _TOPIC_LOOKUP[normalise_label(_topic.value)] = _topic
    _TOPIC_LOOKUP[normalise_label(_topic.name)] = _topic

_DIFFICULTY_LOOKUP: Dict[str, Difficulty] = {
    normalise_label(d.value): d for d in Difficulty
}


def resolve_topic(value: Union[Topic, str]) -> Topic:
    """
    Resolve a topic label to its Topic member.

    Args:
        value: Topic member, display label or loose spelling

    Returns:
        Matching Topic

    Raises:
        ValueError: If the label matches no topic
    """
    if isinstance(value, Topic):
        return value
    if isinstance(value, str):
        topic = _TOPIC_LOOKUP.get(normalise_label(value))
        if topic is not None:
            return topic
    raise ValueError(
        f"Unknown topic: {value!r} (expected one of {', '.join(topic_labels())})"
    )


def resolve_difficulty(value: Union[Difficulty, str]) -> Difficulty:
    """
    Resolve a difficulty label to its Difficulty member.

    Raises:
        ValueError: If the label matches no difficulty
    """
    if isinstance(value, Difficulty):
        return value
    if isinstance(value, str):
        difficulty = _DIFFICULTY_LOOKUP.get(normalise_label(value))
        if difficulty is not None:
            return difficulty
    raise ValueError(
        f"Unknown difficulty: {value!r} (expected one of {', '.join(difficulty_labels())})"
    )


def topic_labels() -> List[str]:
    """Topic display labels in declaration order."""
    return [t.value for t in Topic]


def difficulty_labels() -> List[str]:
    """Difficulty display labels in canonical order."""
    return [d.value for d in Difficulty]
