"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .topics import (
    difficulty_labels,
    normalise_label,
    resolve_difficulty,
    resolve_topic,
    topic_labels,
)

__all__ = [
    "difficulty_labels",
    "normalise_label",
    "resolve_difficulty",
    "resolve_topic",
    "topic_labels",
]
