"""
Module: selection.diversity

Purpose:
    Diversity-aware sampling: spread a fixed number of picks across the
    requested topics instead of sampling uniformly from the whole pool.

Key Functions:
    - select_with_diversity(): Quota-based topic-balanced selection

Algorithm:
    1. If the pool holds no more than `count` questions, return them all
    2. Group questions by topic, keeping only requested topics that have
       at least one question, in request order
    3. base = count // n_topics, remainder = count % n_topics
    4. Per topic take min(base, available), plus one while the remainder
       lasts and the topic has more to give; sample uniformly
    5. Fill any gap uniformly from questions not yet selected

    Balancing only happens when topics are explicitly requested. With no
    requested topics step 4 is skipped and step 5 supplies every pick.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Sequence

from exam_toolkit.core.models import Question, Topic

from .sampling import sample_without_replacement

logger = logging.getLogger(__name__)


def select_with_diversity(
    questions: Sequence[Question],
    count: int,
    topics: Sequence[Topic],
    rng: random.Random,
) -> List[Question]:
    """
    Select `count` questions balanced across `topics`.

    Args:
        questions: Candidate questions (typically one difficulty level)
        count: Number of questions wanted
        topics: Requested topics in declaration order (empty = no balancing)
        rng: Random source

    Returns:
        Selected questions: per-topic picks in topic order, then gap
        fill. Empty if topics were requested but none has a question.
    """
    if len(questions) <= count:
        return list(questions)

    ordered_topics = list(dict.fromkeys(topics))
    if not ordered_topics:
        return sample_without_replacement(questions, count, rng)

    by_topic: Dict[Topic, List[Question]] = {t: [] for t in ordered_topics}
    for q in questions:
        if q.topic in by_topic:
            by_topic[q.topic].append(q)

    topics_with_questions = [t for t in ordered_topics if by_topic[t]]
    if not topics_with_questions:
        logger.debug("No requested topic has questions in this pool")
        return []

    base_per_topic = count // len(topics_with_questions)
    remainder = count % len(topics_with_questions)

    selected: List[Question] = []
    for topic in topics_with_questions:
        topic_questions = by_topic[topic]
        topic_count = min(base_per_topic, len(topic_questions))
        if remainder > 0 and len(topic_questions) > topic_count:
            topic_count += 1
            remainder -= 1
        selected.extend(sample_without_replacement(topic_questions, topic_count, rng))

    if len(selected) < count:
        chosen = {q.id for q in selected}
        leftovers = [q for q in questions if q.id not in chosen]
        gap = count - len(selected)
        logger.debug(f"Filling {gap} slots outside topic quotas")
        selected.extend(sample_without_replacement(leftovers, gap, rng))

    return selected
