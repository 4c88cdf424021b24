"""
Module: selection.sampling

Purpose:
    Uniform random sampling without replacement with an injectable
    random source, so that callers (and tests) control determinism.

Key Functions:
    - sample_without_replacement(): Draw up to `count` distinct items

Used By:
    - selection.diversity: per-topic quotas and gap filling
    - bank.graph: choosing same-topic peers
"""

from __future__ import annotations

import random
from typing import Iterable, List, TypeVar

T = TypeVar("T")


def sample_without_replacement(
    items: Iterable[T],
    count: int,
    rng: random.Random,
) -> List[T]:
    """
    Pick up to `count` items uniformly at random without replacement.

    Copies the candidates, then repeatedly draws an index in
    [0, remaining) and swap-removes that element into the result.

    Args:
        items: Candidates (not modified)
        count: Number of items wanted
        rng: Random source

    Returns:
        Selected items in draw order; shorter than `count` when the
        candidates run out, empty when count <= 0
    """
    pool = list(items)
    result: List[T] = []
    while len(result) < count and pool:
        index = rng.randrange(len(pool))
        # Swap-remove: move the last element into the hole
        pool[index], pool[-1] = pool[-1], pool[index]
        result.append(pool.pop())
    return result
