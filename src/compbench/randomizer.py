"""Execution-order randomization.

Tool order is reshuffled on every run so that cache warmth and scheduling
effects do not always favour the same tool.
"""

import random
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def permute(items: Iterable[T], rng: random.Random | None = None) -> tuple[T, ...]:
    """Return a uniformly random permutation of items (Fisher-Yates).

    The input is copied, never modified. Without an explicit rng each call
    draws from the OS entropy source, so orders cannot be reproduced.

    Args:
        items: Elements to shuffle
        rng: Random source; tests pass a seeded random.Random

    Returns:
        New tuple holding the same elements in random order
    """
    if rng is None:
        rng = random.SystemRandom()

    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return tuple(result)


def identity(items: Iterable[T], rng: random.Random | None = None) -> tuple[T, ...]:
    """Order-preserving stand-in for permute, used when shuffling is off."""
    return tuple(items)
