"""Short string, greedy and number-theory problems."""

from __future__ import annotations

from itertools import accumulate
from math import isqrt
from typing import Optional, Sequence


def to_singular(word: str) -> str:
    """Replace the two-letter ending of ``word`` with ``i``."""
    if len(word) < 2:
        raise ValueError("word must have at least two characters")
    return word[:-2] + "i"


def min_length_after_merges(word: str) -> int:
    """Return 1 if two adjacent letters are equal, else the word's length."""
    if any(a == b for a, b in zip(word, word[1:])):
        return 1
    return len(word)


def can_sort_by_flipping(values: Sequence[int], pivot: int) -> bool:
    """Tell whether replacing some values ``a`` by ``pivot - a`` can make the
    sequence non-decreasing."""
    previous: Optional[int] = None
    for value in values:
        low, high = sorted((value, pivot - value))
        if previous is None or previous <= low:
            previous = low
        elif previous <= high:
            previous = high
        else:
            return False
    return True


def max_concatenated_score(arrays: Sequence[Sequence[int]]) -> int:
    """Return the largest sum of prefix sums over all orders of concatenation."""
    if not arrays:
        return 0
    m = len(arrays[0])
    if any(len(array) != m for array in arrays):
        raise ValueError("all arrays must have the same length")
    own_scores = sum(value * (m - j) for array in arrays for j, value in enumerate(array))
    weights = sorted(m * sum(array) for array in arrays)
    return own_scores + sum(rank * weight for rank, weight in enumerate(weights))


def _is_square(value: int) -> bool:
    return value >= 0 and isqrt(value) ** 2 == value


def square_free_permutation(n: int) -> Optional[list[int]]:
    """Return a permutation of 1..n with no prefix sum a perfect square, or
    None when the total sum is itself a square."""
    if n < 1:
        raise ValueError("n must be positive")
    if _is_square(n * (n + 1) // 2):
        return None
    result = [0] * (n + 1)
    total = 0
    current = 1
    while current <= n:
        total += current
        if not _is_square(total) or current == n:
            result[current] = current
            current += 1
        else:
            total += current + 1
            result[current] = current + 1
            result[current + 1] = current
            current += 2
    return result[1:]


def is_quiet_moment(awake: int, asleep: int, moment: int) -> bool:
    """Tell whether ``moment`` falls in the asleep part of a repeating cycle
    of ``awake`` units followed by ``asleep`` units."""
    if awake + asleep <= 0:
        raise ValueError("cycle length must be positive")
    return moment % (awake + asleep) >= awake


__all__ = [
    "to_singular",
    "min_length_after_merges",
    "can_sort_by_flipping",
    "max_concatenated_score",
    "square_free_permutation",
    "is_quiet_moment",
]