"""Problems built on prefix and suffix aggregates: sliding windows, remainder
counting, prefix maxima and prefix gcds."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from math import gcd
from typing import Iterable, Optional, Sequence

_DIGITS = "0123456789"
_MODULUS = 2019


def shortest_window_with_all_kinds(text: str) -> int:
    """Return the length of the shortest substring holding every distinct
    character of ``text``."""
    if not text:
        raise ValueError("text must not be empty")
    kinds = len(set(text))
    window: Counter[str] = Counter()
    best = len(text)
    left = 0
    for right, char in enumerate(text):
        window[char] += 1
        while window[text[left]] > 1:
            window[text[left]] -= 1
            left += 1
        if len(window) == kinds:
            best = min(best, right - left + 1)
    return best


def count_multiples_of_2019(digits: str) -> int:
    """Count the substrings of a decimal string whose value is a multiple of 2019."""
    seen: Counter[int] = Counter({0: 1})
    remainder = 0
    power = 1
    count = 0
    for char in reversed(digits):
        if char not in _DIGITS:
            raise ValueError(f"not a decimal digit: {char!r}")
        remainder = (remainder + int(char) * power) % _MODULUS
        count += seen[remainder]
        seen[remainder] += 1
        power = power * 10 % _MODULUS
    return count


def max_running_score(beauty: Sequence[int]) -> int:
    """Return the best value of ``b[i] + b[j] + b[k] - (k - i)`` over
    ``i < j < k``; 0 when there are fewer than three sights."""
    if len(beauty) < 3:
        return 0
    best_left = list(accumulate((value + i for i, value in enumerate(beauty)), max))
    best_right = list(
        accumulate(
            (value - i for i, value in reversed(list(enumerate(beauty)))), max
        )
    )[::-1]
    return max(
        0,
        max(
            left + middle + right
            for left, middle, right in zip(best_left, beauty[1:-1], best_right[2:])
        ),
    )


def max_diamonds_in_two_cases(sizes: Iterable[int], max_difference: int) -> int:
    """Return how many diamonds fit into two display cases when the sizes in
    one case may differ by at most ``max_difference``."""
    if max_difference < 0:
        raise ValueError("max_difference must not be negative")
    ordered = sorted(sizes)
    n = len(ordered)
    reach: list[int] = []
    right = 0
    for left, smallest in enumerate(ordered):
        while right < n and ordered[right] - smallest <= max_difference:
            right += 1
        reach.append(right - left)
    best_after = list(accumulate(reversed(reach), max, initial=0))[::-1]
    return max(
        (count + best_after[i + count] for i, count in enumerate(reach)), default=0
    )


def min_feed_bags(hunger: Sequence[int]) -> Optional[int]:
    """Return the fewest bags of feed that make every hunger level equal, when
    each bag lowers two neighbouring levels by one; None if that is impossible."""
    levels = list(hunger)
    n = len(levels)
    total = 0
    for i in range(n - 1):
        if levels[i + 1] > levels[i]:
            if i + 2 >= n:
                return None
            diff = levels[i + 1] - levels[i]
            levels[i + 1] -= diff
            levels[i + 2] -= diff
            if levels[i + 2] < 0:
                return None
            total += 2 * diff
        elif levels[i] > levels[i + 1]:
            if i % 2 == 0:
                return None
            total += (levels[i] - levels[i + 1]) * (i + 1)
    return total


def max_gcd_after_replacement(values: Sequence[int]) -> int:
    """Return the largest gcd reachable by replacing one value with any integer."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    if len(values) == 2:
        return max(values)
    prefix = list(accumulate(values, gcd))
    suffix = list(accumulate(reversed(values), gcd))[::-1]
    best = max(prefix[-2], suffix[1])
    return max(best, max(gcd(p, s) for p, s in zip(prefix, suffix[2:])))


__all__ = [
    "shortest_window_with_all_kinds",
    "count_multiples_of_2019",
    "max_running_score",
    "max_diamonds_in_two_cases",
    "min_feed_bags",
    "max_gcd_after_replacement",
]