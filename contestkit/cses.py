"""Classic array and dynamic-programming problems: subarray sums, pair and
triple searches, rectangle cutting and the removal game."""

from __future__ import annotations

from itertools import accumulate
from typing import Optional, Sequence


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("values must not be empty")
    best = values[0]
    min_prefix = 0
    for prefix in accumulate(values):
        best = max(best, prefix - min_prefix)
        min_prefix = min(min_prefix, prefix)
    return best


def rectangle_cuts(width: int, height: int) -> int:
    """Return the fewest straight cuts that split a rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("width and height must be positive")
    dp = [[0] * (height + 1) for _ in range(width + 1)]
    for i in range(1, width + 1):
        row = dp[i]
        for j in range(1, height + 1):
            if i == j:
                row[j] = 0
                continue
            vertical = min(
                (dp[k][j] + dp[i - k][j] + 1 for k in range(1, i // 2 + 1)),
                default=float("inf"),
            )
            horizontal = min(
                (row[k] + row[j - k] + 1 for k in range(1, j // 2 + 1)),
                default=float("inf"),
            )
            row[j] = int(min(vertical, horizontal))
    return dp[width][height]


def removal_game_score(values: Sequence[int]) -> int:
    """Return the best total the first player can secure when both players
    alternately take a number from either end and play optimally."""
    if not values:
        raise ValueError("values must not be empty")
    n = len(values)
    prefix = [0, *accumulate(values)]
    best = list(values)
    for length in range(2, n + 1):
        best = [
            prefix[i + length] - prefix[i] - min(best[i], best[i + 1])
            for i in range(n - length + 1)
        ]
    return best[0]


def count_subarrays_with_sum(values: Sequence[int], target: int) -> int:
    """Count contiguous subarrays of positive numbers summing to ``target``."""
    count = 0
    window = 0
    left = 0
    for right, value in enumerate(values, start=1):
        window += value
        while window > target and left < right:
            window -= values[left]
            left += 1
        if window == target:
            count += 1
    return count


def find_two_sum(values: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return 1-based positions of two values summing to ``target``, or None."""
    items = sorted((value, position) for position, value in enumerate(values, start=1))
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left][0] + items[right][0]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return items[left][1], items[right][1]
    return None


def find_three_sum(
    values: Sequence[int], target: int
) -> Optional[tuple[int, int, int]]:
    """Return 1-based positions of three values summing to ``target``, or None."""
    items = sorted((value, position) for position, value in enumerate(values, start=1))
    n = len(items)
    for mid in range(1, n - 1):
        middle = items[mid][0]
        left, right = 0, n - 1
        while left < mid < right:
            total = items[left][0] + middle + items[right][0]
            if total < target:
                left += 1
            elif total > target:
                right -= 1
            else:
                return items[left][1], items[mid][1], items[right][1]
    return None