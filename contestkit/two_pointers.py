"""Two-pointer sweeps: reading time, tower coverage, stacked haybales and
pairing cows."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Iterable, Sequence


def max_books(times: Sequence[int], free_time: int) -> int:
    """Return the most consecutive books readable within ``free_time``."""
    best = 0
    window = 0
    left = 0
    for right, duration in enumerate(times):
        window += duration
        while window > free_time and left <= right:
            window -= times[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def min_cell_radius(houses: Iterable[int], towers: Iterable[int]) -> int:
    """Return the smallest radius that puts every house within reach of a tower."""
    ordered_towers = sorted(towers)
    if not ordered_towers:
        raise ValueError("towers must not be empty")
    nearest = 0
    radius = 0
    for house in sorted(houses):
        while nearest + 1 < len(ordered_towers) and abs(
            ordered_towers[nearest + 1] - house
        ) <= abs(ordered_towers[nearest] - house):
            nearest += 1
        radius = max(radius, abs(ordered_towers[nearest] - house))
    return radius


def median_stack_height(stacks: int, ranges: Iterable[tuple[int, int]]) -> int:
    """Return the median height after adding one haybale to every stack in
    each 1-based inclusive range."""
    if stacks < 1:
        raise ValueError("stacks must be positive")
    delta = [0] * (stacks + 2)
    for low, high in ranges:
        if not 1 <= low <= high <= stacks:
            raise ValueError(f"range out of bounds: ({low}, {high})")
        delta[low] += 1
        delta[high + 1] -= 1
    heights = sorted(accumulate(delta[1 : stacks + 1]))
    return heights[(stacks + 1) // 2 - 1]


def min_pairing_time(groups: Iterable[tuple[int, int]]) -> int:
    """Return the smallest possible longest pair time when ``(count, time)``
    groups of cows are milked in pairs."""
    counts: Counter[int] = Counter()
    for count, time in groups:
        if count < 0:
            raise ValueError("counts must not be negative")
        counts[time] += count
    times = sorted(time for time, count in counts.items() if count > 0)
    remaining = [counts[time] for time in times]
    left, right = 0, len(times) - 1
    longest = 0
    while left <= right:
        longest = max(longest, times[left] + times[right])
        if remaining[left] < remaining[right]:
            remaining[right] -= remaining[left]
            left += 1
        elif remaining[left] > remaining[right]:
            remaining[left] -= remaining[right]
            right -= 1
        else:
            left += 1
            right -= 1
    return longest


__all__ = [
    "max_books",
    "min_cell_radius",
    "median_stack_height",
    "min_pairing_time",
]