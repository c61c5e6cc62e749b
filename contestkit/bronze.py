"""Counting and simulation problems: good subarrays, overlapping tree
silhouettes, spiral fills and prefix sums divisible by seven."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, cycle, pairwise
from typing import Iterable, Iterator, Sequence

UNVISITED = 10**9

_UP = (-1, 0)
_DOWN = (1, 0)
_LEFT = (0, -1)
_RIGHT = (0, 1)
_CLOCKWISE = (_UP, _RIGHT, _DOWN, _LEFT)
_ANTICLOCKWISE = (_UP, _LEFT, _DOWN, _RIGHT)

_DIGITS = "0123456789"


def count_good_subarrays(digits: str) -> int:
    """Count substrings whose digit sum equals their length."""
    seen: Counter[int] = Counter({0: 1})
    balance = 0
    count = 0
    for char in digits:
        if char not in _DIGITS:
            raise ValueError(f"not a decimal digit: {char!r}")
        balance += int(char) - 1
        count += seen[balance]
        seen[balance] += 1
    return count


def tree_area(base: float, height: float, positions: Sequence[float]) -> float:
    """Return the area covered by triangular trees of the given base and height
    standing at ascending ``positions``, counting overlaps once."""
    if not positions:
        raise ValueError("positions must not be empty")
    if height <= 0:
        raise ValueError("height must be positive")
    full = base * height / 2.0
    total = full
    for previous, current in pairwise(positions):
        if current >= previous + height:
            total += full
        else:
            ratio = (height - (current - previous)) / height
            total += full * (1 - ratio * ratio)
    return total


def _spiral_path(
    row: int, col: int, directions: tuple[tuple[int, int], ...]
) -> Iterator[tuple[int, int]]:
    yield row, col
    for turn, (d_row, d_col) in enumerate(cycle(directions)):
        for _ in range(turn // 2 + 1):
            row += d_row
            col += d_col
            yield row, col


def spiral_grid(
    rows: int, cols: int, starts: Iterable[tuple[int, int, bool]]
) -> list[list[int]]:
    """Fill a grid with the earliest step at which any spiral reaches each cell.

    Each start is ``(row, col, anticlockwise)`` with 1-based coordinates.
    Cells no spiral reaches keep the value ``UNVISITED``.
    """
    if rows < 1 or cols < 1:
        raise ValueError("grid dimensions must be positive")
    grid = [[UNVISITED] * cols for _ in range(rows)]
    cells = rows * cols
    for row, col, anticlockwise in starts:
        directions = _ANTICLOCKWISE if anticlockwise else _CLOCKWISE
        inside = 0
        for step, (r, c) in enumerate(_spiral_path(row - 1, col - 1, directions), start=1):
            if 0 <= r < rows and 0 <= c < cols:
                grid[r][c] = min(grid[r][c], step)
                inside += 1
                if inside == cells:
                    break
    return grid


def longest_sum_divisible_by_seven(values: Iterable[int]) -> int:
    """Return the length of the longest contiguous run whose sum is a multiple
    of seven, or 0 if there is none."""
    first_seen = {0: 0}
    best = 0
    for index, prefix in enumerate(accumulate(values), start=1):
        remainder = prefix % 7
        if remainder in first_seen:
            best = max(best, index - first_seen[remainder])
        else:
            first_seen[remainder] = index
    return best


__all__ = [
    "UNVISITED",
    "count_good_subarrays",
    "tree_area",
    "spiral_grid",
    "longest_sum_divisible_by_seven",
]