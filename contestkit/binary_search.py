"""Problems solved by binary searching on the answer or on sorted data."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Sequence

_SEARCH_LIMIT = 10**9


@dataclass(frozen=True)
class Grazing:
    """A position on the plane at a moment in time."""

    x: int
    y: int
    t: int


def _groups_needed(ordered: Sequence[int], reach: int) -> int:
    groups = 0
    start: int | None = None
    for position in ordered:
        if start is None or position - start > reach:
            groups += 1
            start = position
    return groups


def min_blast_power(positions: Sequence[int], launches: int) -> int:
    """Return the smallest radius such that ``launches`` blasts of that radius
    cover every position."""
    if launches < 1 and positions:
        raise ValueError("at least one launch is needed")
    ordered = sorted(positions)
    return bisect_left(
        range(_SEARCH_LIMIT),
        True,
        key=lambda power: _groups_needed(ordered, 2 * power) <= launches,
    )


def min_tower_radius(cities: Iterable[int], towers: Sequence[int]) -> int:
    """Return the smallest radius that puts every city within reach of a tower."""
    if not towers:
        raise ValueError("towers must not be empty")
    ordered = sorted(towers)
    radius = 0
    for city in cities:
        index = bisect_left(ordered, city)
        nearest = min(abs(tower - city) for tower in ordered[max(index - 1, 0) : index + 1])
        radius = max(radius, nearest)
    return radius


def _buses_needed(ordered: Sequence[int], max_wait: int, capacity: int) -> int:
    buses = 0
    start: int | None = None
    riders = 0
    for arrival in ordered:
        if start is None or arrival - start > max_wait or riders == capacity:
            buses += 1
            start = arrival
            riders = 1
        else:
            riders += 1
    return buses


def min_max_wait(arrivals: Sequence[int], buses: int, capacity: int) -> int:
    """Return the smallest longest wait when the arrivals board ``buses`` buses
    of ``capacity`` seats each."""
    if capacity < 1:
        raise ValueError("capacity must be positive")
    if buses < 1 and arrivals:
        raise ValueError("at least one bus is needed")
    ordered = sorted(arrivals)
    return bisect_left(
        range(_SEARCH_LIMIT),
        True,
        key=lambda wait: _buses_needed(ordered, wait, capacity) <= buses,
    )


def _show_length(durations: Sequence[int], size: int) -> int:
    stage = list(durations[:size])
    heapq.heapify(stage)
    for duration in durations[size:]:
        heapq.heapreplace(stage, stage[0] + duration)
    return max(stage)


def min_stage_size(durations: Sequence[int], time_limit: int) -> int:
    """Return the smallest stage size that lets the dancers, taking the stage
    in order, finish within ``time_limit``; the full size if none smaller does."""
    if not durations:
        raise ValueError("durations must not be empty")
    index = bisect_left(
        range(1, len(durations)),
        True,
        key=lambda size: _show_length(durations, size) <= time_limit,
    )
    return index + 1


def _can_reach(a: Grazing, b: Grazing) -> bool:
    dt = a.t - b.t
    dx = a.x - b.x
    dy = a.y - b.y
    return dt * dt >= dx * dx + dy * dy


def count_innocent(grazings: Iterable[Grazing], alibis: Iterable[Grazing]) -> int:
    """Count alibis from which one of the neighbouring grazings in time cannot
    be reached at unit speed."""
    ordered = sorted(grazings, key=attrgetter("t"))
    times = [grazing.t for grazing in ordered]
    innocent = 0
    for alibi in alibis:
        index = bisect_right(times, alibi.t)
        neighbours = ordered[max(index - 1, 0) : index + 1]
        if any(not _can_reach(alibi, grazing) for grazing in neighbours):
            innocent += 1
    return innocent


def count_in_ranges(
    positions: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each ``(low, high)`` query, count positions in ``[low, high]``."""
    ordered = sorted(positions)
    return [bisect_right(ordered, high) - bisect_left(ordered, low) for low, high in queries]


__all__ = [
    "Grazing",
    "min_blast_power",
    "min_tower_radius",
    "min_max_wait",
    "min_stage_size",
    "count_innocent",
    "count_in_ranges",
]