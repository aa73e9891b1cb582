# timeline_core/overlap.py

from __future__ import annotations
from typing import Callable, Iterable, Set

from .models import Event, ResourceGroup, TimeInterval

Resolver = Callable[[Event], TimeInterval]


def intervals_overlap(a: TimeInterval, b: TimeInterval) -> bool:
    """Half-open intersection: touching endpoints are not an overlap."""
    return a.start < b.end and b.start < a.end


def find_conflicts(group: ResourceGroup, resolve: Resolver) -> Set[str]:
    """Ids of events overlapping at least one other event of the same resource.

    Pairwise check, O(k^2) for a group of k movements. k is the number of
    movements of one aircraft on one day, so it stays small; a sweep-line can
    replace this as long as it keeps the same input/output.
    """
    intervals = [(event.id, resolve(event)) for event in group.events]
    conflicting: Set[str] = set()
    for i in range(len(intervals)):
        id_i, interval_i = intervals[i]
        for j in range(i + 1, len(intervals)):
            id_j, interval_j = intervals[j]
            if intervals_overlap(interval_i, interval_j):
                conflicting.add(id_i)
                conflicting.add(id_j)
    return conflicting


def detect_conflicts(groups: Iterable[ResourceGroup], resolve: Resolver) -> Set[str]:
    conflicts: Set[str] = set()
    for group in groups:
        conflicts |= find_conflicts(group, resolve)
    return conflicts
