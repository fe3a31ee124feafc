"""K-way merge of sorted runs."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def merge_sorted(runs: Iterable[Iterable[int]]) -> list[int]:
    """Merge already sorted runs into one sorted list.

    On equal values the element from the earlier run comes first.
    """
    return list(heapq.merge(*runs))