"""In-place quicksort using a first-element pivot partition."""

from __future__ import annotations

from collections.abc import MutableSequence


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around the pivot ``values[low]``.

    Afterwards every element left of the returned index is less than or equal
    to the pivot, the pivot is at the returned index, and every element to its
    right is greater than the pivot.
    """
    pivot = values[low]
    i = low
    j = high

    while i < j:
        while values[i] <= pivot and i <= high - 1:
            i += 1
        while values[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]

    values[low], values[j] = values[j], values[low]
    return j


def quicksort(values: MutableSequence[int], low: int, high: int) -> None:
    """Sort ``values[low:high + 1]`` in place.

    Ranges are processed with an explicit stack, handling the smaller side
    first, so deep inputs never exhaust the interpreter's recursion limit.
    """
    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot_index = partition(values, lo, hi)
        left = (lo, pivot_index - 1)
        right = (pivot_index + 1, hi)
        if left[1] - left[0] > right[1] - right[0]:
            pending.append(left)
            pending.append(right)
        else:
            pending.append(right)
            pending.append(left)


def sort_in_place(values: MutableSequence[int]) -> None:
    """Sort the whole sequence in place."""
    quicksort(values, 0, len(values) - 1)