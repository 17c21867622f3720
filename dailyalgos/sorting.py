"""Comparison sorts: bubble sort and quicksort with Lomuto partitioning."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending, stopping early once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for index in range(end):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
                swapped = True
        if not swapped:
            break
    return items


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition values[low:high + 1] in place around its last element.

    Smaller values end up before the pivot, the rest after it. Returns the
    pivot's final index.
    """
    if not 0 <= low <= high < len(values):
        raise ValueError(f"invalid range {low}..{high} for {len(values)} values")
    pivot = values[high]
    boundary = low
    for index in range(low, high):
        if values[index] < pivot:
            values[boundary], values[index] = values[index], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending using quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items