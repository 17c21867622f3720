"""Searches over sorted, binary and rotated sequences."""

from __future__ import annotations

from collections.abc import Sequence


def floor_index(values: Sequence[int], target: int) -> int | None:
    """Index of the largest value not above target in a sorted sequence, or None.

    When the target itself is present, the index of one of its occurrences is returned.
    """
    left, right = 0, len(values) - 1
    found: int | None = None
    while left <= right:
        mid = (left + right) // 2
        value = values[mid]
        if value == target:
            return mid
        if value < target:
            found = mid
            left = mid + 1
        else:
            right = mid - 1
    return found


def transition_point(values: Sequence[int]) -> int | None:
    """Index of the first 1 in a sorted sequence of 0s and 1s, or None if there is none."""
    low, high = 0, len(values) - 1
    answer: int | None = None
    while low <= high:
        mid = (low + high) // 2
        value = values[mid]
        if value == 0:
            low = mid + 1
        elif value == 1:
            answer = mid
            high = mid - 1
        else:
            raise ValueError(f"expected only 0 and 1, found {value!r} at index {mid}")
    return answer


def first_and_last(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of the first and last occurrence of target, or None if it is absent."""
    positions = [index for index, value in enumerate(values) if value == target]
    if not positions:
        return None
    return positions[0], positions[-1]


def rotated_search(values: Sequence[int], key: int) -> int | None:
    """Index of key in a rotated sorted sequence of distinct values, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == key:
            return mid
        if values[left] <= values[mid]:
            if values[left] <= key < values[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif values[mid] < key <= values[right]:
            left = mid + 1
        else:
            right = mid - 1
    return None