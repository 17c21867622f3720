"""Algorithms over lists of numbers: counting, ordering, subarrays and intervals."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, pairwise

Interval = tuple[int, int]


def have_same_elements(first: Sequence[int], second: Sequence[int]) -> bool:
    """Return True when both sequences hold the same values with the same counts."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers found among the values."""
    distinct = sorted(set(values))
    if not distinct:
        raise ValueError("longest_consecutive_run() needs at least one value")
    best = run = 1
    for previous, current in pairwise(distinct):
        run = run + 1 if current == previous + 1 else 1
        best = max(best, run)
    return best


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, counting from 1."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[k - 1]


def count_union(first: Iterable[int], second: Iterable[int]) -> int:
    """Number of distinct values appearing in either input."""
    return len(set(first) | set(second))


def equilibrium_point(values: Sequence[int]) -> int | None:
    """1-based position where the sums on either side are equal, or None."""
    total = sum(values)
    left = 0
    for position, value in enumerate(values, start=1):
        if left == total - left - value:
            return position
        left += value
    return None


def equilibrium_point_prefix(values: Sequence[int]) -> int | None:
    """Equilibrium search comparing prefix and suffix sums.

    A single value is its own equilibrium. The last position is never reported.
    """
    if not values:
        raise ValueError("equilibrium_point_prefix() needs at least one value")
    if len(values) == 1:
        return 1
    prefix = list(accumulate(values))
    suffix = list(accumulate(reversed(values)))[::-1]
    for position, (ahead, behind) in enumerate(zip(prefix[:-1], suffix[:-1]), start=1):
        if ahead == behind:
            return position
    return None


def minimize_height_difference(heights: Iterable[int], k: int) -> int:
    """Smallest spread of heights after raising or lowering each one by k.

    No height may become negative.
    """
    ordered = sorted(heights)
    if not ordered:
        raise ValueError("minimize_height_difference() needs at least one height")
    lowest, highest = ordered[0], ordered[-1]
    result = highest - lowest
    for lower, upper in pairwise(ordered):
        if upper - k < 0:
            continue
        smallest = min(lowest + k, upper - k)
        largest = max(lower + k, highest - k)
        result = min(result, largest - smallest)
    return result


def next_greater_naive(values: Sequence[int]) -> list[int | None]:
    """For each value, the first value from the second position on that exceeds it."""
    tail = list(values)[1:]
    return [next((candidate for candidate in tail if candidate > value), None) for value in values]


def next_greater_elements(values: Sequence[int]) -> list[int | None]:
    """For each value, the nearest later value that is strictly greater, or None."""
    result: list[int | None] = []
    stack: list[int] = []
    for value in reversed(values):
        while stack and stack[-1] <= value:
            stack.pop()
        result.append(stack[-1] if stack else None)
        stack.append(value)
    result.reverse()
    return result


def max_index_difference(values: Sequence[int]) -> int | None:
    """Largest j - i with j > i and values[j] >= values[i], or None if no such pair."""
    return max(
        (j - i for (i, low), (j, high) in combinations(enumerate(values), 2) if high >= low),
        default=None,
    )


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from buying at every valley and selling at the following peak."""
    if not prices:
        raise ValueError("max_profit() needs at least one price")
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def wave_pattern(values: Iterable[int]) -> list[int]:
    """Sort the values, then swap each adjacent pair so they alternate high and low."""
    ordered = sorted(values)
    wave = [item for low, high in zip(ordered[0::2], ordered[1::2]) for item in (high, low)]
    if len(ordered) % 2:
        wave.append(ordered[-1])
    return wave


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """The values with repeats dropped, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


def k_largest(values: Iterable[int], k: int) -> list[int]:
    """The k largest values in descending order."""
    ordered = sorted(values, reverse=True)
    if not 0 <= k <= len(ordered):
        raise ValueError(f"k must be between 0 and {len(ordered)}, got {k}")
    return ordered[:k]


def min_chocolate_difference(packets: Iterable[int], students: int) -> int:
    """Smallest gap between the largest and smallest packet handed to the students."""
    ordered = sorted(packets)
    if students < 1:
        raise ValueError("there must be at least one student")
    if len(ordered) < students:
        raise ValueError(f"{len(ordered)} packets cannot serve {students} students")
    return min(high - low for low, high in zip(ordered, ordered[students - 1:]))


def max_water_area(heights: Sequence[int]) -> int:
    """Largest amount of water held between two of the lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_subarray_product(values: Iterable[int]) -> int:
    """Largest product of a contiguous run of values; 0 for no values."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        return 0
    high = low = best = first
    for value in iterator:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous, non-empty run of values."""
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum() needs at least one value") from None
    for value in iterator:
        current = max(value, value + current)
        best = max(best, current)
    return best


def trapped_rainwater(heights: Sequence[int]) -> int:
    """Units of water trapped between the bars after rain."""
    if len(heights) <= 2:
        return 0
    left_max = accumulate(heights, max)
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(min(left, right) - height for left, right, height in zip(left_max, right_max, heights))


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[Interval]:
    """Merge overlapping or touching intervals, returned in ascending order."""
    merged: list[Interval] = []
    for start, end in sorted((interval[0], interval[1]) for interval in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged