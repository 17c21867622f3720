"""Classic recursive problems solved with memoised or tabulated recursion."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_LIMB = 10**9
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of items fitting in the capacity, each used at most once."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    weights, values = tuple(weights), tuple(values)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        skip = best(count - 1, room)
        weight = weights[count - 1]
        if weight > room:
            return skip
        return max(values[count - 1] + best(count - 1, room - weight), skip)

    return best(len(weights), capacity)


def count_coin_ways(denominations: Sequence[int], target: int) -> int:
    """Number of ways to make target from unlimited coins, ignoring order."""
    if any(coin <= 0 for coin in denominations):
        raise ValueError("denominations must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for coin in denominations:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for left in first:
        current = [0]
        for column, right in enumerate(second, start=1):
            if left == right:
                current.append(previous[column - 1] + 1)
            else:
                current.append(max(current[column - 1], previous[column]))
        previous = current
    return previous[-1]


def edit_distance(first: str, second: str) -> int:
    """Fewest insertions, deletions and replacements turning first into second."""
    previous = list(range(len(second) + 1))
    for row, left in enumerate(first, start=1):
        current = [row]
        for column, right in enumerate(second, start=1):
            if left == right:
                current.append(previous[column - 1])
            else:
                current.append(1 + min(current[column - 1], previous[column], previous[column - 1]))
        previous = current
    return previous[-1]


def factorial_digits(n: int) -> str:
    """Decimal digits of n!; values of n below 2 give "1"."""
    limbs = [1]
    for factor in range(2, n + 1):
        carry = 0
        for index, limb in enumerate(limbs):
            carry, limbs[index] = divmod(limb * factor + carry, _LIMB)
        while carry:
            carry, low = divmod(carry, _LIMB)
            limbs.append(low)
    return str(limbs[-1]) + "".join(f"{limb:09d}" for limb in reversed(limbs[:-1]))


def rat_maze_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Every route from the top-left to the bottom-right corner of a square maze.

    Non-zero cells are open. Routes never revisit a cell and are spelled with
    D, L, R and U, listed in that order of preference.
    """
    size = len(grid)
    open_cells = {
        (row, column)
        for row, cells in enumerate(grid)
        for column, cell in enumerate(cells)
        if cell and column < size
    }
    start, goal = (0, 0), (size - 1, size - 1)
    if start not in open_cells or goal not in open_cells:
        return []

    paths: list[str] = []
    trail: list[str] = []
    visited = {start}

    def walk(cell: tuple[int, int]) -> None:
        if cell == goal:
            paths.append("".join(trail))
            return
        row, column = cell
        for letter, row_step, column_step in _MOVES:
            following = (row + row_step, column + column_step)
            if following in open_cells and following not in visited:
                visited.add(following)
                trail.append(letter)
                walk(following)
                trail.pop()
                visited.discard(following)

    walk(start)
    return paths