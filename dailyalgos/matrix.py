"""Operations on rectangular matrices held as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def row_with_most_ones(matrix: Matrix) -> int | None:
    """Index of the first row holding the most 1s, or None if no row holds any."""
    best_count = 0
    best_row: int | None = None
    for index, row in enumerate(matrix):
        count = sum(1 for cell in row if cell == 1)
        if count > best_count:
            best_count, best_row = count, index
    return best_row


def first_one_index(row: Sequence[int]) -> int | None:
    """Index of the first 1 in a row sorted with 0s before 1s, or None."""
    low, high = 0, len(row) - 1
    found: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if row[mid] == 1:
            found = mid
            high = mid - 1
        else:
            low = mid + 1
    return found


def row_with_most_ones_sorted(matrix: Matrix) -> int | None:
    """Like row_with_most_ones, for rows sorted with 0s before 1s, using binary search."""
    best_count = 0
    best_row: int | None = None
    for index, row in enumerate(matrix):
        first = first_one_index(row)
        if first is not None and len(row) - first > best_count:
            best_count, best_row = len(row) - first, index
    return best_row


def fill_rows_and_columns(matrix: Matrix) -> list[list[int]]:
    """Return a copy in which every row and column containing a 1 is set to 1."""
    rows_hit = [any(cell == 1 for cell in row) for row in matrix]
    columns_hit = [any(cell == 1 for cell in column) for column in zip(*matrix)]
    return [
        [1 if row_hit or column_hit else cell for cell, column_hit in zip(row, columns_hit)]
        for row, row_hit in zip(matrix, rows_hit)
    ]


def spiral_order(matrix: Matrix) -> list[int]:
    """The cells read clockwise in a spiral, starting at the top-left corner."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    order: list[int] = []
    while top <= bottom and left <= right:
        order.extend(matrix[top][left:right + 1])
        top += 1
        order.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][column] for column in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return order