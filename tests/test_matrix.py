from hypothesis import given
from hypothesis import strategies as st

from dailyalgos.matrix import (
    fill_rows_and_columns,
    first_one_index,
    row_with_most_ones,
    row_with_most_ones_sorted,
    spiral_order,
)

EXAMPLE = [[0, 0, 0, 1], [0, 1, 1, 1], [1, 1, 1, 1], [0, 0, 0, 0]]


@st.composite
def binary_matrices(draw):
    rows = draw(st.integers(1, 6))
    columns = draw(st.integers(1, 6))
    row = st.lists(st.integers(0, 1), min_size=columns, max_size=columns)
    return draw(st.lists(row, min_size=rows, max_size=rows))


@st.composite
def shapes(draw):
    return draw(st.integers(1, 7)), draw(st.integers(1, 7))


def test_row_with_most_ones_example():
    assert row_with_most_ones(EXAMPLE) == 2
    assert row_with_most_ones_sorted(EXAMPLE) == row_with_most_ones(EXAMPLE)


def test_row_with_most_ones_all_zero():
    assert row_with_most_ones([[0, 0], [0, 0]]) is None
    assert row_with_most_ones_sorted([[0, 0], [0, 0]]) is None


@given(binary_matrices())
def test_row_with_most_ones_is_first_maximum(matrix):
    counts = [row.count(1) for row in matrix]
    result = row_with_most_ones(matrix)
    if max(counts) == 0:
        assert result is None
    else:
        assert counts[result] == max(counts)
        assert all(count < counts[result] for count in counts[:result])


@given(binary_matrices())
def test_sorted_variant_agrees(matrix):
    ordered = [sorted(row) for row in matrix]
    assert row_with_most_ones_sorted(ordered) == row_with_most_ones(ordered)


@given(st.integers(0, 10), st.integers(0, 10))
def test_first_one_index(zeros, ones):
    row = [0] * zeros + [1] * ones
    assert first_one_index(row) == (zeros if ones else None)


def test_fill_rows_and_columns_example():
    assert fill_rows_and_columns([[1, 0], [0, 0]]) == [[1, 1], [1, 0]]


@given(binary_matrices())
def test_fill_rows_and_columns_invariant(matrix):
    result = fill_rows_and_columns(matrix)
    assert len(result) == len(matrix)
    for i, row in enumerate(result):
        for j, cell in enumerate(row):
            hit = 1 in matrix[i] or any(other[j] == 1 for other in matrix)
            assert cell == (1 if hit else 0)


def test_fill_rows_and_columns_copies():
    matrix = [[0, 0, 0], [0, 0, 1]]
    fill_rows_and_columns(matrix)
    assert matrix == [[0, 0, 0], [0, 0, 1]]


def test_spiral_order_square():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    assert spiral_order(matrix) == [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]


def test_spiral_order_single_row_and_column():
    assert spiral_order([[1, 2, 3]]) == [1, 2, 3]
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_order_empty():
    assert spiral_order([]) == []


@given(shapes())
def test_spiral_visits_every_cell_once(shape):
    rows, columns = shape
    matrix = [[r * columns + c for c in range(columns)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * columns))
    assert order[:columns] == matrix[0]
    assert order[columns:columns + rows - 1] == [row[-1] for row in matrix[1:]]