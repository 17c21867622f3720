# dailyalgos

A small library of classic algorithms on lists, strings and matrices,
written in plain Python with no third-party dependencies.

## Installation

```
pip install dailyalgos
```

To run the tests:

```
pip install "dailyalgos[test]"
pytest
```

## Modules

- `dailyalgos.arrays`: `have_same_elements`, `longest_consecutive_run`,
  `kth_smallest`, `k_largest`, `count_union`, `equilibrium_point`,
  `equilibrium_point_prefix`, `minimize_height_difference`,
  `next_greater_naive`, `next_greater_elements`, `max_index_difference`,
  `max_profit`, `wave_pattern`, `remove_duplicates`,
  `min_chocolate_difference`, `max_water_area`, `max_subarray_product`,
  `max_subarray_sum`, `trapped_rainwater` and `merge_intervals`.
- `dailyalgos.searching`: `floor_index` in a sorted sequence,
  `transition_point` in a sorted 0/1 sequence, `first_and_last`
  occurrence, and `rotated_search` in a rotated sorted sequence.
- `dailyalgos.sorting`: `bubble_sort`, the Lomuto `partition` and
  `quick_sort`.
- `dailyalgos.matrix`: `row_with_most_ones`, `first_one_index`,
  `row_with_most_ones_sorted` (binary search over rows sorted with 0s
  before 1s), `fill_rows_and_columns` and `spiral_order`.
- `dailyalgos.strings`: `is_anagram_sorted`, `is_anagram`,
  `first_non_repeating`, `longest_common_prefix`, `longest_palindrome`,
  `largest_number`, and the bracket checks `is_valid_brackets`,
  `is_balanced_count`, `is_balanced_stack` and `has_equal_parens`.
- `dailyalgos.stacks`: `delete_middle`, which removes the middle element
  of a list used as a stack (last element on top).
- `dailyalgos.recursion`: `knapsack` (0/1), `count_coin_ways`,
  `lcs_length`, `edit_distance`, `factorial_digits` and `rat_maze_paths`.

Where a search or lookup finds nothing, the function returns `None`
(for example `rotated_search`, `first_and_last`, `equilibrium_point`,
`longest_common_prefix`). Inputs that make no sense, such as an empty
list where a value is required or `k` out of range, raise `ValueError`.

## Examples

```python
from dailyalgos.arrays import merge_intervals, trapped_rainwater
from dailyalgos.strings import longest_palindrome, largest_number
from dailyalgos.recursion import knapsack, rat_maze_paths

merge_intervals([[1, 3], [2, 4], [6, 8], [9, 10]])
# [(1, 4), (6, 8), (9, 10)]

trapped_rainwater([3, 0, 1, 0, 4, 0, 2])
# 10

longest_palindrome("forgeeksskeegfor")
# 'geeksskeeg'

largest_number(["3", "30", "34", "5", "9"])
# '9534330'

knapsack([1, 2, 3], [10, 15, 40], 6)
# 65

rat_maze_paths([[1, 0, 0, 0],
                [1, 1, 0, 1],
                [1, 1, 0, 0],
                [0, 1, 1, 1]])
# ['DDRDRR', 'DRDDRR']
```

Functions return new values and leave their inputs unchanged, except
`sorting.partition` and `stacks.delete_middle`, which modify the list
they are given.

## What this package does not do

It is a library only: there is no command-line tool, and nothing reads
input files or prints results. Call the functions from your own code.