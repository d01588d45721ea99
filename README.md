# algokit

A collection of well-known algorithm problems on arrays, strings, numbers,
matrices and stacks. Each is solved as a small Python function that works on
ordinary lists and strings. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.arrays`: `max_profit`, `max_subarray_sum`, `missing_number`,
  `move_zeroes`, `remove_duplicates`, `two_sum`, `sorted_squares`,
  `three_consecutive_odds`, `sort_by_bits`, `number_game`, `xor_operation`,
  `next_greater_element`, `sort_colors`, `three_sum`, `three_sum_closest`
- `algokit.strings`: `is_anagram`, `is_pangram`, `most_words_found`,
  `first_unique_char`
- `algokit.numbers`: `add_digits`, `count_dividing_digits`,
  `maximum_achievable`, `difference_of_sums`, `triangle_type`
- `algokit.matrix`: `spiral_order`, `set_zeroes`
- `algokit.stacks`: `nearest_smaller_left`, `nearest_smaller_right`,
  `largest_rectangle_area`, `baseball_points`
- `algokit.dynamic`: `target_sum_ways`
- `algokit.windows`: `check_subarray_sum`, `subarray_sum_count`,
  `longest_consecutive`, `longest_ones`, `number_of_nice_subarrays`,
  `substrings_with_all_three`, `max_card_score`, `max_sliding_window`,
  `longest_unique_substring`, `character_replacement`, `min_window`,
  `binary_subarrays_with_sum`
- `algokit.search`: `find_peak_element`, `first_bad_version`,
  `search_rotated`, `search_range`, `search_insert`, `kth_smallest`,
  `search_matrix`, `min_eating_speed`

A few functions change their list in place and return nothing
(`move_zeroes`, `sort_colors`, `set_zeroes`). `remove_duplicates` compacts the
list in place and returns the number of unique items. Inputs that have no
answer, such as an empty list for `max_subarray_sum`, raise `ValueError`.

## Example

```python
from algokit.arrays import two_sum, max_profit
from algokit.search import first_bad_version

two_sum([2, 7, 11, 15], 9)              # (0, 1)
two_sum([1, 2], 10)                     # None
max_profit([7, 1, 5, 3, 6, 4])          # 5
first_bad_version(5, lambda v: v >= 4)  # 4
```

## Command line

The `algokit` command runs one of the array or string problems. It takes the
input as arguments and prints the answer:

```
algokit buy-sell 7 1 5 3 6 4            # Maximum Profit: 5
algokit max-subarray -2 1 -3 4 -1 2 1   # Maximum Subarray Sum: 6
algokit missing-number 3 0 1            # Missing number is: 2
algokit move-zeroes 0 1 0 3 12          # Array after moving zeroes: 1 3 12 0 0
algokit remove-duplicates 1 1 2         # Unique count: 2, then the unique items
algokit longest-consecutive 100 4 200 1 3 2
algokit subarray-sum 1 1 1 -k 2
algokit continuous-subarray 23 2 4 6 7 -k 6
algokit two-sum 2 7 11 15 --target 9    # Test 1: [0, 1]
algokit anagram listen silent           # Anagram
```

With no numbers, `two-sum` uses the list `2 7 11 15` and, unless `--target`
is given, the target 9. Run `algokit --help` or `algokit <command> --help`
for the full list of commands and options.

## What it does not do

The command covers only the ten problems listed above; the others are
available only from Python. It does not prompt for input or read standard
input: every value is passed on the command line.