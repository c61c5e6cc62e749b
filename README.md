# contestkit

A library of solved competitive-programming problems. Each problem is a
plain function: it takes ordinary Python values, such as lists of integers or
strings, and returns the answer. The package has no dependencies beyond the
standard library.

## Installation

```
pip install contestkit
```

To install it with the test tools:

```
pip install "contestkit[test]"
```

## Modules

- `contestkit.cses`: `max_subarray_sum`, `rectangle_cuts`,
  `removal_game_score`, `count_subarrays_with_sum`, `find_two_sum` and
  `find_three_sum`.
- `contestkit.codeforces`: `to_singular`, `min_length_after_merges`,
  `can_sort_by_flipping`, `max_concatenated_score`,
  `square_free_permutation` and `is_quiet_moment`.
- `contestkit.bronze`: `count_good_subarrays`, `tree_area`, `spiral_grid`
  (cells no spiral reaches hold `UNVISITED`) and
  `longest_sum_divisible_by_seven`.
- `contestkit.binary_search`: `min_blast_power`, `min_tower_radius`,
  `min_max_wait`, `min_stage_size`, `count_innocent` (which takes
  `Grazing` records of `x`, `y` and `t`) and `count_in_ranges`.
- `contestkit.prefix_sums`: `shortest_window_with_all_kinds`,
  `count_multiples_of_2019`, `max_running_score`,
  `max_diamonds_in_two_cases`, `min_feed_bags` and
  `max_gcd_after_replacement`.
- `contestkit.two_pointers`: `max_books`, `min_cell_radius`,
  `median_stack_height` and `min_pairing_time`.

## Examples

```python
from contestkit.cses import max_subarray_sum, find_two_sum
from contestkit.prefix_sums import count_multiples_of_2019

max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])  # 9
find_two_sum([2, 7, 5, 1], 8)                  # (4, 2): 1-based positions
find_two_sum([1, 2], 10)                       # None
count_multiples_of_2019("1817181712114")       # 3
```

Where a problem can have no answer, for example when no pair reaches the
target sum, the function returns `None`. Inputs that the problem does not
allow, such as an empty list where a value is needed, raise `ValueError`.
The docstring of each function says what it returns.

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or from files; parse the input
yourself and pass the values to the functions.

## Running the tests

```
pytest
```