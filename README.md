# cptricks

Classic competitive-programming techniques as plain Python functions and small data structures.

## Installation

```
pip install cptricks
```

The tests need the `test` extra:

```
pip install "cptricks[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cptricks.grids` | `PrefixSum2D` for O(1) rectangle sums, `parse_star_grid` (`*` becomes 1, anything else 0), `matrix_multiply` |
| `cptricks.subarrays` | `max_absolute_difference` (max of `abs(A[i] - A[j]) + abs(i - j)`), `max_subarray_sum` (never below 0), `count_subarrays_with_sum`, `find_pair_with_sum` (two pointers, returns `None` when no pair exists), `max_subset_sum_at_most` (meet in the middle), `mex` |
| `cptricks.sorting` | `merge_sort_iterative` (bottom-up, stable, returns a new list) |
| `cptricks.bits` | `set_bit_counts` (how many of `0..n` have each bit set; positions 0-29 computed, position 30 reported as 0), `gray_code` |
| `cptricks.stacks` | `MaxStack`, `MinQueue` (queue built from two stacks), `sliding_window_min`, `sliding_window_max`, `nearest_greater_left`, `largest_rectangle_area` |
| `cptricks.brackets` | `is_balanced`, `is_valid_parentheses`, `longest_valid_parentheses` |
| `cptricks.expression` | `evaluate` (binary `+ - * /` with brackets, division truncating toward zero), `evaluate_with_unary` (adds prefix `+`/`-`) |
| `cptricks.ordered` | `Node` (an `(x, y)` pair ordered by `x` then `y`), `OrderedSet` with `add`, `find_by_order`, `order_of_key`, `lower_bound` |
| `cptricks.graph` | `Graph` (directed adjacency list over vertices `0..vertices` with weighted `Edge`s), `TreeNode`, `kth_smallest` |
| `cptricks.text` | `split_words`, `split` (single-character delimiter, empty pieces dropped), `read_ints` (generator of integers found in raw text) |
| `cptricks.palindromes` | `longest_palindromic_subsequence`, `longest_palindromic_substring` (leftmost on ties) |
| `cptricks.interval_dp` | `max_coins` (burst balloons), `removal_game_score`, `removal_game_difference` |
| `cptricks.combinatorics` | `binomial`, `catalan`, `count_bst`, `count_binary_trees`, `pascal_row`, `nth_ugly_number`, `sum_of_products` (mod 10**9 + 7), `count_digit_sum_multiples` (mod 10**9 + 7), `probability_more_heads` |
| `cptricks.games` | `can_win_nim`, `nim_winner` (returns `"First"` or `"Second"`) |
| `cptricks.randomness` | `RandomRange`, `RandomGenerator` (seedable; seeded from the clock when no seed is given) |

Invalid input raises exceptions: `ValueError` for malformed arguments, such as a bad window size or an unmatched bracket in an expression, and `IndexError` for out-of-range positions, such as popping an empty `MaxStack` or querying outside a `PrefixSum2D` grid.

## Examples

```python
from cptricks.grids import PrefixSum2D, parse_star_grid
from cptricks.stacks import largest_rectangle_area, sliding_window_max
from cptricks.expression import evaluate_with_unary
from cptricks.ordered import OrderedSet

grid = parse_star_grid(["..*", "*.*", "..."])
sums = PrefixSum2D(grid)
sums.query(0, 0, 1, 2)                      # stars in rows 0-1, columns 0-2

largest_rectangle_area([2, 1, 5, 6, 2, 3])  # 10
sliding_window_max([1, 3, -1, -3, 5], 3)    # [3, 3, 5]

evaluate_with_unary("-(2 + 3) * 4")         # -20

s = OrderedSet([5, 1, 9, 3])
s.find_by_order(1)                          # 3
s.order_of_key(6)                           # 3
```

Coordinates and indices are zero-based throughout, except `kth_smallest` and `nth_ugly_number`, whose positions are one-based.

## What it does not do

cptricks is a library only. It installs no commands and reads no input on its own: there is no program that reads test cases from standard input and prints answers. Call the functions from your own code, using `read_ints` or `split_words` to parse raw input if needed.