# algodrills

Classic algorithm exercises as small, tested Python functions. Nothing beyond the
standard library is needed.

## What is in it

- **`algodrills.linked`**: `Node`, `LinkedList` (iteration, `len`, `clear`,
  1-based `get_nth`), `from_values`, `to_values`, `create_linked_list`,
  `nth_from_last`, `nth_from_last_recursive`, `middle` and `delete_node` (delete a
  node given only a reference to it).
- **`algodrills.singly_ops`**: `reverse`, `add_numbers` (numbers stored as digit
  lists, most significant first), `alternate_split`, `intersection_value`,
  `delete_n_after_m`, `delete_greater_right`, `delete_greater_right_in_place` and
  `detect_and_remove_loop`.
- **`algodrills.circular`**: `make_circular`, `sorted_insert` and `circular_values`
  for sorted circular singly linked lists.
- **`algodrills.doubly`**: `DNode`, `from_values`, `to_values`,
  `to_values_backward`, `delete_value`, `reverse`, and `XorList`, a list that keeps
  one XOR of neighbour handles per node and can be walked both ways
  (`iter`, `reversed`).
- **`algodrills.special_lists`**: `RandomNode` with `clone_with_arbit` to copy a
  list with arbitrary links, and `GridNode` with `sorted_merge` and `flatten` for a
  list of sorted columns.
- **`algodrills.trees`**: `TreeNode`, `bst_insert`, `inorder`,
  `tree_to_circular_list` (with `join_lists` and `circular_values`),
  `complete_tree` and `left_left_inorder`.
- **`algodrills.numbers`**: `fibonacci_mod` (modulo 1 000 000 007, O(log n)),
  `fibonacci_recursive`, `fibonacci_iterative`, `big_factorial` (decimal string),
  `factorial_recursive`, `factorial_iterative` and `frequency_sort` (values 0..99).
- **`algodrills.stacks`**: `MultiStack`, several fixed-size stacks in one buffer
  (`OverflowError` when full, `IndexError` when empty), and `MinStack` with
  constant-time `min`.
- **`algodrills.searching`**: `search_rotated`, `first_occurrence`, `is_majority`,
  `search_sorted_matrix`, `two_smallest`, `k_largest`, `leaders`,
  `leaders_quadratic`, `repeated_elements`, `odd_occurrence`, `pairs_with_sum` and
  `median_of_sorted`.
- **`algodrills.array_transforms`**: `reverse_in_place`, `reverse_recursive`,
  `rotate_left`, `rotate_right`, `rotate_matrix_90`, `segregate_zeros_ones`,
  `merge_into` (free slots marked by `None`), `union_sorted` and
  `intersection_sorted`.
- **`algodrills.array_metrics`**: `product_array`, `equilibrium_indices`,
  `inversion_count`, `max_difference`, `max_square_submatrix`,
  `max_sum_non_adjacent`, `min_sum_pair` and `unsorted_subarray`, several with a
  `_quadratic` counterpart.
- **`algodrills.subsequences`**: `max_increasing_subsequence_sum`,
  `longest_palindromic_subsequence` (and `_naive`), `longest_unique_substring`,
  `max_subarray` and `max_subarray_nonnegative`, the last two returning
  `(total, start, end)`.
- **`algodrills.optimization`**: `knapsack`, `count_coin_change`, `egg_drop`,
  `matrix_chain_cost`, `min_cost_path`, `optimal_bst_cost` and `rod_cutting`
  (revenue and cuts), most with a `_naive` recursive counterpart.

Bad input is reported by raising `ValueError` or `IndexError`.

## Installation

```
pip install .
```

## Usage

```python
from algodrills.optimization import knapsack, rod_cutting
from algodrills.linked import LinkedList

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
rod_cutting([0, 1, 5, 8, 9, 10, 17, 17, 20, 24, 30], 7).revenue   # 18

items = LinkedList([1, 2, 3, 4, 5])
items.get_nth(2)                             # 2
```

## Command line

`algodrills-fibonacci` prints the n-th Fibonacci number modulo 1 000 000 007 for
each index given as an argument, or, with no arguments, for each integer read
from standard input:

```
algodrills-fibonacci 10 20
echo 10 | algodrills-fibonacci
```

A negative index ends the run with an error message and exit status 1.

## What it does not do

This is a library of functions. Apart from the Fibonacci command there are no
programs that print worked examples; call the functions directly.

## Running the tests

```
pip install .[test]
pytest
```