# dsakit

A library of classic data structures and algorithms in plain Python. It
uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `binary_search`, `reverse_in_place`, `max_water`, `fast_power`, `majority_element`, `max_subarray_sum`, `pair_sum`, `product_except_self`, `max_window_sum`, `max_profit`, and `FixedArray`, an array of bounded capacity with `insert(value, position)` and `remove(position)` |
| `dsakit.patterns` | `staircase` and `butterfly`, which return the rows of a text pattern as a list of strings |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort` (each returns a sorted copy) and the in-place `partition` |
| `dsakit.heap` | `MaxHeap` (`insert`, `delete_root`, `peek`), `heapify`, `build_max_heap`, `heap_sort` |
| `dsakit.hashing` | `count_distinct_in_windows`, `max_distance`, `count_equal_zero_one_subarrays`, `is_subset` |
| `dsakit.recursion` | `count_down`, `count_up`, `power`, `factorial`, `fibonacci`, `find_occurrences`, `reverse_string`, `sum_to`, `tower_of_hanoi` (a list of `Move(disc, source, destination)`), `is_strictly_increasing`, `move_x_to_end` |
| `dsakit.linked_list` | `Node` (with `data`, `next` and `random`), `from_iterable`, `to_list`, `insert_at_head`, `remove_duplicates`, `clone_with_random`, `is_palindrome_by_copy`, `is_palindrome`, `sort_012_by_count`, `sort_012` |
| `dsakit.trees` | `TreeNode`; builders `build_preorder` and `build_level_order`; traversals `level_order`, `inorder`, `preorder`, `postorder`, `morris_inorder`, `zigzag`, `vertical_order`, `boundary`; views `left_view`, `right_view`, `top_view`, `bottom_view`; `height`, `count_leaves`, `longest_path_sum`, `flatten`, `kth_ancestor`, `max_non_adjacent_sum` |
| `dsakit.stacks` | `largest_histogram_area`, `is_balanced`, `min_bracket_reversals`, `find_celebrity`, `delete_middle`, `insert_at_bottom`, `next_smaller`, `has_redundant_brackets`, `reverse_stack`, `reverse_with_stack` |
| `dsakit.expressions` | `infix_to_postfix` (operators `+ - * /`) and `infix_to_prefix` (also `^`), for single-character operands |
| `dsakit.queues` | `ArrayQueue`, `LinearQueue`, `CircularQueue`; `tour_start` (pumps as `(petrol, distance)` pairs, or `PetrolPump`), `first_negative_in_windows`, `first_non_repeating`, `reverse_queue` |
| `dsakit.graph` | `AdjacencyMatrix` (`add_edge`, `remove_edge`, `has_edge`, `rows`), `Graph` (`add_edge(u, v, directed)`, `neighbours`), `adjacency_list` |
| `dsakit.backtracking` | `solve_n_queens` (every board), `first_n_queens` (the first 0/1 board found, or `None`), `permutations` |

## Examples

```python
from dsakit.arrays import binary_search, max_subarray_sum
from dsakit.sorting import quick_sort
from dsakit.expressions import infix_to_postfix
from dsakit.trees import build_level_order, level_order
from dsakit.backtracking import solve_n_queens

binary_search([1, 3, 6, 8, 12, 15], 12)       # 4
max_subarray_sum([-1, 4, -8, -2, 5, -6, 12])  # 12
quick_sort([4, 3, 5, 8, 7, 9, 1, 2])          # [1, 2, 3, 4, 5, 7, 8, 9]
infix_to_postfix("a+b*c")                     # "abc*+"

root = build_level_order([1, 3, 5, 7, 11, 17, -1, -1, -1, -1, -1, -1, -1])
level_order(root)                             # [[1], [3, 5], [7, 11, 17]]

len(solve_n_queens(4))                        # 2
```

Trees are built from sequences in which `-1` marks a missing child, either
in preorder (`build_preorder`) or in level order (`build_level_order`). A
sequence that ends before the tree is complete raises `ValueError`.

## Errors

Where an operation cannot be done the functions raise rather than return a
marker: `IndexError` for a bad position or an empty container,
`OverflowError` for a full `FixedArray` or queue, and `ValueError` for
invalid arguments such as an empty sequence or a window larger than the
input. A few search functions keep `-1` as their "not found" answer:
`binary_search`, `find_celebrity`, `kth_ancestor`, `tour_start`,
`min_bracket_reversals` and `find_occurrences`.

## What this package does not do

It is a library only. There is no command-line program, and nothing reads
from the keyboard or prints to the screen: functions return lists, strings
and numbers, and the classes with a text form (`LinearQueue`,
`AdjacencyMatrix`, `Graph`) give it through `str()`.