# algokit

Classic data structures and algorithms in plain Python, using only the
standard library. Everything is a library function or class; inputs are
ordinary Python values such as lists, strings and `collections.deque`.

Install it with pip from the project directory. The `test` extra adds pytest
for running the test suite in `tests/`.

## Modules

| Module | Contents |
| --- | --- |
| `algokit.binary_tree` | `TreeNode`; `build_tree` from a preorder sequence with `-1` marking a missing child; `build_from_inorder_preorder`, `build_from_inorder_postorder`; `level_order`, `inorder`, `preorder`, `postorder`; `max_depth`, `diameter`, `is_same_tree`, `is_symmetric`, `is_balanced`, `is_sum_tree`, `lowest_common_ancestor`, `kth_ancestor`, `path_sum` |
| `algokit.bst` | `insert`, `build_bst` (stops at `-1`), `search`, `min_value` and `max_value` (`-1` for an empty tree), `bst_from_sorted`, `to_sorted_dll` (relinks the tree in place), `iter_dll` |
| `algokit.heap` | `MaxHeap` (default capacity 100, `insert`, `delete`, `len`, iteration), `heapify`, `build_heap`, `heap_sort`, `is_max_heap` for a tree of `TreeNode`s |
| `algokit.heap_problems` | `MedianStream` and `running_medians`; `kth_smallest`, `kth_greatest`; `merge_k_sorted_arrays`; `ListNode` and `merge_k_sorted_lists`; `reorganize_string`; `min_stone_sum`; `sort_pairs` (first item ascending, ties by second item descending) |
| `algokit.queues` | fixed-capacity `ArrayQueue`, `CircularQueue` and `ArrayDeque`; `QueueFullError`, `QueueEmptyError` |
| `algokit.queue_problems` | `reverse_queue`, `reverse_first_k`, `interleave_halves` (all in place on a deque); `first_negative_in_windows`; `first_non_repeating`; `min_groups` |
| `algokit.stacks` | fixed-capacity `ArrayStack` and `TwoStacks` (two stacks sharing one set of slots); `StackOverflowError`, `StackUnderflowError` |
| `algokit.stack_problems` | stacks as lists with the top last: `get_middle`, `insert_at_bottom`, `reverse_stack`, `sort_stack`; `is_valid_parentheses`, `has_redundant_brackets`; `next_smaller`, `prev_smaller` |
| `algokit.dp` | `fib`, `coin_change`, `count_coin_ways`, `frog_jump`, `frog_jump_k`, `rob`, `count_fence_ways` (modulo 1e9+7), `subset_sum_to_k`, `ninja_training`, `min_subset_difference`, `num_squares` |
| `algokit.recursion` | `all_subsequences`, `subsequences_with_sum`, `first_subsequence_with_sum`, `count_subsequences_with_sum`, `combination_sum`, `merge_sort`, `quick_sort`, `solve_n_queens` |
| `algokit.strings` | `last_occurrence`, `reverse_string`, `add_strings`, `is_palindrome`, `remove_occurrences`, `length_of_longest_substring` |

## Examples

```python
from algokit.binary_tree import build_tree, level_order, max_depth

# Preorder values, with -1 marking a missing child.
root = build_tree([1, 2, -1, -1, 3, -1, -1])
print(level_order(root))   # [[1], [2, 3]]
print(max_depth(root))     # 2
```

```python
from algokit.heap_problems import running_medians

print(running_medians([5, 7, 2, 9, 3, 8]))
# [5.0, 6.0, 5.0, 6.0, 5.0, 6.0]
```

```python
from algokit.dp import coin_change, rob

print(coin_change([1, 2], 3))   # 2
print(rob([2, 7, 9, 3, 1]))     # 12
```

```python
from algokit.queues import ArrayQueue, QueueFullError

q = ArrayQueue(2)
q.push(5)
q.push(15)
try:
    q.push(25)
except QueueFullError:
    print("full")
```

## Errors

The fixed-capacity containers raise `QueueFullError`, `QueueEmptyError`,
`StackOverflowError` or `StackUnderflowError` when an operation cannot be
done. `MaxHeap` raises `IndexError` when full or when deleting from an empty
heap. Functions given out-of-range arguments (a negative amount, a window
size larger than the input, traversals of different lengths and the like)
raise `ValueError`.

## What it does not do

There is no command-line program and nothing reads from standard input or
prints results: trees and search trees are built from Python iterables, and
every function returns its answer.