# dsalgo

Classic algorithms and data structures written in plain Python. The package
has no runtime dependencies and is used as a library: import the module you
need and call its functions.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.arrays` | `sort_012`, `is_sorted`, `longest_consecutive_run`, `max_subarray_sum`, `primes_up_to`, `remove_duplicates_sorted`, `binary_search`, `rotate_clockwise`, `spiral_order`, `product_except_self` |
| `dsalgo.numbers` | `gcd`, `is_leap_year`, `is_palindrome_number`, `digit_sum`, `is_magic`, `factorial`, `is_perfect_cube` |
| `dsalgo.recursion` | `subsets`, `power`, `fast_power`, `taylor_exp`, `hanoi_moves`, `n_choose_r`, `remove_consecutive_duplicates`, `josephus` |
| `dsalgo.dynamic` | `longest_common_subsequence`, `rod_cutting`, `rod_cutting_memo` |
| `dsalgo.strings` | `are_rotations`, `covers_characters`, `longest_prefix_suffix`, `count_concat_pairs`, `rabin_karp_search`, `remove_duplicate_chars` |
| `dsalgo.circular_list` | `CircularList` with `append`, `prepend` and `delete` (1-based positions) |
| `dsalgo.expressions` | `infix_to_postfix`, `infix_to_prefix`, `evaluate_postfix`, `evaluate_prefix`, `simple_infix_to_postfix`, `evaluate_digit_postfix`, `ExpressionError` |
| `dsalgo.spanning_trees` | `DisjointSet`, `contains_cycle`, `Edge`, `SpanningTree`, `kruskal`, `WeightedGraph` (with `prim`) |
| `dsalgo.graphs` | `dijkstra`, `hamiltonian_cycle`, `strongly_connected_components`, `maze_paths` |
| `dsalgo.backtracking` | `solve_n_queens`, `rat_in_maze`, `unique_permutations`, `solve_sudoku` |
| `dsalgo.trees` | `TreeNode`, `build_tree`, `tree_from_preorder_tokens`, `inorder`, `level_order`, `reverse_level_order`, `right_side_view`, `max_width`, `height`, `diameter`, `is_balanced`, `is_bst`, `is_symmetric`, `count_nodes`, `lowest_common_ancestor`, `distance_between` |
| `dsalgo.avl` | `AvlNode`, `build_balanced`, `node_height`, `balance_factor`, `insert`, `inorder`, `preorder` |
| `dsalgo.bst` | `bst_from_preorder`, `insert`, `is_dead_end`, `kth_smallest` |
| `dsalgo.linked_lists` | `ListNode`, `LinkedList`, `from_iterable`, `values_of`, `reverse`, `reverse_recursive`, `reverse_in_groups`, `middle`, `merge_sorted`, `merge_sort`, `loop_length`, `join_at`, `intersection_value` |

## Examples

```python
from dsalgo.arrays import max_subarray_sum, spiral_order
from dsalgo.dynamic import rod_cutting
from dsalgo.expressions import infix_to_postfix, evaluate_postfix
from dsalgo.recursion import josephus
from dsalgo.spanning_trees import Edge, kruskal
from dsalgo.trees import build_tree, diameter, level_order

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
spiral_order([[1, 2], [3, 4]])                      # [1, 2, 4, 3]
rod_cutting(8)                                      # 22, with the default price table
josephus(5, 2)                                      # 2 (zero-based position)

postfix = infix_to_postfix("2+3*4")                 # "234*+"
evaluate_postfix(postfix)                           # 14

mst = kruskal(4, [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5),
                  Edge(1, 3, 15), Edge(2, 3, 4)])
mst.total_weight                                    # 19

root = build_tree("1 2 3 4 5")                      # level order, "N" for no child
level_order(root)                                   # [1, 2, 3, 4, 5]
diameter(root)                                      # 4 (nodes on the longest path)
```

Expressions work on single-digit operands with `+ - * /`; division truncates
toward zero, and malformed input or division by zero raises `ExpressionError`.
Other misuse, such as an out-of-range position or an empty input where a
value is required, raises `ValueError` or `IndexError`.

## What it does not include

The package offers no general-purpose sorting functions and no standalone
queue or stack classes; the stack handling it has lives inside the expression
and tree routines. It has no command-line tool: everything is reached by
importing the modules above.