# algokit

A small collection of classic algorithms in plain Python with no third-party
dependencies. It covers array problems, binary search, matrix traversal,
parentheses handling, binary trees and binary search trees.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.array_ops` | `is_sorted_rotated`, `max_consecutive_ones`, `move_zeroes`, `rotate`, `remove_duplicates`, `missing_number`, `single_number`, `sorted_union`, `two_sum`, `h_index`, `leaders` |
| `algokit.array_problems` | `max_profit`, `rearrange_by_sign`, `max_subarray_sum`, `unique_paths`, `unique_paths_combinatorial`, `pascal_triangle`, `majority_element`, `next_permutation`, `majority_elements`, `merge_sorted_into`, `longest_consecutive`, `merge_intervals` |
| `algokit.searching` | `binary_search`, `lower_bound`, `floor_index`, `search_range`, `search_rotated`, `search_rotated_with_duplicates`, `peak_element`, `kth_of_two_sorted`, `allocate_min_pages`, `kth_missing`, and the constant `NOT_FOUND` |
| `algokit.matrix` | `spiral_order`, `rotate_clockwise` |
| `algokit.parentheses` | `remove_outer_parentheses` |
| `algokit.trees` | `Node`, `level_order`, `height`, `diameter`, `mirror`, `preorder`, `inorder`, `boundary_traversal`, `max_path_sum`, `bottom_view`, `top_view`, `right_side_view`, `is_symmetric`, `zigzag_level_order` |
| `algokit.bst` | `recover_bst`, `lowest_common_ancestor`, `is_bst`, `is_bst_bounds`, `kth_smallest` |

## Examples

```python
from algokit.array_ops import rotate, two_sum
from algokit.array_problems import merge_intervals
from algokit.searching import binary_search
from algokit.matrix import spiral_order
from algokit.parentheses import remove_outer_parentheses

rotate([1, 2, 3, 4, 5, 6, 7], 3)                     # [5, 6, 7, 1, 2, 3, 4]
two_sum([2, 7, 11, 15], 9)                           # (0, 1)
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) # [[1, 6], [8, 10], [15, 18]]
binary_search([1, 2, 3, 4, 5], 4)                    # 3
spiral_order([[1, 2, 3], [4, 5, 6]])                 # [1, 2, 3, 6, 5, 4]
remove_outer_parentheses("(()())(())")               # "()()()"
```

Binary trees are built from `Node` objects, a dataclass with `data`, `left`
and `right`:

```python
from algokit.trees import Node, level_order, height
from algokit.bst import is_bst

root = Node(1, Node(2, Node(4), Node(5)), Node(3))

level_order(root)   # [[1], [2, 3], [4, 5]]
height(root)        # 2
is_bst(root)        # False
```

## Behaviour worth knowing

- Most functions take any sequence or iterable and return a new list; the
  input is left untouched.
- Three functions change their argument in place: `merge_sorted_into` fills
  the given target list (and also returns it), `mirror` swaps children
  throughout a tree, and `recover_bst` swaps back the values of two misplaced
  nodes. The last two return the root.
- Index searches in `algokit.searching` return `NOT_FOUND` (`-1`) when the
  target is absent; `two_sum` returns `None` when no pair exists.
- Invalid input raises `ValueError`: for example an empty sequence for
  `max_subarray_sum`, `majority_element` or `peak_element`, a `k` out of
  range for `kth_of_two_sorted`, `kth_missing` or `kth_smallest`, unequal
  sign groups for `rearrange_by_sign`, non-positive grid sizes for
  `unique_paths`, or a character other than a parenthesis for
  `remove_outer_parentheses`.

## What it does not do

The package is a library only: it has no command-line tool. It offers no
general-purpose sorting routines of its own (use Python's `sorted`), and its
trees hold integers in plain `Node` objects with no insertion, deletion or
balancing.