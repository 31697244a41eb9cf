# treekit

Small, dependency-free tools for binary trees of integers: building them
from lists of values, walking them, measuring them and searching their
root-to-leaf paths. A `treekit` command runs each operation on integers
read from standard input.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Building trees

`treekit.tree` holds the `Node` dataclass (`data`, `left`, `right`) and the
builders. Each builder returns the root `Node`, or `None` when no node was
made. `Node.is_leaf()` is true for a node with no children.

- `insert_bst(root, value)` adds one value to a binary search tree and
  returns the root; smaller values go left, equal or larger values go right.
- `build_bst(values)` inserts the values one after another.
- `build_complete(values)` fills the tree level by level, left to right, so
  that its level order is the given values.
- `build_with_gaps(values, keep_parent=False)` reads values in level order
  and skips `-1` and `None`. Each remaining value becomes the next child of
  the oldest node that still has a free slot. With `keep_parent=True` the
  first node keeps its place in the queue after its second child is set, so
  once it has two children every later value is dropped.
- `build_fixed_shape(values)` builds a complete tree from at most the first
  nine values; later values are ignored.

## Traversals and comparisons

`treekit.traversal` returns lists of values:

```python
from treekit.tree import build_bst
from treekit.traversal import inorder, leaves, level_order, postorder, preorder

root = build_bst([5, 3, 8, 1, 4])
inorder(root)      # [1, 3, 4, 5, 8]
preorder(root)     # [5, 3, 1, 4, 8]
postorder(root)    # [1, 4, 3, 8, 5]
level_order(root)  # [5, 3, 8, 1, 4]
leaves(root)       # [1, 4, 8]
```

`identical(first, second)` is true when both trees have the same shape and
values; `leaf_similar(first, second)` is true when their leaf sequences are
equal. An empty tree is `None` and gives empty lists.

## Measurements

`treekit.metrics`:

- `height(root)` – nodes on the longest root-to-leaf path (0 for `None`).
- `min_height(root)` – nodes on the shortest root-to-leaf path; a node with
  one child follows that child.
- `count_nodes(root)` – number of nodes.
- `is_balanced(root)` – each node reports the larger of its subtrees'
  reports plus one, or `-1` when the two reports differ by more than one
  (an empty subtree reports 0); the tree is balanced unless the root
  reports `-1`.
- `max_path_sum(root)` – the largest sum of a path that starts at the root
  and goes down, where a missing child counts as a path of sum zero.
- `best_path_sum(root)` – the largest sum, over all nodes, of the node's
  value plus the best downward sums of both its sides; raises `ValueError`
  for an empty tree.
- `product_of_right_leaves(root)` – product of the leaves that are right
  children, or 1 when there are none.
- `sum_root_to_leaf_binary(root)` – reads each root-to-leaf path as binary
  digits (`value = 2 * prefix + data`) and adds the results.

## Path sums

`treekit.paths`:

- `has_path_sum(root, total)` – whether some root-to-leaf path adds up to
  `total`.
- `path_sums(root, target)` – every root-to-leaf path adding up to
  `target`, as lists of values, from left to right.

## Command line

```
treekit --help
treekit COMMAND < input.txt
```

Input is whitespace-separated integers. A count is read first where shown,
then that many values. Some commands print prompts before reading. Missing
or non-integer input makes the command print an error to standard error and
exit with status 1.

| Command | Input | Tree built with |
| --- | --- | --- |
| `binary-sum` | count, values | `build_bst`; prints `sum_root_to_leaf_binary` |
| `balanced` | count, values (`-1` skipped) | `build_with_gaps(..., keep_parent=True)`; says whether it is balanced |
| `has-path-sum` | count, total, values | `build_complete`; prints `true` or `false` |
| `inorder` | count, values | `build_fixed_shape`; prints the inorder traversal |
| `count` | count, values | `build_bst`; prints the number of nodes |
| `height` | count, values (`-1` skipped) | `build_with_gaps`; prints the height |
| `identical` | two sizes, then two lists of as many values as the second size | `build_bst` twice; prints `true` or `false` |
| `leaf-similar` | as `identical` | prints `true` or `false` |
| `level-order` | count, values | `build_complete`; prints the level order |
| `max-path-sum` | count, values | `build_bst`; prints `max_path_sum` |
| `min-height` | count, values (`-1` skipped) | `build_with_gaps`; prints the minimum height |
| `path-sums` | count, target, values (`-1` skipped) | `build_with_gaps`; prints each matching path on its own line |
| `postorder` | none | complete tree of 1 to 5; prints its postorder |
| `preorder` | none | complete tree of 1 to 7; prints its preorder |
| `product-right-leaves` | count, values | `build_complete`; prints the product of right leaves |

For `identical` and `leaf-similar` the first size is read but not used.