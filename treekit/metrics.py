"""Numeric measures computed over a binary tree."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Optional

from treekit.tree import Node

UNBALANCED = -1
"""Marker a subtree reports when its two sides differ by more than one level."""


def _children_first(root: Optional[Node]) -> Iterator[Node]:
    """Yield every node after all of its descendants."""
    if root is None:
        return
    stack: list[tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def _all_nodes(root: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the tree, parents before children."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    heights: dict[Optional[Node], int] = {None: 0}
    for node in _children_first(root):
        heights[node] = 1 + max(heights[node.left], heights[node.right])
    return heights[root]


def min_height(root: Optional[Node]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    depths: dict[Optional[Node], int] = {None: 0}
    for node in _children_first(root):
        if node.is_leaf():
            depths[node] = 1
            continue
        present = [depths[child] for child in (node.left, node.right) if child is not None]
        depths[node] = min(present) + 1
    return depths[root]


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _all_nodes(root))


def is_balanced(root: Optional[Node]) -> bool:
    """Return True unless the root's subtree reports an imbalance.

    Each node compares the values reported by its two subtrees; when they
    differ by more than one it reports ``-1``, otherwise the larger plus one.
    """
    reports: dict[Optional[Node], int] = {None: 0}
    for node in _children_first(root):
        left, right = reports[node.left], reports[node.right]
        if abs(left - right) > 1:
            reports[node] = UNBALANCED
        else:
            reports[node] = max(left, right) + 1
    return reports[root] != UNBALANCED


def _path_sums(root: Optional[Node]) -> tuple[int, Optional[int]]:
    """Return the best downward sum from the root and the best arched sum."""
    downward: dict[Optional[Node], int] = {None: 0}
    best: Optional[int] = None
    for node in _children_first(root):
        left, right = downward[node.left], downward[node.right]
        arched = left + right + node.data
        if best is None or arched > best:
            best = arched
        downward[node] = max(left, right) + node.data
    return downward[root], best


def max_path_sum(root: Optional[Node]) -> int:
    """Return the largest sum of a path that starts at the root and goes down.

    A missing child counts as a path of sum zero.
    """
    return _path_sums(root)[0]


def best_path_sum(root: Optional[Node]) -> int:
    """Return the largest sum of a path that bends at some node.

    The path through a node joins the best downward sums of both its sides.
    Raises ValueError for an empty tree, which has no path.
    """
    best = _path_sums(root)[1]
    if best is None:
        raise ValueError("an empty tree has no path")
    return best


def product_of_right_leaves(root: Optional[Node]) -> int:
    """Return the product of all leaves that are right children (1 if none)."""
    return math.prod(
        node.right.data
        for node in _all_nodes(root)
        if node.right is not None and node.right.is_leaf()
    )


def sum_root_to_leaf_binary(root: Optional[Node]) -> int:
    """Read each root-to-leaf path as binary digits and return their sum."""
    total = 0
    stack: list[tuple[Node, int]] = [(root, 0)] if root is not None else []
    while stack:
        node, prefix = stack.pop()
        value = prefix * 2 + node.data
        if node.is_leaf():
            total += value
            continue
        if node.right is not None:
            stack.append((node.right, value))
        if node.left is not None:
            stack.append((node.left, value))
    return total