"""Root-to-leaf paths whose values add up to a given total."""

from __future__ import annotations

from typing import Optional

from treekit.tree import Node


def has_path_sum(root: Optional[Node], total: int) -> bool:
    """Return True when some root-to-leaf path adds up to ``total``."""
    stack: list[tuple[Node, int]] = [(root, total)] if root is not None else []
    while stack:
        node, remaining = stack.pop()
        if node.is_leaf():
            if remaining == node.data:
                return True
            continue
        rest = remaining - node.data
        if node.right is not None:
            stack.append((node.right, rest))
        if node.left is not None:
            stack.append((node.left, rest))
    return False


def path_sums(root: Optional[Node], target: int) -> list[list[int]]:
    """Return every root-to-leaf path adding up to ``target``, left to right."""
    found: list[list[int]] = []
    stack: list[tuple[Node, int, tuple[int, ...]]] = (
        [(root, target, ())] if root is not None else []
    )
    while stack:
        node, remaining, prefix = stack.pop()
        path = prefix + (node.data,)
        if node.is_leaf():
            if remaining == node.data:
                found.append(list(path))
            continue
        rest = remaining - node.data
        if node.right is not None:
            stack.append((node.right, rest, path))
        if node.left is not None:
            stack.append((node.left, rest, path))
    return found