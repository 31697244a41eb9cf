"""Binary tree nodes and the ways of building a tree from a sequence of values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

GAP = -1
"""Value that marks a missing node in level-order input."""

FIXED_SHAPE_CAPACITY = 9
"""Number of positions a fixed-shape tree has room for."""


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def insert_bst(root: Optional[Node], value: int) -> Node:
    """Insert a value into a binary search tree and return its root.

    Smaller values go to the left; equal and larger values go to the right.
    """
    node = Node(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting the values in order."""
    root: Optional[Node] = None
    for value in values:
        root = insert_bst(root, value)
    return root


def build_complete(values: Iterable[int]) -> Optional[Node]:
    """Build a complete binary tree whose level order is the given values."""
    root: Optional[Node] = None
    open_slots: deque[Node] = deque()
    for value in values:
        node = Node(value)
        if root is None:
            root = node
        else:
            parent = open_slots[0]
            if parent.left is None:
                parent.left = node
            else:
                parent.right = node
                open_slots.popleft()
        open_slots.append(node)
    return root


def build_with_gaps(values: Iterable[Optional[int]], keep_parent: bool = False) -> Optional[Node]:
    """Build a tree from level-order values, skipping gaps (``-1`` or ``None``).

    Each present value becomes the next child of the oldest node that still
    has a free slot. With ``keep_parent`` the first node never gives up its
    place, so once it has two children any further values are dropped.
    """
    root: Optional[Node] = None
    pending: deque[Node] = deque()
    for value in values:
        if value is None or value == GAP:
            continue
        node = Node(value)
        if root is None:
            root = node
        else:
            parent = pending[0]
            if parent.left is None:
                parent.left = node
            elif parent.right is None:
                parent.right = node
                if not keep_parent:
                    pending.popleft()
            else:
                continue
        pending.append(node)
    return root


def build_fixed_shape(values: Iterable[int]) -> Optional[Node]:
    """Build a tree with room for at most nine nodes in level order.

    Values beyond the ninth are ignored.
    """
    kept = []
    for value in values:
        if len(kept) == FIXED_SHAPE_CAPACITY:
            break
        kept.append(value)
    return build_complete(kept)