"""Traversals of binary trees and comparisons between trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from treekit.tree import Node


def preorder(root: Optional[Node]) -> list[int]:
    """Return values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Optional[Node]) -> list[int]:
    """Return values in left, root, right order."""
    result: list[int] = []
    stack: list[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        result.append(node.data)
        current = node.right
    return result


def postorder(root: Optional[Node]) -> list[int]:
    """Return values in left, right, root order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[Node]) -> list[int]:
    """Return values level by level, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def leaves(root: Optional[Node]) -> list[int]:
    """Return the values of the leaves from left to right."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            result.append(node.data)
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def leaf_similar(first: Optional[Node], second: Optional[Node]) -> bool:
    """Return True when both trees have the same leaf sequence."""
    return leaves(first) == leaves(second)


def identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """Return True when both trees have the same shape and values."""
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None:
            return False
        if a.data != b.data:
            return False
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True