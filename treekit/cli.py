"""Command-line entry point: one subcommand per tree exercise, reading integers from stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import Optional, TextIO

from treekit.metrics import (
    count_nodes,
    height,
    is_balanced,
    max_path_sum,
    min_height,
    product_of_right_leaves,
    sum_root_to_leaf_binary,
)
from treekit.paths import has_path_sum, path_sums
from treekit.traversal import (
    identical,
    inorder,
    leaf_similar,
    level_order,
    postorder,
    preorder,
)
from treekit.tree import (
    Node,
    build_bst,
    build_complete,
    build_fixed_shape,
    build_with_gaps,
)

Write = Callable[[str], object]


class InputError(ValueError):
    """Raised when the standard input does not hold the integers a command needs."""


class _Reader:
    """Reads whitespace-separated integers from a stream, on first demand."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: Optional[Iterator[str]] = None

    def integer(self) -> int:
        if self._tokens is None:
            self._tokens = iter(self._stream.read().split())
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise InputError(f"not an integer: {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(max(count, 0))]


def _boolean(value: bool) -> str:
    return "true" if value else "false"


def _spaced(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def _binary_sum(reader: _Reader, write: Write) -> None:
    root = build_bst(reader.integers(reader.integer()))
    write(f"{sum_root_to_leaf_binary(root)}\n")


def _balanced(reader: _Reader, write: Write) -> None:
    write("Enter the number of nodes in the tree: ")
    count = reader.integer()
    write("Enter the values of the nodes: ")
    root = build_with_gaps(reader.integers(count), keep_parent=True)
    if is_balanced(root):
        write("The tree is balanced.\n")
    else:
        write("The tree is not balanced.\n")


def _has_path_sum(reader: _Reader, write: Write) -> None:
    count = reader.integer()
    total = reader.integer()
    root = build_complete(reader.integers(count))
    write(f"{_boolean(has_path_sum(root, total))}\n")


def _inorder(reader: _Reader, write: Write) -> None:
    root = build_fixed_shape(reader.integers(reader.integer()))
    if root is None:
        write("Tree is empty or invalid input\n")
        return
    write(f"Inorder Traversal: {_spaced(inorder(root))}\n")


def _count(reader: _Reader, write: Write) -> None:
    write("Enter the number of nodes in the tree: ")
    count = reader.integer()
    write("Enter the values of the nodes: ")
    root = build_bst(reader.integers(count))
    write(f"The number of family members in the binary tree is: {count_nodes(root)}\n")


def _height(reader: _Reader, write: Write) -> None:
    write("Enter the number of nodes in the tree: ")
    count = reader.integer()
    write("Enter the values of the nodes in level order (use -1 for NULL): ")
    root = build_with_gaps(reader.integers(count))
    write(f"Height of the tree is: {height(root)}\n")


def _read_tree_pair(reader: _Reader) -> tuple[Optional[Node], Optional[Node]]:
    reader.integer()  # the first size is read but both trees use the second
    count = reader.integer()
    first = build_bst(reader.integers(count))
    second = build_bst(reader.integers(count))
    return first, second


def _identical(reader: _Reader, write: Write) -> None:
    first, second = _read_tree_pair(reader)
    write(f"{_boolean(identical(first, second))}\n")


def _leaf_similar(reader: _Reader, write: Write) -> None:
    first, second = _read_tree_pair(reader)
    write(f"{_boolean(leaf_similar(first, second))}\n")


def _level_order(reader: _Reader, write: Write) -> None:
    root = build_complete(reader.integers(reader.integer()))
    write(_spaced(level_order(root)))


def _max_path_sum(reader: _Reader, write: Write) -> None:
    root = build_bst(reader.integers(reader.integer()))
    write(f"{max_path_sum(root)}\n")


def _min_height(reader: _Reader, write: Write) -> None:
    write("Enter the number of nodes in the tree: ")
    count = reader.integer()
    write("Enter the values of the nodes in level order (use -1 for NULL): ")
    root = build_with_gaps(reader.integers(count))
    write(f"Minimum height of the tree is: {min_height(root)}\n")


def _path_sums(reader: _Reader, write: Write) -> None:
    write("Enter the number of nodes in the binary tree: ")
    count = reader.integer()
    write("Enter the target sum: ")
    target = reader.integer()
    write("Enter the values of the nodes in level order (use -1 for NULL): ")
    root = build_with_gaps(reader.integers(count))
    write(f"Root-to-leaf paths with sum equal to {target}: \n")
    for path in path_sums(root, target):
        write(f"{_spaced(path)}\n")


def _postorder(reader: _Reader, write: Write) -> None:
    root = build_complete(range(1, 6))
    write(f"Post Order Traversal: {_spaced(postorder(root))}\n")


def _preorder(reader: _Reader, write: Write) -> None:
    root = build_complete(range(1, 8))
    write(_spaced(preorder(root)))


def _product_of_right_leaves(reader: _Reader, write: Write) -> None:
    write("Enter the number of nodes in the tree: ")
    count = reader.integer()
    write("Enter the nodes values: ")
    root = build_complete(reader.integers(count))
    write(f"Product of right leaves: {product_of_right_leaves(root)}\n")


_COMMANDS: dict[str, tuple[Callable[[_Reader, Write], None], str]] = {
    "binary-sum": (_binary_sum, "sum of root-to-leaf paths read as binary numbers (BST input)"),
    "balanced": (_balanced, "tell whether a level-order tree is height balanced"),
    "has-path-sum": (_has_path_sum, "tell whether a root-to-leaf path reaches a total"),
    "inorder": (_inorder, "inorder traversal of a tree of up to nine nodes"),
    "count": (_count, "count the nodes of a binary search tree"),
    "height": (_height, "height of a level-order tree"),
    "identical": (_identical, "compare two binary search trees for equality"),
    "leaf-similar": (_leaf_similar, "compare the leaf sequences of two binary search trees"),
    "level-order": (_level_order, "level-order traversal of a complete tree"),
    "max-path-sum": (_max_path_sum, "largest downward path sum of a binary search tree"),
    "min-height": (_min_height, "minimum height of a level-order tree"),
    "path-sums": (_path_sums, "list root-to-leaf paths adding up to a target"),
    "postorder": (_postorder, "postorder traversal of a sample tree"),
    "preorder": (_preorder, "preorder traversal of a sample tree"),
    "product-right-leaves": (_product_of_right_leaves, "product of the right leaves of a complete tree"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treekit",
        description="Binary tree exercises; integers are read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for name, (handler, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary, description=summary)
        sub.set_defaults(handler=handler)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run one tree command and return the process exit status."""
    args = _build_parser().parse_args(argv)
    reader = _Reader(sys.stdin)
    try:
        args.handler(reader, sys.stdout.write)
    except InputError as exc:
        print(f"treekit: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())