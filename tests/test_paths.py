import pytest

from treekit.paths import has_path_sum, path_sums
from treekit.tree import Node, build_complete, build_with_gaps


def _is_root_to_leaf(root, path):
    node = root
    if node is None or path[0] != node.data:
        return False
    for value in path[1:]:
        candidates = [c for c in (node.left, node.right) if c is not None and c.data == value]
        if not candidates:
            return False
        node = candidates[0]
    return node.is_leaf()


def test_empty_tree_has_no_paths():
    assert has_path_sum(None, 0) is False
    assert path_sums(None, 0) == []


def test_single_node():
    assert has_path_sum(Node(5), 5) is True
    assert has_path_sum(Node(5), 4) is False
    assert path_sums(Node(5), 5) == [[5]]


def test_inner_node_is_not_a_path_end():
    root = Node(5, left=Node(3))
    assert has_path_sum(root, 5) is False
    assert path_sums(root, 5) == []


def test_paths_of_small_tree():
    root = Node(1, Node(2), Node(3))
    assert path_sums(root, 3) == [[1, 2]]
    assert path_sums(root, 4) == [[1, 3]]
    assert has_path_sum(root, 1) is False


def test_equal_paths_are_all_reported_left_first():
    root = Node(1, Node(2), Node(2))
    assert path_sums(root, 3) == [[1, 2], [1, 2]]


@pytest.mark.parametrize("target", range(0, 20))
def test_has_path_sum_agrees_with_path_sums(target):
    root = build_complete(range(1, 8))
    paths = path_sums(root, target)
    assert has_path_sum(root, target) == bool(paths)
    for path in paths:
        assert sum(path) == target
        assert _is_root_to_leaf(root, path)


def test_gapped_tree_with_negative_values():
    root = build_with_gaps([5, 4, 8, 11, -1, 13, 4, 7, 2, -1, -1, 5, 1])
    for target in range(-5, 40):
        paths = path_sums(root, target)
        assert has_path_sum(root, target) == bool(paths)
        for path in paths:
            assert sum(path) == target
            assert _is_root_to_leaf(root, path)


def test_returned_paths_are_independent():
    root = Node(1, Node(2), Node(2))
    first, second = path_sums(root, 3)
    first.append(99)
    assert second == [1, 2]