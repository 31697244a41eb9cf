import pytest

from treekit.metrics import (
    best_path_sum,
    count_nodes,
    height,
    is_balanced,
    max_path_sum,
    min_height,
    product_of_right_leaves,
    sum_root_to_leaf_binary,
)
from treekit.tree import Node, build_bst, build_complete


def test_empty_tree_measures():
    assert height(None) == 0
    assert min_height(None) == 0
    assert count_nodes(None) == 0
    assert is_balanced(None) is True
    assert max_path_sum(None) == 0
    assert product_of_right_leaves(None) == 1
    assert sum_root_to_leaf_binary(None) == 0


def test_best_path_sum_of_empty_tree_raises():
    with pytest.raises(ValueError):
        best_path_sum(None)


@pytest.mark.parametrize("values", [[5], [5, 3, 8, 1, 4], [1, 2, 3, 4, 5, 6], [7, 7, 7]])
def test_count_nodes_matches_input(values):
    assert count_nodes(build_bst(values)) == len(values)


@pytest.mark.parametrize("n", range(1, 20))
def test_complete_tree_height(n):
    root = build_complete(range(n))
    assert height(root) == n.bit_length()
    assert is_balanced(root) is True
    assert min_height(root) <= height(root)


def test_sorted_bst_is_a_chain():
    values = list(range(6))
    root = build_bst(values)
    assert height(root) == len(values)
    assert min_height(root) == len(values)
    assert is_balanced(root) is False


def test_single_node():
    root = Node(9)
    assert height(root) == 1
    assert min_height(root) == 1
    assert max_path_sum(root) == 9
    assert best_path_sum(root) == 9
    assert product_of_right_leaves(root) == 1


def test_min_height_ignores_missing_child():
    root = Node(1, left=Node(2, left=Node(3)), right=None)
    assert min_height(root) == height(root)


def test_path_sums_on_small_tree():
    root = Node(1, Node(2), Node(3))
    assert max_path_sum(root) == 4
    assert best_path_sum(root) == 6


@pytest.mark.parametrize("values", [[5, 3, 8, 1, 4, 9], [10, 20, 30], [4, 2, 6, 1, 3, 5, 7]])
def test_best_path_at_least_downward_for_positive_values(values):
    root = build_bst(values)
    assert best_path_sum(root) >= max_path_sum(root)


def test_product_of_right_leaves_uses_right_leaf():
    root = Node(5, Node(2), Node(7))
    assert product_of_right_leaves(root) == 7


def test_product_ignores_left_leaves_and_inner_right_nodes():
    root = Node(5, Node(2, left=Node(1)), Node(7, left=Node(6)))
    assert product_of_right_leaves(root) == 1


def test_binary_sum_small_tree():
    root = Node(1, Node(0), Node(1))
    assert sum_root_to_leaf_binary(root) == 5


def test_binary_sum_chain_reads_digits():
    root = Node(1, right=Node(0, right=Node(1, left=Node(1))))
    assert sum_root_to_leaf_binary(root) == int("1011", 2)


def test_binary_sum_single_leaf():
    assert sum_root_to_leaf_binary(Node(1)) == 1