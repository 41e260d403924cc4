import pytest

from dsakit.binary_tree import Node, in_order, post_order, pre_order


@pytest.fixture
def sample_tree():
    #      4
    #     / \
    #    1   6
    #   / \
    #  5   2
    return Node(4, Node(1, Node(5), Node(2)), Node(6))


def test_pre_order(sample_tree):
    assert pre_order(sample_tree) == [4, 1, 5, 2, 6]


def test_post_order(sample_tree):
    assert post_order(sample_tree) == [5, 2, 1, 6, 4]


def test_in_order(sample_tree):
    assert in_order(sample_tree) == [5, 1, 2, 4, 6]


@pytest.mark.parametrize("traversal", [pre_order, post_order, in_order])
def test_empty_tree(traversal):
    assert traversal(None) == []


@pytest.mark.parametrize("traversal", [pre_order, post_order, in_order])
def test_single_node(traversal):
    assert traversal(Node(7)) == [7]


@pytest.mark.parametrize("traversal", [pre_order, post_order, in_order])
def test_traversals_visit_every_node_once(sample_tree, traversal):
    assert sorted(traversal(sample_tree)) == [1, 2, 4, 5, 6]


def test_root_position(sample_tree):
    assert pre_order(sample_tree)[0] == sample_tree.data
    assert post_order(sample_tree)[-1] == sample_tree.data


def test_linked_representation():
    root = Node(2)
    root.left = Node(1)
    root.right = Node(4)
    assert in_order(root) == [1, 2, 4]
    assert root.left.left is None and root.right.right is None