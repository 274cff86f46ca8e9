import pytest

from algodrills.trees import (
    TreeNode,
    bst_insert,
    circular_values,
    complete_tree,
    inorder,
    join_lists,
    left_left_inorder,
    tree_to_circular_list,
)


def _bst(values):
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


def _single_circle(value):
    node = TreeNode(value)
    node.left = node
    node.right = node
    return node


def test_bst_inorder_is_sorted():
    values = [4, 2, 1, 3, 5, 2, 9]
    assert inorder(_bst(values)) == sorted(values)


def test_bst_equal_keys_go_left():
    root = _bst([4, 4])
    assert root.left.data == 4
    assert root.right is None


def test_source_example_tree_to_list():
    values = [4, 2, 1, 3, 5]
    head = tree_to_circular_list(_bst(values))
    assert circular_values(head) == sorted(values)
    assert head.left.data == max(values)
    node = head
    for _ in values:
        assert node.right.left is node
        node = node.right
    assert node is head


def test_tree_to_list_empty():
    assert tree_to_circular_list(None) is None
    assert circular_values(None) == []


def test_join_lists_with_empty_side():
    node = _single_circle(3)
    assert join_lists(None, node) is node
    assert join_lists(node, None) is node


def test_join_two_single_lists():
    head = join_lists(_single_circle(1), _single_circle(2))
    assert circular_values(head) == [1, 2]
    assert head.left.data == 2
    assert head.right.right is head


def test_complete_tree_inorder():
    assert inorder(complete_tree(3, 1)) == [4, 2, 5, 1, 6, 3, 7]


@pytest.mark.parametrize("depth", [1, 2, 4, 5])
def test_complete_tree_has_all_heap_numbers(depth):
    assert sorted(inorder(complete_tree(depth, 1))) == list(range(1, 2**depth))


def test_complete_tree_zero_depth():
    assert complete_tree(0, 1) is None
    assert left_left_inorder(None) == []


def test_left_left_inorder_example():
    assert left_left_inorder(complete_tree(3, 1)) == [4, 2, 1, 6]


def test_left_left_inorder_single_root():
    assert left_left_inorder(complete_tree(1, 1)) == [1]


def test_left_left_inorder_is_ordered_subset():
    root = complete_tree(4, 1)
    full = inorder(root)
    selected = left_left_inorder(root)
    positions = [full.index(v) for v in selected]
    assert positions == sorted(positions)
    assert all(v % 2 == 0 or v == 1 for v in selected)