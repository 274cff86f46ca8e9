"""Binary trees: BST insertion, conversion to a circular list and left-child traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; also used as a node of a circular doubly linked list."""

    data: int
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


def bst_insert(root: Optional[TreeNode], data: int) -> TreeNode:
    """Insert ``data`` into a BST (equal keys go left) and return the root."""
    if root is None:
        return TreeNode(data)
    if data <= root.data:
        root.left = bst_insert(root.left, data)
    else:
        root.right = bst_insert(root.right, data)
    return root


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is None:
        return
    yield from _inorder(root.left)
    yield root.data
    yield from _inorder(root.right)


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in inorder."""
    return list(_inorder(root))


def _link(a: TreeNode, b: TreeNode) -> None:
    a.right = b
    b.left = a


def join_lists(list_a: Optional[TreeNode], list_b: Optional[TreeNode]) -> Optional[TreeNode]:
    """Append circular list ``list_b`` to circular list ``list_a``; return the head."""
    if list_a is None:
        return list_b
    if list_b is None:
        return list_a
    a_last = list_a.left
    b_last = list_b.left
    _link(a_last, list_b)  # type: ignore[arg-type]
    _link(b_last, list_a)  # type: ignore[arg-type]
    return list_a


def tree_to_circular_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Turn a tree into a sorted circular doubly linked list in place; return its head."""
    if root is None:
        return None
    left_list = tree_to_circular_list(root.left)
    right_list = tree_to_circular_list(root.right)
    root.left = root
    root.right = root
    return join_lists(join_lists(left_list, root), right_list)


def circular_values(head: Optional[TreeNode]) -> list[int]:
    """Return the values once around a circular list, following right links."""
    values: list[int] = []
    node = head
    while node is not None:
        values.append(node.data)
        node = node.right
        if node is head:
            break
    return values


def complete_tree(depth: int, value: int = 1) -> Optional[TreeNode]:
    """Build a complete tree of ``depth`` levels numbered like a heap from ``value``."""
    if depth < 1:
        return None
    return TreeNode(
        value,
        left=complete_tree(depth - 1, value * 2),
        right=complete_tree(depth - 1, value * 2 + 1),
    )


def left_left_inorder(root: Optional[TreeNode]) -> list[int]:
    """Return, in inorder, the root and every node that is a left child."""

    def walk(node: Optional[TreeNode], is_left: bool) -> Iterator[int]:
        if node is None:
            return
        yield from walk(node.left, True)
        if is_left:
            yield node.data
        yield from walk(node.right, False)

    return list(walk(root, True))