"""AVL trees: balanced construction and self-balancing insertion."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class AvlNode:
    """An AVL node that records the height of its subtree."""

    value: int
    height: int = 1
    left: AvlNode | None = None
    right: AvlNode | None = None


def _stored_height(node: AvlNode | None) -> int:
    return node.height if node is not None else 0


def node_height(node: AvlNode | None) -> int:
    """Height of a node from its children's stored heights; 0 for None."""
    if node is None:
        return 0
    return max(_stored_height(node.left), _stored_height(node.right)) + 1


def balance_factor(node: AvlNode | None) -> int:
    """Left subtree height minus right subtree height; 0 for None."""
    if node is None:
        return 0
    return _stored_height(node.left) - _stored_height(node.right)


def build_balanced(values: Iterable[int]) -> AvlNode | None:
    """Height-balanced tree over the values, sorted first."""
    items = sorted(values)

    def build(low: int, high: int) -> AvlNode | None:
        if low > high:
            return None
        middle = (low + high) // 2
        node = AvlNode(items[middle])
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        node.height = node_height(node)
        return node

    return build(0, len(items) - 1)


def _rotate_right(node: AvlNode) -> AvlNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    node.height = node_height(node)
    pivot.height = node_height(pivot)
    return pivot


def _rotate_left(node: AvlNode) -> AvlNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    node.height = node_height(node)
    pivot.height = node_height(pivot)
    return pivot


def insert(root: AvlNode | None, value: int) -> AvlNode:
    """Insert a value and return the new root; duplicates are ignored."""
    if root is None:
        return AvlNode(value)
    if value == root.value:
        return root
    if value < root.value:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    root.height = node_height(root)

    factor = balance_factor(root)
    if factor > 1:
        if balance_factor(root.left) < 0:
            root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if factor < -1:
        if balance_factor(root.right) > 0:
            root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def inorder(root: AvlNode | None) -> list[tuple[int, int]]:
    """Pairs (value, height) in left-root-right order."""
    if root is None:
        return []
    return [*inorder(root.left), (root.value, root.height), *inorder(root.right)]


def preorder(root: AvlNode | None) -> list[tuple[int, int]]:
    """Pairs (value, height) in root-left-right order."""
    if root is None:
        return []
    return [(root.value, root.height), *preorder(root.left), *preorder(root.right)]