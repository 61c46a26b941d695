"""Binary search trees: construction, insertion and order queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from dsalgo.trees import TreeNode, inorder


def bst_from_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build the binary search tree whose preorder traversal is ``values``."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    stack = [root]
    for value in items:
        parent = None
        while stack and value > stack[-1].value:
            parent = stack.pop()
        node = TreeNode(value)
        if parent is not None:
            parent.right = node
        else:
            stack[-1].left = node
        stack.append(node)
    return root


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value`` and return the root; values already present are ignored."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = node
                break
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = node
                break
            current = current.right
        else:
            break
    return root


def is_dead_end(root: TreeNode | None) -> bool:
    """True when some leaf ``x`` has both ``x - 1`` and ``x + 1`` among the inner nodes.

    The value 0 counts as present, so a leaf holding 1 is a dead end when 2
    is an inner node.
    """
    if root is None:
        return False
    inner = {0}
    leaves: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None and node.right is None:
            leaves.append(node.value)
            continue
        inner.add(node.value)
        for child in (node.left, node.right):
            if child is not None:
                queue.append(child)
    return any(leaf + 1 in inner and leaf - 1 in inner for leaf in leaves)


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """The ``k``-th smallest value (1-based) of a binary search tree."""
    values = inorder(root)
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} is out of range for a tree of {len(values)} nodes")
    return values[k - 1]