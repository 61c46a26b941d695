"""Binary trees: construction, traversals and structural queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise

NULL_TOKEN = "N"
NULL_VALUE = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(text: str) -> TreeNode | None:
    """Build a tree from space-separated level-order values, ``N`` marking no child."""
    tokens = text.split()
    if not tokens or tokens[0] == NULL_TOKEN:
        return None
    root = TreeNode(int(tokens[0]))
    queue = deque([root])
    pending = iter(tokens[1:])
    while queue:
        node = queue.popleft()
        token = next(pending, None)
        if token is None:
            break
        if token != NULL_TOKEN:
            node.left = TreeNode(int(token))
            queue.append(node.left)
        token = next(pending, None)
        if token is None:
            break
        if token != NULL_TOKEN:
            node.right = TreeNode(int(token))
            queue.append(node.right)
    return root


def tree_from_preorder_tokens(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from preorder values where -1 marks a missing child."""
    tokens = iter(values)

    def build() -> TreeNode | None:
        try:
            value = next(tokens)
        except StopIteration:
            raise ValueError("token sequence ends before the tree is complete") from None
        if value == NULL_VALUE:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left-root-right order."""
    return [node.value for node in _inorder_nodes(root)]


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[int]:
    """Values level by level, left to right."""
    return [node.value for level in _levels(root) for node in level]


def reverse_level_order(root: TreeNode | None) -> list[int]:
    """Values from the deepest level up, each level left to right."""
    return [node.value for level in reversed(list(_levels(root))) for node in level]


def right_side_view(root: TreeNode | None) -> list[int]:
    """The rightmost value on each level, top to bottom."""
    return [level[-1].value for level in _levels(root)]


def max_width(root: TreeNode | None) -> int:
    """Largest span of positions between the ends of any level."""
    if root is None:
        return 0
    best = 0
    level = [(root, 1)]
    while level:
        best = max(best, level[-1][1] - level[0][1] + 1)
        next_level = []
        for node, position in level:
            if node.left is not None:
                next_level.append((node.left, 2 * position))
            if node.right is not None:
                next_level.append((node.right, 2 * position + 1))
        level = next_level
    return best


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _height_and_diameter(root: TreeNode | None) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(root.left)
    right_height, right_diameter = _height_and_diameter(root.right)
    return (
        max(left_height, right_height) + 1,
        max(left_height + right_height + 1, left_diameter, right_diameter),
    )


def diameter(root: TreeNode | None) -> int:
    """Number of nodes on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def is_balanced(root: TreeNode | None) -> bool:
    """True when every node's subtree heights differ by at most one."""

    def balanced_height(node: TreeNode | None) -> int | None:
        if node is None:
            return 0
        left = balanced_height(node.left)
        if left is None:
            return None
        right = balanced_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return balanced_height(root) is not None


def is_bst(root: TreeNode | None) -> bool:
    """True when the in-order values are strictly increasing."""
    values = (node.value for node in _inorder_nodes(root))
    return all(a < b for a, b in pairwise(values))


def is_symmetric(root: TreeNode | None) -> bool:
    """True when the tree is a mirror image of itself."""

    def mirror(a: TreeNode | None, b: TreeNode | None) -> bool:
        if a is None or b is None:
            return a is b
        return a.value == b.value and mirror(a.left, b.right) and mirror(a.right, b.left)

    return root is None or mirror(root.left, root.right)


def count_nodes(root: TreeNode | None) -> int:
    """Total number of nodes."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def lowest_common_ancestor(
    root: TreeNode | None, first: int, second: int
) -> TreeNode | None:
    """Deepest node having nodes valued ``first`` and ``second`` beneath it (or being one)."""
    if root is None:
        return None
    if root.value in (first, second):
        return root
    left = lowest_common_ancestor(root.left, first, second)
    right = lowest_common_ancestor(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _depth(root: TreeNode | None, value: int) -> int | None:
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if node.value == value:
            return depth
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, depth + 1))
    return None


def distance_between(root: TreeNode | None, first: int, second: int) -> int:
    """Number of edges between the nodes valued ``first`` and ``second``."""
    ancestor = lowest_common_ancestor(root, first, second)
    if ancestor is None:
        raise ValueError("values not found in the tree")
    first_depth = _depth(ancestor, first)
    second_depth = _depth(ancestor, second)
    if first_depth is None or second_depth is None:
        raise ValueError("values not found in the tree")
    return first_depth + second_depth