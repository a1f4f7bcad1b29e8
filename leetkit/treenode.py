"""Binary tree node and helpers using level-order lists with -1 for gaps."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

NULL = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where -1 marks a missing node."""
    if not values or values[0] == NULL:
        return None

    root = TreeNode(values[0])
    queue = deque([root])
    rest = iter(values[1:])

    while queue:
        node = queue.popleft()
        try:
            left = next(rest)
        except StopIteration:
            break
        if left != NULL:
            node.left = TreeNode(left)
            queue.append(node.left)
        try:
            right = next(rest)
        except StopIteration:
            break
        if right != NULL:
            node.right = TreeNode(right)
            queue.append(node.right)

    return root


def tree_to_values(root: Optional[TreeNode]) -> list[int]:
    """Return the level-order values of a tree, -1 for gaps, trailing gaps dropped."""
    if root is None:
        return []

    result: list[int] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(NULL)
            continue
        result.append(node.val)
        queue.extend((node.left, node.right))

    while result and result[-1] == NULL:
        result.pop()
    return result


def tree_equal(t1: Optional[TreeNode], t2: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if t1 is None or t2 is None:
        return t1 is None and t2 is None
    return (
        t1.val == t2.val
        and tree_equal(t1.left, t2.left)
        and tree_equal(t1.right, t2.right)
    )


def tree_levels(root: Optional[TreeNode]) -> list[list[str]]:
    """Return each level of the tree as strings, with "null" for gaps."""
    if root is None:
        return []

    levels: list[list[str]] = []
    current: list[Optional[TreeNode]] = [root]
    while current:
        if all(node is None for node in current):
            break
        levels.append(["null" if node is None else str(node.val) for node in current])
        current = [
            child
            for node in current
            for child in ((None, None) if node is None else (node.left, node.right))
        ]
    return levels


def print_tree(root: Optional[TreeNode]) -> None:
    """Print the tree level by level."""
    if root is None:
        print("Empty tree")
        return
    for depth, level in enumerate(tree_levels(root)):
        print(f"Level {depth}: [{' '.join(level)}]")


def get_height(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    return max(get_height(root.left), get_height(root.right)) + 1


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)