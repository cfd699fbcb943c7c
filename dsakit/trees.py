"""Binary trees built from -1-terminated value streams, and their traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NULL = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from values in preorder, where -1 marks a missing child.

    Running out of values counts as -1.
    """
    items = iter(values)

    def build() -> TreeNode | None:
        value = next(items, NULL)
        if value == NULL:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from values in level order, where -1 marks a missing child."""
    items = iter(values)
    first = next(items, NULL)
    if first == NULL:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, NULL)
        if left != NULL:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, NULL)
        if right != NULL:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: TreeNode | None) -> list[int]:
    """Return values left subtree first, then the node, then the right subtree."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Return values node first, then the left and right subtrees."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Return values of the left and right subtrees first, then the node."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values grouped level by level, top to bottom, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels