"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbor.tree import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node first, then left subtree, then right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        stack.extend(child for child in (node.right, node.left) if child is not None)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values of both subtrees, left then right, before the node."""
    stack = [tree] if tree is not None else []
    visited: list[int] = []
    while stack:
        node = stack.pop()
        visited.append(node.value)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    yield from reversed(visited)


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right within each level."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        queue.extend(child for child in (node.left, node.right) if child is not None)