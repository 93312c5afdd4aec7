"""Predicates that classify the shape and ordering of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbor.tree import Node, balance, is_leaf


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the subtree rooted at ``tree``."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _children(node: Node) -> Iterator[Node]:
    """Yield the existing children of ``node``, left first."""
    yield from (child for child in (node.left, node.right) if child is not None)


def _is_ordered(tree: Node) -> bool:
    """Return whether values strictly increase in in-order position."""
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def is_full(tree: Optional[Node]) -> bool:
    """Return whether every node has either no children or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return whether the tree is full and all its leaves share one depth."""
    if tree is None:
        return False
    leaf_depths: set[int] = set()
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if is_leaf(node):
            leaf_depths.add(level)
        elif node.left is None or node.right is None:
            return False
        else:
            stack.append((node.right, level + 1))
            stack.append((node.left, level + 1))
    return len(leaf_depths) == 1


def is_complete(tree: Optional[Node]) -> bool:
    """Return whether every level is filled, the last one from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def is_bst(tree: Optional[Node]) -> bool:
    """Return whether the tree is a binary search tree without duplicates."""
    if tree is None:
        return False
    return _is_ordered(tree)


def is_avl(tree: Optional[Node]) -> bool:
    """Return whether the tree is a search tree balanced at every node."""
    if tree is None:
        return False
    return _is_ordered(tree) and all(abs(balance(node)) <= 1 for node in _nodes(tree))


def is_heap(tree: Optional[Node]) -> bool:
    """Return whether the tree is a complete tree with no child above its parent."""
    if not is_complete(tree):
        return False
    return all(
        child.value <= node.value for node in _nodes(tree) for child in _children(node)
    )