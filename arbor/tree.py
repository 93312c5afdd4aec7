"""Binary tree nodes and the structural operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Nodes compare and hash by identity, so they can be kept in sets.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the subtree rooted at ``tree``."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.right, node.left) if child is not None)


def _lineage(node: Optional[Node]) -> Iterator[Node]:
    """Yield ``node`` and then each of its ancestors up to the root."""
    while node is not None:
        yield node
        node = node.parent


def insert_left(parent: Optional[Node], value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under no parent")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Optional[Node], value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under no parent")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def is_leaf(node: Optional[Node]) -> bool:
    """Return whether ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return whether ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path, 0 for no tree."""
    if tree is None:
        return 0
    levels = -1
    frontier = [tree]
    while frontier:
        levels += 1
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _node_height(tree: Optional[Node]) -> int:
    """Height counted in nodes: 0 for no tree, 1 for a lone node."""
    return 0 if tree is None else height(tree) + 1


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from ``node`` up to its root, 0 for no node."""
    if node is None:
        return 0
    return sum(1 for _ in _lineage(node.parent))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    return sum(1 for node in _walk(tree) if is_leaf(node))


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes having at least one child."""
    return sum(1 for node in _walk(tree) if not is_leaf(node))


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right one."""
    if tree is None:
        return 0
    return _node_height(tree.left) - _node_height(tree.right)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes.

    A node counts as its own ancestor. Returns None if either node is
    missing or the two nodes belong to different trees.
    """
    if first is None or second is None:
        return None
    ancestors = set(_lineage(first))
    return next((node for node in _lineage(second) if node in ancestors), None)


def _replace_in_parent(old: Node, new: Node) -> None:
    """Hang ``new`` where ``old`` was, under ``old``'s former parent."""
    parent = old.parent
    new.parent = parent
    old.parent = new
    if parent is not None:
        if parent.left is old:
            parent.left = new
        else:
            parent.right = new


def rotate_left(tree: Optional[Node]) -> Node:
    """Rotate the subtree left and return its new root."""
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    inner = pivot.left
    pivot.left = tree
    tree.right = inner
    if inner is not None:
        inner.parent = tree
    _replace_in_parent(tree, pivot)
    return pivot


def rotate_right(tree: Optional[Node]) -> Node:
    """Rotate the subtree right and return its new root."""
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    inner = pivot.right
    pivot.right = tree
    tree.left = inner
    if inner is not None:
        inner.parent = tree
    _replace_in_parent(tree, pivot)
    return pivot