"""A self-balancing AVL search tree of distinct integers."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from arbor.bst import BinarySearchTree
from arbor.tree import Node, balance, rotate_left, rotate_right


def _minimum(node: Node) -> Node:
    """Return the leftmost node of the subtree rooted at ``node``."""
    while node.left is not None:
        node = node.left
    return node


def _build(values: Sequence[int], parent: Optional[Node]) -> Optional[Node]:
    """Build a height-balanced subtree from sorted ``values``."""
    if not values:
        return None
    mid = (len(values) - 1) // 2
    node = Node(values[mid], parent)
    node.left = _build(values[:mid], node)
    node.right = _build(values[mid + 1 :], node)
    return node


class AVLTree(BinarySearchTree):
    """A binary search tree kept balanced by rotations after each change."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    def insert(self, value: int) -> Node:
        """Insert ``value``, rebalance, and return the node holding it.

        Raises ValueError if the value is already present.
        """
        node = super().insert(value)
        self._rebalance_from(node.parent)
        return node

    def remove(self, value: int) -> None:
        """Remove ``value`` and rebalance the tree.

        Raises KeyError if the value is absent.
        """
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            doomed = _minimum(node.right)
        else:
            doomed = node
        parent = doomed.parent
        super().remove(value)
        self._rebalance_from(parent)

    @classmethod
    def from_sorted(cls, values: Sequence[int]) -> AVLTree:
        """Build a tree from values already in ascending order.

        Each subtree is rooted at the middle value of its slice, so no
        rotations are needed.
        """
        tree = cls()
        tree.root = _build(list(values), None)
        return tree

    def _rebalance_from(self, node: Optional[Node]) -> None:
        """Restore the balance of ``node`` and of each of its ancestors."""
        while node is not None:
            factor = balance(node)
            if factor > 1:
                if node.left is not None and balance(node.left) < 0:
                    rotate_left(node.left)
                node = rotate_right(node)
            elif factor < -1:
                if node.right is not None and balance(node.right) > 0:
                    rotate_right(node.right)
                node = rotate_left(node)
            if node.parent is None:
                self.root = node
            node = node.parent