"""A binary search tree of distinct integers."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from arbor.traversal import inorder
from arbor.tree import Node, size


class BinarySearchTree:
    """A binary search tree holding each value at most once."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            if value not in self:
                self.insert(value)

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return its new node.

        Raises ValueError if the value is already present.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                raise ValueError(f"{value!r} is already in the tree")

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None if there is none."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def remove(self, value: int) -> None:
        """Remove ``value`` from the tree.

        A node with two children takes its in-order successor's value and
        the successor is removed instead. Raises KeyError if absent.
        """
        node = self.search(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None