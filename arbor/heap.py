"""A max binary heap stored as a complete binary tree of nodes."""

from __future__ import annotations

from typing import Iterable, Optional

from arbor.tree import Node


class MaxHeap:
    """A max heap whose nodes are linked as a complete binary tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _node_at(self, position: int) -> Node:
        """Return the node at 1-based level-order ``position``."""
        node = self.root
        for bit in bin(position)[3:]:
            node = node.right if bit == "1" else node.left
        return node

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node where it settled."""
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return self.root
        position = self._size + 1
        parent = self._node_at(position // 2)
        node = Node(value, parent)
        if position % 2:
            parent.right = node
        else:
            parent.left = node
        self._size = position
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        last = self._node_at(self._size)
        self._size -= 1
        if last is self.root:
            self.root = None
            return top
        parent = last.parent
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self.root.value = last.value
        node = self.root
        while True:
            largest = node
            for child in (node.left, node.right):
                if child is not None and child.value > largest.value:
                    largest = child
            if largest is node:
                break
            node.value, largest.value = largest.value, node.value
            node = largest
        return top

    def to_sorted_list(self) -> list[int]:
        """Drain the heap and return its values in descending order."""
        result = []
        while self.root is not None:
            result.append(self.extract())
        return result

    def __len__(self) -> int:
        return self._size