"""Linked binary trees: plain trees, search trees, AVL trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "checks", "heap", "traversal", "tree"]