import random

import pytest

from arbor.avl import AVLTree
from arbor.checks import is_avl
from arbor.traversal import inorder, preorder
from arbor.tree import height


def test_construct_skips_duplicates():
    values = [98, 402, 512, 12, 46, 128, 256, 1, 128, 98, 0, 402]
    tree = AVLTree(values)
    assert list(tree) == sorted(set(values))
    assert is_avl(tree.root)


def test_ascending_inserts_stay_balanced():
    tree = AVLTree(range(1, 32))
    assert is_avl(tree.root)
    assert height(tree.root) == 4
    assert len(tree) == 31


def test_single_rotation_on_three_ascending():
    tree = AVLTree([1, 2, 3])
    assert list(preorder(tree.root)) == [2, 1, 3]
    assert tree.root.parent is None


def test_double_rotation():
    tree = AVLTree([3, 1, 2])
    assert list(preorder(tree.root)) == [2, 1, 3]
    assert tree.root.left.parent is tree.root
    assert tree.root.right.parent is tree.root


def test_insert_returns_node_with_value():
    tree = AVLTree([10, 20])
    node = tree.insert(30)
    assert node.value == 30
    assert tree.search(30) is node


def test_insert_duplicate_raises():
    tree = AVLTree([5, 6])
    with pytest.raises(ValueError):
        tree.insert(5)


def test_remove_absent_raises():
    tree = AVLTree([5, 6])
    with pytest.raises(KeyError):
        tree.remove(7)


def test_remove_keeps_balance():
    rng = random.Random(1)
    values = rng.sample(range(1000), 200)
    tree = AVLTree(values)
    remaining = set(values)
    for value in rng.sample(values, 150):
        tree.remove(value)
        remaining.discard(value)
        assert is_avl(tree.root)
    assert list(tree) == sorted(remaining)
    assert 0 <= len(tree) == len(remaining)


def test_remove_all_empties_tree():
    tree = AVLTree([4, 2, 6])
    for value in (2, 4, 6):
        tree.remove(value)
    assert tree.root is None
    assert len(tree) == 0
    assert 4 not in tree


def test_remove_root_with_two_children():
    tree = AVLTree([2, 1, 3])
    tree.remove(2)
    assert list(tree) == [1, 3]
    assert is_avl(tree.root)
    assert tree.root.parent is None


def test_from_sorted_picks_middle():
    values = [1, 21, 32, 34, 62, 68, 79, 87, 98]
    tree = AVLTree.from_sorted(values)
    assert tree.root.value == 62
    assert list(inorder(tree.root)) == values
    assert is_avl(tree.root)


def test_from_sorted_empty():
    tree = AVLTree.from_sorted([])
    assert tree.root is None
    assert list(tree) == []


def test_from_sorted_parent_links():
    tree = AVLTree.from_sorted(list(range(15)))
    stack = [tree.root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)
    assert height(tree.root) == 3