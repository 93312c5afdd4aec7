import random

import pytest

from arbor.checks import is_heap
from arbor.heap import MaxHeap
from arbor.traversal import levelorder
from arbor.tree import size


VALUES = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def test_construct_is_heap():
    heap = MaxHeap(VALUES)
    assert is_heap(heap.root)
    assert len(heap) == len(VALUES)
    assert size(heap.root) == len(VALUES)
    assert heap.root.value == max(VALUES)


def test_insert_returns_settled_node():
    heap = MaxHeap([10, 5])
    node = heap.insert(20)
    assert node is heap.root
    assert node.value == 20
    leaf = heap.insert(1)
    assert leaf.value == 1
    assert leaf.parent is not None


def test_insert_fills_level_order():
    heap = MaxHeap([3, 2, 1])
    assert list(levelorder(heap.root)) == [3, 2, 1]
    heap.insert(0)
    assert heap.root.left.left.value == 0


def test_duplicates_allowed():
    heap = MaxHeap([5, 5, 5])
    assert len(heap) == 3
    assert heap.to_sorted_list() == [5, 5, 5]


def test_extract_returns_max_and_keeps_heap():
    heap = MaxHeap(VALUES)
    expected = sorted(VALUES, reverse=True)
    for value in expected[:5]:
        assert heap.extract() == value
        assert is_heap(heap.root)
    assert len(heap) == len(VALUES) - 5
    assert size(heap.root) == len(heap)


def test_extract_single():
    heap = MaxHeap([42])
    assert heap.extract() == 42
    assert heap.root is None
    assert len(heap) == 0


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract()


def test_to_sorted_list_descending_and_drains():
    heap = MaxHeap(VALUES)
    assert heap.to_sorted_list() == sorted(VALUES, reverse=True)
    assert heap.root is None
    assert len(heap) == 0


def test_random_round_trip():
    rng = random.Random(7)
    values = [rng.randrange(-500, 500) for _ in range(300)]
    heap = MaxHeap(values)
    assert is_heap(heap.root)
    assert heap.to_sorted_list() == sorted(values, reverse=True)


def test_empty_heap_sorted_list():
    heap = MaxHeap()
    assert heap.to_sorted_list() == []
    assert len(heap) == 0