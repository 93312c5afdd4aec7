# arbor

Linked binary trees of integers for Python. It covers plain binary trees with
parent links, binary search trees, AVL trees and max binary heaps. It also has
functions that measure trees, check their shape and traverse them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building and inspecting trees

`arbor.tree` holds the `Node` dataclass. A node has four fields: `value`,
`parent`, `left` and `right`. Nodes compare and hash by identity.

```python
from arbor.tree import Node, insert_left, insert_right, height, size, leaves, sibling

root = Node(98)
left = insert_left(root, 12)
right = insert_right(root, 402)
insert_right(left, 54)

height(root)      # 2 (edges on the longest downward path)
size(root)        # 4
leaves(root)      # 2
sibling(left)     # the node holding 402
```

`insert_left` and `insert_right` add a new child. If the parent already has a
child on that side, the old child moves down under the new node. Both raise
`ValueError` when the parent is `None`.

The module also provides these functions:

- `depth(node)`: the number of edges up to the root.
- `internal_nodes(tree)`: the number of nodes with at least one child.
- `balance(tree)`: the height of the left subtree minus the height of the right one.
- `is_leaf(node)`, `is_root(node)`
- `uncle(node)`: the sibling of the node's parent, or `None`.
- `lowest_common_ancestor(first, second)`: the deepest node that is an ancestor of both nodes. A node counts as its own ancestor. The result is `None` when either node is missing or the two nodes are in different trees.

`rotate_left` and `rotate_right` rotate the subtree at the node you pass. They
also fix up the link from that node's parent, and they return the node that
ends up on top. Each one raises `ValueError` when there is no child on the side
it needs.

## Traversals

`arbor.traversal` provides generators that yield node values. The functions
are `preorder`, `inorder`, `postorder` and `levelorder`.

```python
from arbor.traversal import inorder, levelorder

list(inorder(root))     # [12, 54, 98, 402]
list(levelorder(root))  # [98, 12, 402, 54]
```

## Shape checks

`arbor.checks` holds predicates that return `True` or `False`:

- `is_full`: every node has either no children or two children.
- `is_perfect`: the tree is full and all its leaves are at the same depth.
- `is_complete`: every level is filled, and the last level is filled from the left.
- `is_bst`: values strictly increase in in-order position, so duplicates are not allowed.
- `is_avl`: the tree is a search tree whose balance is within ±1 at every node.
- `is_heap`: the tree is complete and no child is larger than its parent.

Every check returns `False` for an empty tree (`None`).

## Binary search trees

```python
from arbor.bst import BinarySearchTree

bst = BinarySearchTree([98, 402, 12, 46, 128, 256, 512, 50, 98])
bst.insert(7)
46 in bst          # True
bst.search(128)    # the node holding 128, or None
bst.remove(98)
list(bst)          # values in ascending order
len(bst)           # 9
bst.root           # the root Node, or None when empty
```

The constructor skips values that are repeated. Calling `insert` with a value
that is already in the tree raises `ValueError`. Calling `remove` with a value
that is not in the tree raises `KeyError`. When the removed node has two
children, it takes the value of its in-order successor, and the successor's
node is unlinked instead.

## AVL trees

`AVLTree` is a subclass of `BinarySearchTree`. It rebalances with rotations
after each insertion and removal. Search, membership, iteration and `len`
work the same way as in the base class, and so do the rules for duplicates and
missing values.

```python
from arbor.avl import AVLTree

avl = AVLTree([98, 402, 12, 46, 128, 256, 512, 50])
avl.insert(7)
avl.remove(46)

balanced = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])
```

`from_sorted` expects values that are already in ascending order. It puts the
middle value of each slice at the root of that slice's subtree.

## Max binary heaps

`MaxHeap` stores its values in linked nodes that form a complete binary tree.
The top of the tree is available as `heap.root`.

```python
from arbor.heap import MaxHeap

heap = MaxHeap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
heap.insert(100)
heap.extract()          # 100
heap.to_sorted_list()   # remaining values, largest first; empties the heap
len(heap)               # 0
```

`extract` raises `IndexError` when the heap is empty.

## What it does not do

- Trees cannot be drawn or printed.
- Trees cannot be saved or loaded.
- There is no command-line program; arbor is a library only.