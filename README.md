# binarysearchtree

Small, readable implementations of a plain binary tree and a binary search
tree whose nodes keep links to their parent, together with a writer that
turns a tree into a Graphviz DOT graph.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## The binary search tree

`binarysearchtree.bst.BstNode` is a node holding an integer `key`, its
`parent` and its two children `left` and `right`. Children can be added by
hand with `add_left_child` and `add_right_child`, which replace the child on
that side with a new node whose parent is the node it was added to, and
return the new node.

```python
from binarysearchtree.bst import BstNode, tree_insert, tree_delete

root = BstNode(15)
root.add_left_child(6)
root.add_right_child(18)

found = root.tree_search(6)      # the node holding 6, or None
print(root.minimum().key)        # 6
print(root.maximum().key)        # 18
```

Further operations:

- `BstNode.copy()` returns a shallow copy sharing the node's parent and
  children.
- `BstNode.root()` walks parent links up to the top of the tree.
- `BstNode.tree_successor()` returns the node with the next larger key, or
  `None` for the largest key.
- `BstNode.tree_successor_simpler()` is a variant that only follows a right
  child when that child has a parent and both children of its own, so on some
  tree shapes its answer differs from `tree_successor()`. It raises
  `ValueError` when its walk needs a parent that does not exist.
- `tree_insert(root, node)` places `node` in its ordered position (equal keys
  go right) and returns the tree's root; with `root` of `None` the node itself
  becomes the root.
- `transplant(root, u, v)` puts subtree `v` where `u` hangs and returns the
  tree's root.
- `tree_delete(root, z)` removes node `z` and returns the tree's root, which
  changes when `z` was the root.

```python
root = tree_insert(root, BstNode(20))
root = tree_delete(root, root.tree_search(6))
```

## The plain binary tree

`binarysearchtree.tree.Node` holds an integer `value`, its `parent` and its
`left` and `right` children, with `add_left_child` and `add_right_child` as
above, and:

- `get_node_by_value(value)` returns a shallow copy of a matching node. It
  descends into the left subtree whenever there is one and only tries the
  right subtree when the left is absent.
- `get_node_by_full_property(node)` finds a node whose value, parent value and
  child values all match those of `node`, searching in the same way.
- `discard_node_by_value(value)` cuts the links along that same search path:
  the matching node loses its parent link and every node on the way down loses
  the child link that was followed. It returns whether a match was found.
- `count_nodes()` counts the nodes of the subtree, this node included.
- `tree_depth()` is the number of edges on the longest path down; a lone node
  has depth 0.
- `sibling()` returns the other child of the node's parent, or `None`.
- `copy()` returns a shallow copy sharing parent and children.

## DOT output

`binarysearchtree.dot` renders a tree as an undirected graph named `tree`,
one `parent--child;` edge per line, each node's edges written before those of
its left and then its right subtree:

```python
from binarysearchtree.dot import bst_to_dot, generate_dotfile_bst

print(bst_to_dot(root))
generate_dotfile_bst(root, "bst_graph.dot")
```

`tree_to_dot` and `generate_dotfile` do the same for `Node` trees. The
`generate_*` functions write the file and return its path. Drawing the graph
is left to Graphviz, for example `dot -Tpng bst_graph.dot`.

## Command line

```
binarysearchtree
```

This builds a sample binary search tree rooted at 15, prints the results of
searches, minimum, maximum, root lookup and successor queries, then inserts
node 2201 and deletes node 4, writing `bst_graph.dot`, `bst_after_insert.dot`
and `bst_after_delete.dot` along the way.

Options:

- `--out-dir DIR` writes the `.dot` files into `DIR` (default: the current
  directory).
- `--binary-tree` runs the plain binary tree demonstration instead, which
  prints depth, node counts and lookups and writes `prime.dot`,
  `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.

The same demonstrations are available from Python as
`binarysearchtree.cli.run_bst_demo(out_dir)` and
`binarysearchtree.cli.run_binary_tree_demo(out_dir)`; the sample trees come
from `build_demo_bst()` and `build_demo_tree()`.

## What it does not do

The trees are not self-balancing, and there is no deletion by key: find the
node with `tree_search` first and pass it to `tree_delete`.