"""Binary search tree nodes and the classic insert, transplant and delete operations."""

from __future__ import annotations

from typing import Optional


def _keys_match(a: Optional["BstNode"], b: Optional["BstNode"]) -> bool:
    """True when both are absent, or both present with equal keys."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.key == b.key


def _is_nil(node: Optional["BstNode"]) -> bool:
    """True when the node is absent or lacks a parent or either child."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


class BstNode:
    """A binary search tree node holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: Optional["BstNode"] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        left = None if self.left is None else self.left.key
        right = None if self.right is None else self.right.key
        return (
            f"BstNode(key={self.key!r}, parent={parent!r}, "
            f"left={left!r}, right={right!r})"
        )

    def add_left_child(self, value: int) -> "BstNode":
        """Replace the left child with a new node and return it."""
        self.left = BstNode(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> "BstNode":
        """Replace the right child with a new node and return it."""
        self.right = BstNode(value, parent=self)
        return self.right

    def copy(self) -> "BstNode":
        """Return a shallow copy sharing this node's parent and children."""
        twin = BstNode(self.key, parent=self.parent)
        twin.left = self.left
        twin.right = self.right
        return twin

    def tree_search(self, value: int) -> Optional["BstNode"]:
        """Find the node holding ``value`` in this subtree, or None."""
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == value:
                return node
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> "BstNode":
        """The node with the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> "BstNode":
        """The node with the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def root(self) -> "BstNode":
        """The topmost ancestor of this node, or the node itself."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> Optional["BstNode"]:
        """The node with the next larger key, or None for the largest key."""
        if self.right is not None:
            return self.right.minimum()
        x: BstNode = self
        y = x.parent
        while y is not None:
            if y.left is not None and y.left.key == x.key:
                return y
            x, y = y, y.parent
        return None

    def tree_successor_simpler(self) -> Optional["BstNode"]:
        """Successor lookup that relies on the sparse-node check.

        A right child only counts when it has a parent and both children,
        so on some tree shapes the result differs from ``tree_successor``.
        Raises ValueError when the walk needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()

        x: BstNode = self
        y = x.parent
        if y is None:
            raise ValueError(f"node {self.key} has no parent to walk up to")
        y_right = y.right
        while _is_nil(y) and _keys_match(x, y_right):
            if y.parent is None:
                raise ValueError(f"node {y.key} has no parent to walk up to")
            x, y = y, y.parent

        if _keys_match(y, x.root()):
            return None
        return y


def tree_insert(root: Optional[BstNode], node: BstNode) -> BstNode:
    """Insert ``node`` below ``root`` by key and return the tree's root."""
    if root is None:
        return node
    current = root
    while True:
        if node.key < current.key:
            if current.left is None:
                current.left = node
                break
            current = current.left
        else:
            if current.right is None:
                current.right = node
                break
            current = current.right
    node.parent = current
    return root


def transplant(
    root: Optional[BstNode], u: BstNode, v: Optional[BstNode]
) -> Optional[BstNode]:
    """Put subtree ``v`` where ``u`` hangs and return the tree's root."""
    parent = u.parent
    if parent is None:
        if v is not None:
            v.parent = None
        return v
    if parent.left is u:
        parent.left = v
    else:
        parent.right = v
    if v is not None:
        v.parent = parent
    return root


def tree_delete(root: Optional[BstNode], z: BstNode) -> Optional[BstNode]:
    """Remove node ``z`` from the tree and return the tree's root."""
    if z.left is None:
        return transplant(root, z, z.right)
    if z.right is None:
        return transplant(root, z, z.left)

    y = z.right.minimum()
    if y.parent is not z:
        root = transplant(root, y, y.right)
        y.right = z.right
        if y.right is not None:
            y.right.parent = y
    root = transplant(root, z, y)
    y.left = z.left
    if y.left is not None:
        y.left.parent = y
    return root