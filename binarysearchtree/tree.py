"""A plain binary tree whose nodes keep a link back to their parent."""

from __future__ import annotations

from typing import Optional


def _values_match(a: Optional["Node"], b: Optional["Node"]) -> bool:
    """True when both are absent, or both present with equal values."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.value == b.value


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional["Node"] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        left = None if self.left is None else self.left.value
        right = None if self.right is None else self.right.value
        return (
            f"Node(value={self.value!r}, parent={parent!r}, "
            f"left={left!r}, right={right!r})"
        )

    def add_left_child(self, value: int) -> "Node":
        """Replace the left child with a new node and return it."""
        self.left = Node(value, parent=self)
        return self.left

    def add_right_child(self, value: int) -> "Node":
        """Replace the right child with a new node and return it."""
        self.right = Node(value, parent=self)
        return self.right

    def copy(self) -> "Node":
        """Return a shallow copy sharing this node's parent and children."""
        twin = Node(self.value, parent=self.parent)
        twin.left = self.left
        twin.right = self.right
        return twin

    def get_node_by_value(self, value: int) -> Optional["Node"]:
        """Find a node with the given value, returned as a shallow copy.

        The search descends into the left subtree whenever there is one and
        only falls back to the right subtree when the left is absent.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Find a node whose value, parent value and child values all match."""
        if (
            self.value == node.value
            and _values_match(node.parent, self.parent)
            and _values_match(node.left, self.left)
            and _values_match(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut away the subtree along the search path to the given value.

        The matching node loses its parent link and every node on the way
        down loses the child link that was followed. Returns whether a
        match was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return 1 + sum(
            child.count_nodes() for child in (self.left, self.right) if child is not None
        )

    def tree_depth(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return max(
            (child.tree_depth() + 1 for child in (self.left, self.right) if child is not None),
            default=0,
        )

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left