from typing import Iterator, Optional

import pytest

from binarysearchtree.bst import BstNode, transplant, tree_delete, tree_insert


def _build() -> BstNode:
    root = BstNode(15)
    six = root.add_left_child(6)
    eighteen = root.add_right_child(18)
    eighteen.add_left_child(17)
    eighteen.add_right_child(20)
    three = six.add_left_child(3)
    seven = six.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)
    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def _inorder(node: Optional[BstNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.key
    yield from _inorder(node.right)


def _links_consistent(node: BstNode) -> bool:
    for child in (node.left, node.right):
        if child is not None:
            if child.parent is not node or not _links_consistent(child):
                return False
    return True


KEYS = [2, 3, 4, 6, 7, 9, 13, 15, 17, 18, 20]


def test_built_tree_is_ordered():
    root = _build()
    assert list(_inorder(root)) == KEYS
    assert _links_consistent(root)


@pytest.mark.parametrize("key", [15, 9, 2, 20, 13])
def test_search_finds_existing(key):
    root = _build()
    found = root.tree_search(key)
    assert found is not None
    assert found.key == key
    assert found.root() is root


def test_search_missing_returns_none():
    assert _build().tree_search(22) is None


def test_minimum_and_maximum():
    root = _build()
    assert root.minimum().key == 2
    assert root.maximum().key == 20


def test_root_from_maximum():
    root = _build()
    assert root.maximum().root() is root
    assert root.root() is root


def test_copy_shares_links():
    root = _build()
    node = root.tree_search(6)
    twin = node.copy()
    assert twin is not node
    assert twin.key == 6
    assert twin.parent is root
    assert twin.left is node.left and twin.right is node.right


def test_add_child_sets_parent():
    node = BstNode(10)
    left = node.add_left_child(5)
    right = node.add_right_child(12)
    assert node.left is left and node.right is right
    assert left.parent is node and right.parent is node


def test_tree_successor_follows_sorted_order():
    root = _build()
    for current, following in zip(KEYS, KEYS[1:]):
        successor = root.tree_search(current).tree_successor()
        assert successor.key == following
    assert root.tree_search(20).tree_successor() is None


@pytest.mark.parametrize(
    "key, expected",
    [(2, 3), (15, 17), (9, 13), (20, 18), (13, 6), (7, 6)],
)
def test_tree_successor_simpler(key, expected):
    root = _build()
    assert root.tree_search(key).tree_successor_simpler().key == expected


def test_tree_successor_simpler_root_without_full_right_raises():
    root = BstNode(5)
    root.add_left_child(3)
    with pytest.raises(ValueError):
        root.tree_successor_simpler()


def test_insert_into_empty():
    node = BstNode(8)
    assert tree_insert(None, node) is node


def test_insert_large_key():
    root = _build()
    node = BstNode(2201)
    assert tree_insert(root, node) is root
    assert root.maximum() is node
    assert node.parent.key == 20
    assert list(_inorder(root)) == KEYS + [2201]
    assert _links_consistent(root)


def test_insert_equal_key_goes_right():
    root = BstNode(5)
    dup = BstNode(5)
    tree_insert(root, dup)
    assert root.right is dup and root.left is None


def test_delete_leaf():
    root = _build()
    target = root.tree_search(4)
    assert tree_delete(root, target) is root
    assert root.tree_search(4) is None
    assert root.tree_search(3).right is None
    assert list(_inorder(root)) == [k for k in KEYS if k != 4]


def test_delete_node_with_only_right_child():
    root = _build()
    tree_delete(root, root.tree_search(7))
    six = root.tree_search(6)
    assert six.right.key == 13
    assert six.right.parent is six
    assert list(_inorder(root)) == [k for k in KEYS if k != 7]
    assert _links_consistent(root)


def test_delete_node_with_two_children():
    root = _build()
    tree_delete(root, root.tree_search(6))
    assert root.left.key == 7
    assert list(_inorder(root)) == [k for k in KEYS if k != 6]
    assert _links_consistent(root)


def test_delete_root_returns_new_root():
    root = _build()
    new_root = tree_delete(root, root)
    assert new_root.key == 17
    assert new_root.parent is None
    assert list(_inorder(new_root)) == [k for k in KEYS if k != 15]
    assert _links_consistent(new_root)


def test_delete_only_node_leaves_empty_tree():
    root = BstNode(1)
    assert tree_delete(root, root) is None


def test_transplant_at_root():
    root = _build()
    replacement = root.left
    new_root = transplant(root, root, replacement)
    assert new_root is replacement
    assert replacement.parent is None


def test_transplant_below_root():
    root = _build()
    eighteen = root.right
    new_node = BstNode(19)
    assert transplant(root, eighteen, new_node) is root
    assert root.right is new_node
    assert new_node.parent is root