"""Command that builds sample trees, queries them and writes Graphviz files."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

from binarysearchtree.bst import BstNode, tree_delete, tree_insert
from binarysearchtree.dot import generate_dotfile, generate_dotfile_bst
from binarysearchtree.tree import Node

_PathLike = Union[str, Path]


def build_demo_bst() -> BstNode:
    """Build the sample binary search tree rooted at 15."""
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


def _start_tree() -> Node:
    root = Node(5)
    root.add_left_child(3)
    root.add_right_child(7)
    return root


def _grow_tree(root: Node) -> Node:
    if root.left is not None:
        root.left.add_left_child(2)
        root.left.add_right_child(4)
    if root.right is not None:
        root.right.add_right_child(10)
    return root


def build_demo_tree() -> Node:
    """Build the sample plain binary tree rooted at 5."""
    return _grow_tree(_start_tree())


def run_bst_demo(out_dir: _PathLike) -> BstNode:
    """Exercise the search tree operations, printing results and writing dot files."""
    out = Path(out_dir)
    root = build_demo_bst()
    generate_dotfile_bst(root, out / "bst_graph.dot")

    for key in (15, 9, 22):
        found = root.tree_search(key)
        if found is None:
            print(f"tree search result of key {key} is not found")
        else:
            print(f"tree search result of key {key} is found -> {found.key}")

    min_node = root.minimum()
    print(f"minimum result {min_node.key}")
    max_node = root.maximum()
    print(f"maximum result {max_node.key}")
    print(f"root node {max_node.root().key}")

    for key in (2, 20, 15, 13, 9, 7, 22):
        node = root.tree_search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.tree_successor_simpler()
        if successor is None:
            print(f"successor of node ({key}) is not found")
        else:
            print(f"successor of node ({key}) is {successor.key}")

    print("\n--- INSERT TEST ---")
    new_node = BstNode(2201)
    root = tree_insert(root, new_node)
    insert_path = out / "bst_after_insert.dot"
    generate_dotfile_bst(root, insert_path)
    print(f"Inserted node {new_node.key}, DOT file written to {insert_path}")

    print("\n--- DELETE TEST ---")
    target = root.tree_search(4)
    if target is None:
        print("Node 4 not found for deletion.")
    else:
        new_root = tree_delete(root, target)
        if new_root is not None:
            root = new_root
        delete_path = out / "bst_after_delete.dot"
        generate_dotfile_bst(root, delete_path)
        print(f"Deleted node 4, DOT file written to {delete_path}")
    return root


def run_binary_tree_demo(out_dir: _PathLike) -> Node:
    """Exercise the plain binary tree operations, printing results and writing dot files."""
    out = Path(out_dir)
    root = _start_tree()
    generate_dotfile(root, out / "prime.dot")

    _grow_tree(root)
    generate_dotfile(root, out / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    if root.right is not None:
        print(f"Amount of nodes in current subtree: {root.right.count_nodes()}")

    left_subtree = root.get_node_by_value(3)
    print(f"left subtree seek by value {left_subtree!r}")
    if left_subtree is not None:
        same = root.get_node_by_full_property(left_subtree)
        print(f"left subtree seek by full property {same!r}")

    trimmed = root.copy()
    flag = trimmed.discard_node_by_value(3)
    print(f"status of node deletion: {str(flag).lower()}")
    generate_dotfile(trimmed, out / "prime_t3.dot")

    print(f"Depth after discard {trimmed.tree_depth()}")
    print(f"Count nodes after discard {trimmed.count_nodes()}")

    generate_dotfile(root, out / "prime_t4.dot")
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the search tree demo, or the plain binary tree demo on request."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Build sample trees, query them and write Graphviz files.",
    )
    parser.add_argument(
        "--out-dir",
        default=".",
        help="directory that receives the .dot files (default: current directory)",
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="run the plain binary tree demo instead of the search tree demo",
    )
    args = parser.parse_args(argv)

    if args.binary_tree:
        run_binary_tree_demo(args.out_dir)
    else:
        run_bst_demo(args.out_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())