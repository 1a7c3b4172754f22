"""Render trees as undirected Graphviz graphs."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Protocol, TypeVar, Union

from binarysearchtree.bst import BstNode
from binarysearchtree.tree import Node

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


class _Linked(Protocol):
    left: "_Linked | None"
    right: "_Linked | None"


_N = TypeVar("_N", bound=_Linked)


def _edges(node: _N, label: Callable[[_N], int]) -> Iterator[str]:
    """Yield one edge line per child, then descend left before right."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        yield from _edges(child, label)


def _render(root: _N, label: Callable[[_N], int]) -> str:
    return _PREAMBLE + "".join(_edges(root, label)) + _EPILOGUE


def tree_to_dot(root: Node) -> str:
    """Graphviz text for a plain binary tree, labelled by node value."""
    return _render(root, lambda node: node.value)


def bst_to_dot(root: BstNode) -> str:
    """Graphviz text for a binary search tree, labelled by node key."""
    return _render(root, lambda node: node.key)


def generate_dotfile(root: Node, output_path: Union[str, Path]) -> Path:
    """Write the Graphviz text of a plain binary tree to ``output_path``."""
    path = Path(output_path)
    path.write_text(tree_to_dot(root), encoding="utf-8")
    return path


def generate_dotfile_bst(root: BstNode, output_path: Union[str, Path]) -> Path:
    """Write the Graphviz text of a binary search tree to ``output_path``."""
    path = Path(output_path)
    path.write_text(bst_to_dot(root), encoding="utf-8")
    return path