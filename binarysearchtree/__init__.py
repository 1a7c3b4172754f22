"""Binary trees and binary search trees with parent links, DOT export and a demo command."""

__version__ = "0.1.0"

__all__ = ["bst", "cli", "dot", "tree"]