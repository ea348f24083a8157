"""Directory tree snapshots.

This package builds immutable, size-aggregated tree representations of directory
subtrees, with support for exclusion patterns, extension filters, depth limits,
metadata projection and per-entry callbacks.
"""

from importlib.metadata import PackageNotFoundError, version

from directory_tree.options import TreeOptions
from directory_tree.tree.permission_action import PermissionAction
from directory_tree.tree.tree_builder import TreeBuilder, build, build_tree
from directory_tree.tree.tree_node import TreeNode
from directory_tree.types import NodeType, SkipReason

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("directory-tree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "NodeType",
    "PermissionAction",
    "SkipReason",
    "TreeBuilder",
    "TreeNode",
    "TreeOptions",
    "build",
    "build_tree",
]
