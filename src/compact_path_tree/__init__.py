"""Compact path trees.

This package walks a directory subtree once, stores the names it discovers as a
single flat sequence of path components, and replays that sequence into
absolute paths later without touching the filesystem again.
"""

from importlib.metadata import PackageNotFoundError, version

from compact_path_tree.exceptions import CorruptTreeError
from compact_path_tree.path_tree.compact_path_tree import CompactPathTree
from compact_path_tree.visitors.base_visitor import PathVisitor
from compact_path_tree.visitors.permission_action import PermissionAction

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("compact-path-tree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "CompactPathTree",
    "CorruptTreeError",
    "PathVisitor",
    "PermissionAction",
    "__version__",
]
