"""Compact immutable representation of the paths within a directory.

This module provides the main CompactPathTree class, which stores the names found
by a depth-first walk as one flat buffer of components and replays it into
absolute paths on demand.
"""

import os
from pathlib import Path
from typing import Any, Iterator, Optional

from compact_path_tree.path_tree.path_iterator import CompactPathTreeIterator, iter_components
from compact_path_tree.path_tree.tree_builder import TreeBuilder
from compact_path_tree.types import COMPONENT_SEPARATOR, Component, PathType
from compact_path_tree.visitors.base_visitor import PathVisitor


class CompactPathTree:
    """A compact immutable representation of the paths within a directory.

    The tree stores every included entry as a name followed, after the entry's
    children if it is a directory, by an ``Up`` marker. All components live in a
    single string, which is far smaller than one path object per entry.

    A tree is built once with ``build`` and never changes afterwards. Iterating it
    yields the absolute path of every included entry, parents before children, in
    the order the entries were discovered. The root itself is not yielded.

    Symbolic Link Behavior:
        Symbolic links are recorded in the tree but never followed, even when they
        point at directories.

    Permission Handling:
        Errors met during the walk are classified by the visitor. The default
        visitor logs permission errors and skips the inaccessible entry or
        listing; every other error aborts the build.

    Attributes:
        root (Path): The absolute path the tree was built from.
        raw (str): The encoded buffer.

    Example:
        >>> tree = CompactPathTree.build(".")  # doctest: +SKIP
        >>> for path in tree:  # doctest: +SKIP
        ...     print(path)
        /home/user/project/src
        /home/user/project/src/main.py
    """

    __slots__ = ("_root", "_raw")

    def __init__(self, root: PathType, raw: str) -> None:
        """Wrap an already encoded buffer.

        Most callers want ``build`` instead.

        Args:
            root: The directory the buffer is relative to.
            raw: The encoded buffer.
        """
        object.__setattr__(self, "_root", Path(os.path.abspath(root)))
        object.__setattr__(self, "_raw", raw)

    @classmethod
    def build(cls, root: PathType, visitor: Optional[PathVisitor] = None) -> "CompactPathTree":
        """Construct a tree by doing a depth-first traversal of the given directory.

        The visitor determines which entries are included and which errors are
        fatal. Nothing is returned when a fatal error occurs, so a caller only ever
        sees a complete tree.

        Args:
            root: The directory to walk. Made absolute without resolving symlinks.
            visitor: The traversal policy. Defaults to a plain ``PathVisitor``.

        Returns:
            The completed tree.

        Raises:
            OSError: Any error the visitor classified as fatal.

        Example:
            >>> tree = CompactPathTree.build("/srv/data")  # doctest: +SKIP
            >>> tree.entry_count  # doctest: +SKIP
            1284
        """
        absolute_root = Path(os.path.abspath(root))
        raw = TreeBuilder(absolute_root, visitor if visitor is not None else PathVisitor()).build()
        return cls(absolute_root, raw)

    @property
    def root(self) -> Path:
        """The root path this tree was constructed from."""
        return self._root

    @property
    def raw(self) -> str:
        """The underlying encoded buffer, for diagnostics and size measurement."""
        return self._raw

    @property
    def entry_count(self) -> int:
        """Number of entries stored in the tree."""
        return len(self) // 2

    def iter(self) -> CompactPathTreeIterator:
        """Get an iterator over the paths stored in this tree.

        The root path isn't included, only its contents are. Paths come in a
        depth-first order with parents before children. No other guarantees are
        made with regards to ordering.

        Returns:
            A fresh, independent iterator.
        """
        return CompactPathTreeIterator(self._root, self._raw)

    def components(self) -> Iterator[Component]:
        """Iterate over the components of the encoded buffer."""
        return iter_components(self._raw)

    def __iter__(self) -> CompactPathTreeIterator:
        return self.iter()

    def __len__(self) -> int:
        if not self._raw:
            return 0
        return self._raw.count(COMPONENT_SEPARATOR) + 1

    def __bool__(self) -> bool:
        # A built tree is a result even when the directory was empty
        return True

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompactPathTree):
            return NotImplemented
        return self._root == other._root and self._raw == other._raw

    def __hash__(self) -> int:
        return hash((self._root, self._raw))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={str(self._root)!r}, entries={self.entry_count})"
