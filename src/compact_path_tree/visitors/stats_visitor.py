"""Visitor that gathers statistics about the entries included in a tree."""

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from compact_path_tree.exclusion_rules.base_rules import BaseExclusionRules
from compact_path_tree.visitors.exclusion_visitor import ExclusionVisitor
from compact_path_tree.visitors.permission_action import PermissionAction


@dataclass
class TreeStats:
    """Counts accumulated while a tree is built.

    Attributes:
        files: Number of regular files.
        directories: Number of directories (the root is not counted).
        symlinks: Number of symbolic links.
        items: Number of included entries of any kind.
        bytes: Sum of the sizes reported by ``lstat`` for every included entry.
    """

    files: int = 0
    directories: int = 0
    symlinks: int = 0
    items: int = 0
    bytes: int = 0


class StatsVisitor(ExclusionVisitor):
    """An exclusion visitor that also counts what it includes.

    Metadata is read without following symbolic links. On some platforms this is
    an extra system call per entry and slows the walk down noticeably.

    Only entries that end up in the tree are counted: an entry the builder fails
    to classify after it was visited is taken back out when the error is ignored.

    Attributes:
        stats (TreeStats): The counts gathered so far.

    Example:
        >>> visitor = StatsVisitor()
        >>> tree = CompactPathTree.build("/srv/data", visitor)  # doctest: +SKIP
        >>> visitor.stats.items == tree.entry_count  # doctest: +SKIP
        True
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        root: Optional[Path] = None,
        permission_action: PermissionAction = PermissionAction.WARN,
    ) -> None:
        super().__init__(exclusion_rules, root, permission_action)
        self.stats = TreeStats()
        self._pending: Optional[Tuple[os.DirEntry, os.stat_result]] = None

    def filter(self, entry: os.DirEntry) -> bool:
        # The builder moved on, so the previously visited entry was recorded
        self._pending = None
        return super().filter(entry)

    def visit(self, entry: os.DirEntry) -> None:
        info = entry.stat(follow_symlinks=False)
        self._count(info, 1)
        self._pending = (entry, info)

    def handle_error(
        self,
        error: OSError,
        directory: Path,
        entry: Optional[os.DirEntry] = None,
    ) -> Optional[BaseException]:
        fatal = super().handle_error(error, directory, entry)
        # An error for the entry just visited means the builder could not classify it,
        # and skipping it leaves it out of the tree
        if fatal is None and self._pending is not None and self._pending[0] is entry:
            self._count(self._pending[1], -1)
        self._pending = None
        return fatal

    def _count(self, info: os.stat_result, sign: int) -> None:
        if stat.S_ISREG(info.st_mode):
            self.stats.files += sign
        elif stat.S_ISDIR(info.st_mode):
            self.stats.directories += sign
        elif stat.S_ISLNK(info.st_mode):
            self.stats.symlinks += sign

        self.stats.items += sign
        self.stats.bytes += sign * info.st_size
