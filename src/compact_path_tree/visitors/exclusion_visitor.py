"""Visitor that filters entries through exclusion rules."""

import os
from pathlib import Path
from typing import Optional

from compact_path_tree.exclusion_rules.base_rules import BaseExclusionRules
from compact_path_tree.visitors.base_visitor import PathVisitor
from compact_path_tree.visitors.permission_action import PermissionAction


class ExclusionVisitor(PathVisitor):
    """A visitor that leaves out every entry its exclusion rules match.

    Entries are presented to the rules by their path relative to the root of the
    walk, with forward slashes and a trailing slash for directories. An excluded
    directory is never listed, so nothing below it is considered.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Rules to apply. None includes
            everything.
        root (Optional[Path]): Root of the walk. Set by the builder through ``start``
            when not given.

    Example:
        >>> from compact_path_tree.exclusion_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule(".cache/")
        >>> visitor = ExclusionVisitor(rules)
        >>> tree = CompactPathTree.build("/home/user", visitor)  # doctest: +SKIP
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        root: Optional[Path] = None,
        permission_action: PermissionAction = PermissionAction.WARN,
    ) -> None:
        super().__init__(permission_action)
        self.exclusion_rules = exclusion_rules
        self.root = Path(os.path.abspath(root)) if root is not None else None

    def start(self, root: Path) -> None:
        if self.root is None:
            self.root = root

    def relative_path(self, entry: os.DirEntry) -> str:
        """Get the entry's path relative to the root, in the form exclusion rules expect.

        Raises:
            OSError: If the entry's type cannot be determined.
        """
        relative = Path(entry.path).relative_to(self.root).as_posix() if self.root is not None else entry.name
        if entry.is_dir(follow_symlinks=False):
            relative += "/"
        return relative

    def filter(self, entry: os.DirEntry) -> bool:
        if self.exclusion_rules is None:
            return True
        return not self.exclusion_rules.exclude(self.relative_path(entry), entry)
