"""Base traversal policy consulted by the tree builder."""

import logging
import os
from pathlib import Path
from typing import Optional

from compact_path_tree.visitors.permission_action import PermissionAction

logger = logging.getLogger(__name__)


class PathVisitor:
    """A visitor that decides which entries are included and which errors are fatal.

    The tree builder consults a visitor for every entry of every directory it lists.
    Each of the three hooks has a usable default, so subclasses override only what
    they need:

    - ``filter`` decides whether an entry (and, for a directory, its whole subtree)
      is included. The default includes everything.
    - ``visit`` observes every included entry. The default does nothing.
    - ``handle_error`` classifies an ``OSError`` as fatal or ignorable. The default
      treats permission errors according to ``permission_action`` and everything
      else as fatal.

    ``filter`` and ``visit`` may raise ``OSError``; the builder routes such errors
    through ``handle_error`` like any filesystem error.

    Attributes:
        permission_action (PermissionAction): How the default ``handle_error`` treats
            ``PermissionError``.

    Example:
        >>> class SkipCaches(PathVisitor):
        ...     def filter(self, entry):
        ...         return entry.name != ".cache"
        >>> SkipCaches().permission_action
        <PermissionAction.WARN: 'warn'>
    """

    def __init__(self, permission_action: PermissionAction = PermissionAction.WARN) -> None:
        self.permission_action = PermissionAction(permission_action)

    def start(self, root: Path) -> None:
        """Called once by the builder with the absolute root before the walk begins."""

    def filter(self, entry: os.DirEntry) -> bool:
        """Determine whether the given entry should be included in the tree.

        When ``True`` is returned, the entry is included. When ``False`` is returned,
        the entry is omitted, including any children for directories. When an
        ``OSError`` is raised, the entry is omitted and ``handle_error`` determines
        whether the construction fails.

        Args:
            entry: The directory entry under consideration.

        Returns:
            True to include the entry, False to skip it.
        """
        return True

    def visit(self, entry: os.DirEntry) -> None:
        """Observe an included entry.

        Called after ``filter`` and only for entries for which it returned True.

        Args:
            entry: The included directory entry.
        """

    def handle_error(
        self,
        error: OSError,
        directory: Path,
        entry: Optional[os.DirEntry] = None,
    ) -> Optional[BaseException]:
        """Classify an error as fatal or ignorable.

        Called for every ``OSError`` raised while building, including errors raised
        by ``filter`` and ``visit``.

        Args:
            error: The error that occurred.
            directory: The directory being processed when the error occurred.
            entry: The entry being processed, or None when the error concerns the
                directory listing itself.

        Returns:
            The exception to raise when the error is fatal, or None to skip the
            offending entry or listing and carry on with its siblings.
        """
        if isinstance(error, PermissionError) and self.permission_action != PermissionAction.RAISE:
            description = f"`{entry.path}`" if entry is not None else f"item in `{directory}`"
            if self.permission_action == PermissionAction.WARN:
                logger.warning("Permission denied reading %s: %s", description, error)
            else:
                logger.debug("Permission denied reading %s: %s", description, error)
            return None
        return error
