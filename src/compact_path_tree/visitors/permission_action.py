"""Permission action enum for classifying permission errors during tree construction."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action a visitor takes by default when a permission error reaches it.

    Values:
        WARN: Log a warning and skip the inaccessible item (default behavior)
        IGNORE: Skip the inaccessible item, logging only at debug level
        RAISE: Treat the permission error as fatal and abort construction
    """

    WARN = "warn"
    IGNORE = "ignore"
    RAISE = "raise"
