"""Size-based exclusion rules for filtering files by size."""

import os
import stat
from pathlib import Path
from typing import Optional, Union

from humanfriendly import InvalidSize, parse_size

from compact_path_tree.types import PathType
from .base_rules import BaseExclusionRules


def parse_file_size(size_str: str) -> int:
    """Parse human-readable file size to bytes.

    Args:
        size_str: Size string like '1GB', '500MB', '2.5K', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format

    Example:
        >>> parse_file_size("1MB")
        1000000
        >>> parse_file_size("1 KiB")
        1024
    """
    try:
        return int(parse_size(size_str))
    except InvalidSize as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeExclusionRules(BaseExclusionRules):
    """Exclusion rules based on file size limits.

    Regular files larger than the limit are excluded. Directories, symbolic links
    and other entries are never excluded. Sizes are read without following links,
    from the directory entry when one is given.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes.
        root (Optional[Path]): Directory that paths are relative to when no entry is
            given. Defaults to the current directory.

    Example:
        >>> rules = SizeExclusionRules("1MB")
        >>> rules.max_size_bytes
        1000000
        >>> rules.exclude("some/dir/")
        False
    """

    def __init__(self, max_size: Union[str, int], root: Optional[PathType] = None):
        """Initialize size exclusion rules.

        Args:
            max_size: Maximum file size, either a human-readable string ('1GB',
                '500MB', '2.5K') or a number of bytes.
            root: Directory that relative paths are resolved against when
                ``exclude`` is called without an entry.

        Raises:
            ValueError: If max_size is negative or malformed
        """
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        self.root = Path(root) if root is not None else None

    def exclude(self, path: str, entry: Optional[os.DirEntry] = None) -> bool:
        """Check if a file should be excluded based on size.

        Args:
            path: Relative path of the entry; a trailing slash marks a directory.
            entry: The directory entry. Without one, ``path`` is stat'ed relative to
                ``root``.

        Returns:
            True if the entry is a regular file exceeding the size limit.

        Raises:
            OSError: If the entry's metadata cannot be read.
        """
        if path.endswith("/"):
            return False

        if entry is not None:
            info = entry.stat(follow_symlinks=False)
        else:
            info = (self.root / path if self.root is not None else Path(path)).lstat()
        if not stat.S_ISREG(info.st_mode):
            return False
        return info.st_size > self.max_size_bytes

    def has_rules(self) -> bool:
        # Even a zero limit excludes every non-empty file
        return True
