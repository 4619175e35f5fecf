"""Implementation of exclusion rules using .gitignore pattern syntax."""

import os
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from compact_path_tree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library the same way Git matches them,
    including globs, directory-only patterns (ending in /), negation (!) and
    double-asterisk matching. Patterns can come from files (``load_rules``) or be
    added one at a time (``add_rule``); later patterns override earlier ones.

    Directory-only patterns such as ``.cache/`` rely on the trailing slash that the
    exclusion visitor appends to directory paths, so they never match files.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule(".cache/")
        >>> rules.exclude("home/.cache/")
        True
        >>> rules.exclude("home/.cache")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str, entry: Optional[os.DirEntry] = None) -> bool:
        """Check a relative path against the loaded patterns.

        Args:
            path: Relative POSIX path, ending in a slash for directories.
            entry: Unused; patterns only look at the path.

        Returns:
            bool: True if the last matching pattern excludes the path.
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Args:
            rule: A pattern such as "*.pyc", "node_modules/" or "!important.txt".

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.log")
            >>> rules.add_rule("!keep.log")
            >>> rules.exclude("debug.log"), rules.exclude("keep.log")
            (True, False)
        """
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)
