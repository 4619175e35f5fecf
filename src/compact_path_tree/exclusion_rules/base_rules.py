import os
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from compact_path_tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide, entry by entry, whether something found during a walk is
    left out of the tree. Rules see the entry's path relative to the walk's root in
    POSIX form, with a trailing slash for directories, and optionally the directory
    entry itself so they can consult its metadata. File loading and individual rule
    addition are optional capabilities that depend on the rule type.

    Example:
        >>> from compact_path_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.exclude('pkg/module.pyc')
        True
        >>> git_rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str, entry: Optional[os.DirEntry] = None) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            path (str): The entry's path relative to the walk's root, using forward
                slashes, ending in a slash when the entry is a directory.
            entry (Optional[os.DirEntry]): The directory entry, when the caller has one.

        Returns:
            bool: True if the entry should be excluded, False if it should be included.

        Raises:
            OSError: If the rule needs metadata that cannot be read.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types without file support keep this default, which raises.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, in the implementation's syntax.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return True when the rules can exclude anything at all."""
        return True
