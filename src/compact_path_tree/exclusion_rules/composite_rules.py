"""Composite exclusion rules for combining multiple rule types."""

import os
from typing import List, Optional, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that combine several rule objects.

    An entry is excluded if ANY constituent rule excludes it. Rules are evaluated
    in order and evaluation stops at the first exclusion, so cheap rules should
    come first.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent exclusion rules.

    Example:
        >>> from compact_path_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> logs = GitIgnoreExclusionRules()
        >>> logs.add_rule("*.log")
        >>> caches = GitIgnoreExclusionRules()
        >>> caches.add_rule(".cache/")
        >>> composite = CompositeExclusionRules([logs, caches])
        >>> composite.exclude("a/.cache/"), composite.exclude("b.log"), composite.exclude("c.txt")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str, entry: Optional[os.DirEntry] = None) -> bool:
        return any(rule.exclude(path, entry) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Append another rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
