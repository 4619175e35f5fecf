"""Exclusion rules for filtering entries while a tree is built."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .size_rules import SizeExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "SizeExclusionRules",
]
