"""Traversal policies consulted while a compact path tree is built.

This module provides the base visitor with its default inclusion and error
classification behavior, along with ready-made visitors for exclusion rules and
statistics gathering.
"""

from .base_visitor import PathVisitor
from .exclusion_visitor import ExclusionVisitor
from .permission_action import PermissionAction
from .stats_visitor import StatsVisitor, TreeStats

__all__ = [
    "ExclusionVisitor",
    "PathVisitor",
    "PermissionAction",
    "StatsVisitor",
    "TreeStats",
]
