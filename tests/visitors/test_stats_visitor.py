"""Unit tests for the StatsVisitor class."""

import errno
import os

from compact_path_tree.cli.main import verify_tree
from compact_path_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from compact_path_tree.path_tree import tree_builder
from compact_path_tree.path_tree.compact_path_tree import CompactPathTree
from compact_path_tree.visitors.permission_action import PermissionAction
from compact_path_tree.visitors.stats_visitor import StatsVisitor, TreeStats


def test_stats_start_empty():
    assert StatsVisitor().stats == TreeStats()


def test_counts(sample_tree):
    visitor = StatsVisitor()
    tree = CompactPathTree.build(sample_tree, visitor)

    assert visitor.stats.files == 3
    assert visitor.stats.directories == 3
    assert visitor.stats.symlinks == 0
    assert visitor.stats.items == tree.entry_count == 6
    assert visitor.stats.bytes >= 6


def test_counts_symlinks(symlink_tree):
    visitor = StatsVisitor()
    tree = CompactPathTree.build(symlink_tree, visitor)

    assert visitor.stats.symlinks == 2
    assert visitor.stats.items == tree.entry_count == 4


def test_excluded_entries_are_not_counted(sample_tree):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("d/")
    visitor = StatsVisitor(rules)
    CompactPathTree.build(sample_tree, visitor)

    assert visitor.stats == TreeStats(files=1, directories=1, symlinks=0, items=2, bytes=visitor.stats.bytes)


def test_entry_skipped_after_visit_is_not_counted(sample_tree, monkeypatch):
    (sample_tree / "secret").write_text("hidden")
    original = tree_builder.get_entry_type

    def fake_get_entry_type(entry):
        if entry.name == "secret":
            raise PermissionError(errno.EACCES, "Permission denied", entry.path)
        return original(entry)

    monkeypatch.setattr(tree_builder, "get_entry_type", fake_get_entry_type)
    visitor = StatsVisitor(permission_action=PermissionAction.IGNORE)
    tree = CompactPathTree.build(sample_tree, visitor)

    assert visitor.stats.items == tree.entry_count == 6
    assert visitor.stats.files == 3
    assert visitor.stats.bytes == sum(os.lstat(path).st_size for path in tree)
    assert verify_tree(tree, visitor.stats.items) == []


def test_directory_with_failed_listing_stays_counted(sample_tree, monkeypatch):
    real_scandir = os.scandir
    locked = sample_tree / "d"

    def fake_scandir(path):
        if os.fspath(path) == os.fspath(locked):
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    visitor = StatsVisitor(permission_action=PermissionAction.IGNORE)
    tree = CompactPathTree.build(sample_tree, visitor)

    assert locked in list(tree)
    assert visitor.stats.items == tree.entry_count == 3
    assert visitor.stats.directories == 2
