"""Unit tests for the ExclusionVisitor class."""

import os

from compact_path_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from compact_path_tree.exclusion_rules.size_rules import SizeExclusionRules
from compact_path_tree.path_tree.compact_path_tree import CompactPathTree
from compact_path_tree.visitors.exclusion_visitor import ExclusionVisitor


def git_rules(*patterns):
    rules = GitIgnoreExclusionRules()
    for pattern in patterns:
        rules.add_rule(pattern)
    return rules


def test_relative_path(sample_tree):
    visitor = ExclusionVisitor(root=sample_tree)
    entries = {entry.name: entry for entry in os.scandir(sample_tree / "d")}

    assert visitor.relative_path(entries["b.txt"]) == "d/b.txt"
    assert visitor.relative_path(entries["e"]) == "d/e/"


def test_start_sets_root(sample_tree):
    visitor = ExclusionVisitor()
    visitor.start(sample_tree)
    (entry,) = [e for e in os.scandir(sample_tree) if e.name == "a.txt"]
    assert visitor.relative_path(entry) == "a.txt"


def test_constructor_root_is_kept_through_build(sample_tree):
    # patterns are matched against paths relative to the given root, not the walked directory
    visitor = ExclusionVisitor(git_rules("/d/e/"), root=sample_tree)
    tree = CompactPathTree.build(sample_tree / "d", visitor)

    assert visitor.root == sample_tree
    assert [p.name for p in tree] == ["b.txt"]


def test_no_rules_includes_everything(sample_tree):
    assert CompactPathTree.build(sample_tree, ExclusionVisitor()) == CompactPathTree.build(sample_tree)


def test_cache_directories_excluded_at_any_depth(sample_tree):
    for parent in (sample_tree, sample_tree / "d" / "e"):
        (parent / ".cache").mkdir()
        (parent / ".cache" / "blob").write_text("x")
    (sample_tree / "d" / ".cache").write_text("a file, not a directory")

    tree = CompactPathTree.build(sample_tree, ExclusionVisitor(git_rules(".cache/")))
    paths = list(tree)

    assert sample_tree / ".cache" not in paths
    assert sample_tree / "d" / "e" / ".cache" not in paths
    assert not any(p.name == "blob" for p in paths)
    assert sample_tree / "d" / ".cache" in paths


def test_anchored_pattern(sample_tree):
    tree = CompactPathTree.build(sample_tree, ExclusionVisitor(git_rules("/d/e/")))
    paths = list(tree)
    assert sample_tree / "d" in paths
    assert sample_tree / "d" / "e" not in paths


def test_size_rules(sample_tree):
    tree = CompactPathTree.build(sample_tree, ExclusionVisitor(SizeExclusionRules(2)))
    names = {p.name for p in tree}
    assert "c.txt" not in names
    assert {"a.txt", "b.txt", "d", "e", "empty"} <= names
