"""Unit tests for tree rendering."""

from compact_path_tree.cli.render import stream_tree_representation, to_anytree
from compact_path_tree.path_tree.compact_path_tree import CompactPathTree


def test_to_anytree(sample_tree):
    root = to_anytree(CompactPathTree.build(sample_tree))

    assert root.name == str(sample_tree)
    assert sorted(child.name for child in root.children) == ["a.txt", "d", "empty"]
    (d,) = [child for child in root.children if child.name == "d"]
    (e,) = [child for child in d.children if child.name == "e"]
    assert [child.name for child in e.children] == ["c.txt"]
    assert len(root.descendants) == 6


def test_stream_tree_representation(tmp_path):
    (tmp_path / "d").mkdir()
    (tmp_path / "d" / "b").touch()

    lines = list(stream_tree_representation(CompactPathTree.build(tmp_path)))

    assert lines == [str(tmp_path), "└── d", "    └── b"]


def test_empty_tree(tmp_path):
    assert list(stream_tree_representation(CompactPathTree.build(tmp_path))) == [str(tmp_path)]
