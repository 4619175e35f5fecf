"""Unit tests for decoding encoded buffers."""

import os
from pathlib import Path

import pytest

from compact_path_tree.exceptions import CorruptTreeError
from compact_path_tree.path_tree.path_iterator import CompactPathTreeIterator, iter_components
from compact_path_tree.types import Component, ComponentKind

ROOT = Path(os.path.abspath(os.sep)) / "root"


def encode(*parts):
    return os.sep.join(parts)


def test_decode_nested():
    raw = encode("d", "b", "..", "c", "..", "..", "f", "..")
    assert list(CompactPathTreeIterator(ROOT, raw)) == [ROOT / "d", ROOT / "d" / "b", ROOT / "d" / "c", ROOT / "f"]


def test_decode_empty():
    assert list(CompactPathTreeIterator(ROOT, "")) == []


def test_depth_tracks_current_path():
    iterator = CompactPathTreeIterator(ROOT, encode("d", "b", "..", "..", "f", ".."))
    assert (next(iterator), iterator.depth) == (ROOT / "d", 1)
    assert (next(iterator), iterator.depth) == (ROOT / "d" / "b", 2)
    assert (next(iterator), iterator.depth) == (ROOT / "f", 1)
    with pytest.raises(StopIteration):
        next(iterator)


def test_names_with_dots_are_names():
    raw = encode("...", "..", ".hidden", "..")
    assert list(CompactPathTreeIterator(ROOT, raw)) == [ROOT / "...", ROOT / ".hidden"]


def test_up_above_root_is_corrupt():
    iterator = CompactPathTreeIterator(ROOT, encode("a", "..", ".."))
    assert next(iterator) == ROOT / "a"
    with pytest.raises(CorruptTreeError) as excinfo:
        next(iterator)
    assert excinfo.value.component == ".."
    assert excinfo.value.position == len(encode("a", "..")) + len(os.sep)


@pytest.mark.parametrize("raw", [encode("a", "", ".."), encode(".", ".."), os.sep])
def test_non_name_components_are_corrupt(raw):
    with pytest.raises(CorruptTreeError):
        list(CompactPathTreeIterator(ROOT, raw))


def test_iter_components():
    components = list(iter_components(encode("d", "b", "..", "..")))
    assert [c.kind for c in components] == [ComponentKind.NAME, ComponentKind.NAME, ComponentKind.UP, ComponentKind.UP]
    assert components[:2] == [Component.of("d"), Component.of("b")]


def test_iter_components_rejects_empty_component():
    with pytest.raises(CorruptTreeError):
        list(iter_components(encode("a", "", "..")))
