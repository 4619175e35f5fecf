"""Rendering of decoded paths as an indented tree."""

from typing import Iterator, List

from anytree import Node, RenderTree

from compact_path_tree.path_tree.compact_path_tree import CompactPathTree


def to_anytree(tree: CompactPathTree) -> Node:
    """Rebuild the decoded paths of a tree as anytree nodes.

    The whole tree is materialized, so this is meant for display rather than for
    large trees.

    Args:
        tree: The tree to convert.

    Returns:
        A node named after the root whose descendants mirror the stored entries in
        discovery order.
    """
    root = Node(str(tree.root))
    ancestors: List[Node] = [root]
    paths = tree.iter()
    for path in paths:
        del ancestors[paths.depth :]
        ancestors.append(Node(path.name, parent=ancestors[-1]))
    return root


def stream_tree_representation(tree: CompactPathTree) -> Iterator[str]:
    """Generate the tree one line at a time, in the style of the Unix ``tree`` command.

    Example:
        >>> for line in stream_tree_representation(tree):  # doctest: +SKIP
        ...     print(line)
        /srv/project
        ├── src
        │   └── main.py
        └── README.md
    """
    for prefix, _, node in RenderTree(to_anytree(tree)):
        yield f"{prefix}{node.name}"
