"""Sequential decoding of encoded path buffers."""

from pathlib import Path
from typing import Iterator, Optional, Tuple

from compact_path_tree.exceptions import CorruptTreeError
from compact_path_tree.types import COMPONENT_SEPARATOR, UP_MARKER, Component


def iter_components(raw: str) -> Iterator[Component]:
    """Lazily split an encoded buffer into its components.

    Args:
        raw: The encoded buffer.

    Yields:
        Each component in buffer order.

    Example:
        >>> import os
        >>> [c.kind.value for c in iter_components(os.sep.join(["d", "b", "..", ".."]))]
        ['name', 'name', 'up', 'up']
    """
    for position, part in _scan(raw):
        if part == UP_MARKER:
            yield Component.up()
        elif not part or part == ".":
            raise CorruptTreeError(part, position, "not a name")
        else:
            yield Component.of(part)


def _scan(raw: str) -> Iterator[Tuple[int, str]]:
    """Yield (offset, text) for each separator-delimited part without splitting the whole buffer."""
    if not raw:
        return
    start = 0
    while True:
        end = raw.find(COMPONENT_SEPARATOR, start)
        if end == -1:
            yield start, raw[start:]
            return
        yield start, raw[start:end]
        start = end + len(COMPONENT_SEPARATOR)


class CompactPathTreeIterator:
    """Forward-only cursor replaying an encoded buffer into absolute paths.

    Each name in the buffer descends into that name and produces the resulting path;
    each ``Up`` marker returns to the parent. Paths are therefore produced in the
    order they were discovered, parents before children.

    Cursors only read the buffer, so any number of them can walk the same tree at
    once.

    Attributes:
        current (Path): The path most recently produced, or the root before the
            first one.
        depth (int): Number of names below the root in ``current``.
    """

    def __init__(self, root: Path, raw: str) -> None:
        self.current = root
        self.depth = 0
        self._parts = _scan(raw)

    def __iter__(self) -> "CompactPathTreeIterator":
        return self

    def __next__(self) -> Path:
        path = self._advance()
        if path is None:
            raise StopIteration
        return path

    def _advance(self) -> Optional[Path]:
        for position, part in self._parts:
            if part == UP_MARKER:
                if self.depth == 0:
                    raise CorruptTreeError(part, position, "ascends above the root")
                self.current = self.current.parent
                self.depth -= 1
            elif not part or part == ".":
                raise CorruptTreeError(part, position, "not a name")
            else:
                self.current = self.current / part
                self.depth += 1
                return self.current
        return None
