"""Depth-first construction of encoded path buffers.

The builder lists a directory, consults a visitor for each entry, and appends one
name and one ``Up`` marker per included entry to a single growable buffer. A
directory's children are appended between its own name and its own ``Up`` marker.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from compact_path_tree.types import COMPONENT_SEPARATOR, UP_MARKER, EntryType
from compact_path_tree.visitors.base_visitor import PathVisitor

logger = logging.getLogger(__name__)


def get_entry_type(entry: os.DirEntry) -> EntryType:
    """Classify a directory entry without following symbolic links.

    The result of each query is cached on the entry by ``os.scandir``, so the
    filesystem is consulted at most once per entry on most platforms.

    Args:
        entry: The entry to classify.

    Returns:
        The entry's type.

    Raises:
        OSError: If the entry's type cannot be determined.
    """
    if entry.is_symlink():
        return EntryType.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return EntryType.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return EntryType.OTHER


class _Frame:
    """A directory being listed, together with the entry that led into it."""

    __slots__ = ("directory", "entry", "listing")

    def __init__(self, directory: Path, entry: Optional[os.DirEntry]) -> None:
        self.directory = directory
        # None for the root, which has no name or Up marker of its own
        self.entry = entry
        self.listing: Optional[Iterator[os.DirEntry]] = None

    def close(self) -> None:
        if self.listing is not None:
            self.listing.close()  # type: ignore[attr-defined]
            self.listing = None


class TreeBuilder:
    """Builds the encoded buffer for a single directory subtree.

    A builder is single-use: ``build`` walks the subtree once and returns the frozen
    buffer. The walk keeps an explicit stack of open directory listings rather than
    recursing, so the depth of the tree is bounded by the filesystem only.

    Error Handling:
        An error met in a directory is offered to the visitor together with that
        directory and the entry being processed (None when the listing itself
        failed). An ignored listing error ends the listing; an ignored entry error
        skips the entry. A fatal error closes the directory, and is offered again
        to the parent directory together with the entry that led into it. It is
        raised once the root directory deems it fatal too.

    Attributes:
        root (Path): The absolute root directory of the walk.
        visitor (PathVisitor): Policy consulted for inclusion and error handling.
    """

    def __init__(self, root: Path, visitor: PathVisitor) -> None:
        self.root = root
        self.visitor = visitor

    def build(self) -> str:
        """Walk the subtree and return the encoded buffer.

        Returns:
            The components joined by the component separator. Empty when nothing
            was included.

        Raises:
            OSError: Any error the visitor classified as fatal.
        """
        buffer: List[str] = []
        self.visitor.start(self.root)
        logger.debug("Building path tree from %s", self.root)
        self._walk(buffer)
        logger.debug("Path tree from %s complete: %d components", self.root, len(buffer))
        return COMPONENT_SEPARATOR.join(buffer)

    def _walk(self, buffer: List[str]) -> None:
        stack: List[_Frame] = []
        try:
            self._enter(buffer, stack, self.root, None)
            while stack:
                frame = stack[-1]
                try:
                    entry = next(frame.listing, None)  # type: ignore[arg-type]
                except OSError as e:
                    # A failed listing can't be resumed, keep what was already recorded
                    self._fail(buffer, stack, e, None)
                    continue
                if entry is None:
                    self._leave(buffer, stack)
                    continue

                try:
                    descend = self._add_entry(buffer, entry)
                except OSError as e:
                    self._fail(buffer, stack, e, entry)
                    continue
                if descend:
                    self._enter(buffer, stack, Path(entry.path), entry)
        finally:
            for frame in stack:
                frame.close()

    def _enter(self, buffer: List[str], stack: List[_Frame], directory: Path, entry: Optional[os.DirEntry]) -> None:
        frame = _Frame(directory, entry)
        stack.append(frame)
        try:
            frame.listing = os.scandir(directory)
        except OSError as e:
            self._fail(buffer, stack, e, None)

    def _leave(self, buffer: List[str], stack: List[_Frame]) -> None:
        frame = stack.pop()
        frame.close()
        if frame.entry is not None:
            buffer.append(UP_MARKER)

    def _fail(
        self, buffer: List[str], stack: List[_Frame], error: BaseException, entry: Optional[os.DirEntry]
    ) -> None:
        """Offer an error raised in the innermost open directory to the visitor.

        Every directory that deems the error fatal is closed, with its ``Up``
        marker appended, and the error is offered to its parent in turn.

        Raises:
            OSError: The error, once the root directory deems it fatal.
        """
        while True:
            frame = stack[-1]
            fatal = self.visitor.handle_error(error, frame.directory, entry)
            if fatal is None:
                if entry is None:
                    self._leave(buffer, stack)
                return
            self._leave(buffer, stack)
            if not stack:
                raise fatal
            error, entry = fatal, frame.entry

    def _add_entry(self, buffer: List[str], entry: os.DirEntry) -> bool:
        """Record an entry, returning True when its contents must be walked next."""
        if not self.visitor.filter(entry):
            return False

        self.visitor.visit(entry)

        # The type must be known before the buffer is touched: if the query fails and
        # the error is ignored, the buffer has to be exactly as it was.
        entry_type = get_entry_type(entry)

        buffer.append(entry.name)
        if entry_type is EntryType.DIRECTORY:
            # The Up marker follows once the directory's frame is left
            return True
        buffer.append(UP_MARKER)
        return False
