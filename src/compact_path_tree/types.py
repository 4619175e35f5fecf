import os
from enum import Enum
from os import PathLike
from typing import NamedTuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Separator between components in an encoded buffer, and the marker meaning "ascend one level".
# Names from a directory listing never contain the separator and are never the parent marker.
COMPONENT_SEPARATOR = os.sep
UP_MARKER = os.pardir


class EntryType(Enum):
    """Enumeration of entry types for classifying items during traversal.

    Entries are classified without following symbolic links, so a symlink that
    points at a directory is a SYMLINK, never a DIRECTORY.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        OTHER: Anything else (sockets, FIFOs, device nodes)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class ComponentKind(Enum):
    """The two kinds of component an encoded buffer is made of."""

    NAME = "name"
    UP = "up"


class Component(NamedTuple):
    """A single decoded component of an encoded buffer.

    Example:
        >>> Component.of("a")
        Component(kind=<ComponentKind.NAME: 'name'>, name='a')
        >>> Component.up().kind
        <ComponentKind.UP: 'up'>
    """

    kind: ComponentKind
    name: str = ""

    @classmethod
    def of(cls, name: str) -> "Component":
        return cls(ComponentKind.NAME, name)

    @classmethod
    def up(cls) -> "Component":
        return cls(ComponentKind.UP)
