class CorruptTreeError(RuntimeError):
    """
    Exception raised when an encoded buffer violates the Name/Up pairing rule.

    A buffer produced by the tree builder is always balanced, so this error signals a
    bug in buffer production rather than a condition callers should recover from.
    It is raised when decoding meets an ``Up`` marker at the root level or a
    component that is neither a name nor an ``Up`` marker.

    Attributes:
        component (str): The offending component as stored in the buffer.
        position (int): Offset of the component within the raw buffer.

    Example:
        >>> error = CorruptTreeError("..", 0, "ascends above the root")
        >>> str(error)
        "Illegal component '..' at offset 0 in path tree: ascends above the root"
    """

    def __init__(self, component: str, position: int, reason: str) -> None:
        """
        Initialize the exception with the location of the corruption.

        Args:
            component (str): The offending component.
            position (int): Offset of the component within the raw buffer.
            reason (str): Short description of the violated rule.
        """
        self.component = component
        self.position = position
        super().__init__(f"Illegal component {component!r} at offset {position} in path tree: {reason}")
