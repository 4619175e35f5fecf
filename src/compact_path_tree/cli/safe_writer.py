"""Line-oriented output writing for the cpt CLI.

This module provides a writer that turns a closed output pipe into a
BrokenPipeError the CLI can map to an exit code.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union


class SafeWriter:
    """Writes text to a file descriptor or a file, reporting closed pipes uniformly.

    Attributes:
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path]):
        """Initialize the writer.

        Args:
            file: Either a file descriptor or a path to create.
        """
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data, encoding names that aren't valid UTF-8 with surrogate escapes.

        Raises:
            BrokenPipeError: If the reading end of the pipe has gone away.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        payload = data.encode("utf-8", "surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def writeline(self, line: str) -> None:
        self.write(line + "\n")

    def close(self) -> None:
        """Close the file if this writer opened it."""
        if self._closed:
            return
        self._closed = True
        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence over one from closing
            if exc_type is None:
                raise
