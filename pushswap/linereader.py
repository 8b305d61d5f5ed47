"""Line-by-line reading from file descriptors with a fixed read size."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 42
_NEWLINE = b"\n"


class LineReader:
    """Reads lines from any number of file descriptors.

    Each descriptor keeps its own unread remainder, so reads on different
    descriptors can be interleaved freely.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    def next_line(self, fd: int) -> Optional[str]:
        """Return the next line of ``fd`` with its newline, or None at the end.

        The last line of the input is returned without a newline if it has
        none. Reading errors drop whatever was buffered for ``fd``.
        """
        if fd < 0:
            self.discard(fd)
            raise ValueError(f"invalid file descriptor: {fd}")
        pending = self._pending.setdefault(fd, bytearray())
        found = _NEWLINE in pending
        try:
            while not found:
                chunk = os.read(fd, self.buffer_size)
                if not chunk:
                    break
                pending += chunk
                found = _NEWLINE in chunk
        except OSError:
            self.discard(fd)
            raise
        if not pending:
            self.discard(fd)
            return None
        if found:
            end = pending.index(_NEWLINE) + 1
            line = bytes(pending[:end])
            del pending[:end]
        else:
            line = bytes(pending)
            pending.clear()
        if not pending and not found:
            self.discard(fd)
        return line.decode("utf-8", errors="surrogateescape")

    def discard(self, fd: int) -> None:
        """Forget anything buffered for ``fd``."""
        self._pending.pop(fd, None)


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of ``fd`` until its end."""
    reader = LineReader(buffer_size)
    while (line := reader.next_line(fd)) is not None:
        yield line