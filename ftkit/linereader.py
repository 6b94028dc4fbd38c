"""Reading a file descriptor one line at a time.

Each call reads from the descriptor in chunks of a fixed size and returns
the next line, newline included, as ``bytes``. Bytes read past the end of a
line are kept per descriptor, so several descriptors can be read in turn
with one reader. A NUL byte ends the chunk it appears in: the rest of that
chunk is dropped.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 2


class LineReader:
    """Reads lines from file descriptors, remembering leftover bytes for each."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._leftover: dict[int, bytes] = {}

    def _scan(self, chunk: bytes, line: bytearray, fd: int) -> bool:
        """Append chunk to line up to a newline; return True once a line is complete."""
        data = chunk.partition(b"\0")[0]
        head, newline, rest = data.partition(b"\n")
        line += head
        if not newline:
            return False
        line += newline
        if rest:
            self._leftover[fd] = rest
        return True

    def next_line(self, fd: int) -> bytes | None:
        """The next line from fd, ending in a newline unless it is the last.

        Returns None once fd has nothing more to give. Raises OSError when
        fd cannot be read.
        """
        if fd < 0:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF))
        os.read(fd, 0)
        line = bytearray()
        pending = self._leftover.pop(fd, b"")
        if pending and self._scan(pending, line, fd):
            return bytes(line)
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk or self._scan(chunk, line, fd):
                break
        return bytes(line) if line else None

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the lines of fd until it is exhausted."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """The next line from fd, read with a shared reader of the default buffer size."""
    return _default_reader.next_line(fd)