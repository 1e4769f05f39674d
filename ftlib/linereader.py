"""Reading a file descriptor line by line through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFF_SIZE = 8
MAX_BUFF_SIZE = 8_000_000


class LineReader:
    """Reads lines from file descriptors, keeping unread data per descriptor.

    Several descriptors may be read in turn; what was read past a line end on
    one of them is kept for its next call.
    """

    def __init__(self, buffer_size: int = BUFF_SIZE) -> None:
        if not 1 <= buffer_size <= MAX_BUFF_SIZE:
            raise ValueError(f"buffer size must be from 1 to {MAX_BUFF_SIZE}, got {buffer_size}")
        self._buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    @staticmethod
    def _decode(data: bytes | bytearray) -> str:
        return bytes(data).decode("utf-8", errors="surrogateescape")

    def read_line(self, fd: int) -> str | None:
        """Return the next line of ``fd`` without its newline, or None at end of file.

        A last line without a newline is still returned. OSError from reading
        is passed on.
        """
        pending = self._pending.setdefault(fd, bytearray())
        searched = 0
        while True:
            newline = pending.find(b"\n", searched)
            if newline >= 0:
                line = self._decode(pending[:newline])
                del pending[: newline + 1]
                return line
            searched = len(pending)
            chunk = os.read(fd, self._buffer_size)
            if not chunk:
                del self._pending[fd]
                return self._decode(pending) if pending else None
            pending += chunk

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd``."""
        while (line := self.read_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> str | None:
    """Next line of ``fd`` from a shared reader, or None at end of file."""
    return _default_reader.read_line(fd)