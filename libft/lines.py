"""Reading a file descriptor one line at a time, with a pending buffer per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 30
OPENFD = 1024


class LineReader:
    """Reads lines from file descriptors, keeping unread data for each one separately."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytearray] = {}

    def _fill(self, fd: int, buf: bytearray) -> None:
        while True:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self._pending.pop(fd, None)
                raise
            buf += chunk
            if not chunk or b"\n" in buf:
                return

    def next_line(self, fd: int) -> Optional[str]:
        """Return the next line from ``fd`` with its newline, or None at end of input.

        A final line without a newline is returned as is. Read errors propagate
        as OSError and discard what was buffered for ``fd``.
        """
        if not 0 <= fd < OPENFD:
            raise ValueError(f"file descriptor out of range: {fd}")
        buf = self._pending.setdefault(fd, bytearray())
        self._fill(fd, buf)
        end = buf.find(b"\n")
        if end < 0:
            del self._pending[fd]
            if not buf:
                return None
            return bytes(buf).decode("utf-8", errors="replace")
        line = bytes(buf[:end + 1])
        del buf[:end + 1]
        return line.decode("utf-8", errors="replace")


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)