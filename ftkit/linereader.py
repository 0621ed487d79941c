"""Reading a file descriptor one line at a time, keeping leftovers per descriptor."""

from __future__ import annotations

import os
from typing import Dict, Optional

BUFFER_SIZE = 42


class LineReader:
    """Return successive lines from file descriptors.

    Data read past the end of a line is kept for the next call on the same
    descriptor, so several descriptors can be read in turn.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def get_next_line(self, fd: int) -> Optional[str]:
        """Return the next line of ``fd``, newline included, or None at the end.

        The last line comes back without a newline if the data has none.
        A negative or unreadable descriptor gives None. Bytes are decoded as
        UTF-8, with undecodable bytes kept as surrogate escapes.
        """
        if fd < 0:
            return None
        try:
            os.read(fd, 0)
        except OSError:
            return None

        pending = self._pending.pop(fd, b"")
        chunks = [pending]
        found = b"\n" in pending
        while not found:
            try:
                data = os.read(fd, self.buffer_size)
            except OSError:
                return None
            if not data:
                break
            chunks.append(data)
            found = b"\n" in data

        data = b"".join(chunks)
        if not data:
            return None
        end = data.find(b"\n")
        if end < 0:
            line = data
        else:
            line, rest = data[: end + 1], data[end + 1 :]
            if rest:
                self._pending[fd] = rest
        return line.decode("utf-8", "surrogateescape")

    def reset(self, fd: int) -> None:
        """Forget whatever has been read ahead on ``fd``."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd`` using a shared reader."""
    return _default_reader.get_next_line(fd)