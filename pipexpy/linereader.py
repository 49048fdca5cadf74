"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42


class LineReader:
    """Reads newline-terminated lines from a raw file descriptor.

    Each line keeps its trailing newline; the last line of the input may lack
    one. Data read past the end of a line is held for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE, encoding: str = "utf-8") -> None:
        self.fd = fd
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line, or None when the input is exhausted.

        A negative descriptor or a non-positive buffer size yields None.
        A failing read discards any held data and raises OSError.
        """
        if self.fd < 0 or self.buffer_size <= 0:
            return None
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        newline = self._pending.find(b"\n")
        if newline < 0:
            if not self._pending:
                return None
            line = bytes(self._pending)
            self._pending.clear()
        else:
            line = bytes(self._pending[: newline + 1])
            del self._pending[: newline + 1]
        return line.decode(self.encoding, "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of fd, keeping read-ahead data between calls.

    Returns None at the end of the input, after which the held state for fd
    is dropped.
    """
    if fd < 0:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line