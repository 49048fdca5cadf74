"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional

from .chars import itoa

STDOUT_FILENO = 1


def _write_all(fd: int, data: bytes) -> int:
    if fd < 0:
        return 0
    view = memoryview(data)
    written = 0
    while written < len(data):
        written += os.write(fd, view[written:])
    return written


def put_char(c: str, fd: int) -> int:
    """Write one character to fd; a negative fd writes nothing. Returns bytes written."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write_all(fd, c.encode())


def put_str(s: Optional[str], fd: int = STDOUT_FILENO) -> int:
    """Write s to fd (standard output by default); None or a negative fd writes nothing."""
    if s is None:
        return 0
    return _write_all(fd, s.encode())


def put_endl(s: str, fd: int) -> int:
    """Write s followed by a newline to fd; a negative fd writes nothing."""
    return _write_all(fd, (s + "\n").encode())


def put_nbr(n: int, fd: int) -> int:
    """Write the decimal text of n to fd; a negative fd writes nothing."""
    return _write_all(fd, itoa(n).encode())