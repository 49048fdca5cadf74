"""Byte-buffer operations over bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count >= SIZE_MAX or size >= SIZE_MAX:
        raise MemoryError("requested allocation is too large")
    return bytearray(count * size)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_count(n, data)
    target = c & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, else 0."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest and return dest."""
    _check_count(n, dest, src)
    if dest is src or n == 0:
        return dest
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf