"""String helpers: splitting, searching, comparing, joining and trimming."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def split(text: str, sep: str) -> list[str]:
    """Split text on a one-character separator, dropping empty pieces."""
    _single_char(sep, "separator")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first occurrence of c, or None.

    Searching for the NUL character finds the end of the text.
    """
    _single_char(c, "character")
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == _NUL else None


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last occurrence of c, or None.

    Searching for the NUL character finds the end of the text.
    """
    _single_char(c, "character")
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Difference of the codes at the first mismatch; 0 when the texts are equal."""
    return _compare(first, second)


def strncmp(first: str, second: str, n: int) -> int:
    """Like strcmp, but only the first n characters take part."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    return _compare(first[:n], second[:n])


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find needle within the first n characters of haystack.

    An empty needle matches at index 0. Returns None when there is no match.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if not needle:
        return 0
    if not haystack or len(needle) > n:
        return None
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Return first followed by second."""
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including its terminator.

    Returns the copied (possibly truncated) text and the full length of src,
    so truncation happened when the length is not less than size.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including its terminator.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dst, dst is returned unchanged and the
    reported length is size plus the length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        room = size - len(dst) - 1
        return dst + src[:room], len(dst) + len(src)
    return dst, size + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every item of chars in place with func(index, item)."""
    for index in range(len(chars)):
        chars[index] = func(index, chars[index])


def strtrim(text: str, charset: Optional[str]) -> str:
    """Strip every character found in charset from both ends of text."""
    if charset is None:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text starting at start.

    An empty text, a start past the end or a non-positive length gives "".
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if not text or start >= len(text) or length <= 0:
        return ""
    return text[start:start + length]