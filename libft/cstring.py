"""Searching, measuring, copying and comparing NUL-terminated text.

Strings are ordinary ``str`` objects; an embedded ``"\\0"`` ends the string
the same way a terminator would. Positions are returned as indexes, and a
missing match is ``None``.
"""

from __future__ import annotations

from itertools import islice
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

NUL = "\0"


def _char(c: CharLike) -> str:
    """Return the single character a C ``(char)c`` conversion would give."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def strlen(data: str) -> int:
    """Return the number of characters before the first NUL (or the whole length)."""
    end = data.find(NUL)
    return len(data) if end < 0 else end


def _cstr(s: str) -> str:
    return s[:strlen(s)]


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting destination text and the full length of ``src``.
    With ``size`` 0 the destination is left untouched.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    src = _cstr(src)
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting destination text and the length the full
    concatenation would have had. When ``size`` does not exceed the current
    length of ``dst`` nothing is appended and ``len(src) + size`` is returned.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    dst = _cstr(dst)
    src = _cstr(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``; searching for NUL finds the end."""
    s = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(s) if c in (0, NUL) else None
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``; searching for NUL finds the end."""
    s = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    if n <= 0:
        return 0
    pairs = zip(_cstr(s1) + NUL, _cstr(s2) + NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == NUL:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0.
    """
    little = _cstr(little)
    if not little:
        return 0
    if length <= 0:
        return None
    index = _cstr(big)[:length].find(little)
    return None if index < 0 else index