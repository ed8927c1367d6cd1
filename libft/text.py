"""Building new strings: duplication, slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence

from .cstring import strlen


def _cstr(s: str) -> str:
    return s[:strlen(s)]


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _cstr(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _cstr(s)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    s = _cstr(s)
    charset = _cstr(charset)
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    s = _cstr(s)
    if sep == "\0":
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each element of ``chars`` in place with ``func(index, char)``."""
    for index, ch in enumerate(list(chars)):
        chars[index] = func(index, ch)