"""Writing characters, strings and numbers to file descriptors, and printf-style formatting.

The formatter understands the conversions ``%c %s %p %d %i %u %x %X`` and
``%%``. Any other character after ``%`` prints a single ``%`` and that
character is consumed without being printed.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Callable, Dict, Optional, Union

from .convert import itoa
from .cstring import strlen

CharLike = Union[int, str]

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _cstr(s: str) -> str:
    return s[:strlen(s)]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an int is written as its low byte."""
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` up to its terminator to ``fd``."""
    _write_all(fd, _cstr(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, (_cstr(s) + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))


def _wrap_int32(value: int) -> int:
    return ((value + 2**31) & _UINT32_MASK) - 2**31


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return _cstr(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _UINT64_MASK
    else:
        address = id(value)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_signed(value: int) -> str:
    return str(_wrap_int32(int(value)))


def _format_unsigned(value: int) -> str:
    return str(int(value) & _UINT32_MASK)


def _format_hex_lower(value: int) -> str:
    return format(int(value) & _UINT32_MASK, "x")


def _format_hex_upper(value: int) -> str:
    return format(int(value) & _UINT32_MASK, "X")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Raises TypeError when there are fewer arguments than conversions.
    """
    if fmt is None:
        return ""
    pieces = []
    values = iter(args)
    chars = iter(_cstr(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            pieces.append("%")
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for format string {fmt!r}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)