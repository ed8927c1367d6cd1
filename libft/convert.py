"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

from .chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, then any run of signs is read; more than one
    sign yields 0. Parsing stops at the first non-digit and the result wraps to
    a 32-bit signed int.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    sign_count = 0
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        sign_count += 1
        pos += 1

    number = 0
    while pos < length and is_digit(text[pos]):
        number = number * 10 + int(text[pos])
        pos += 1

    if sign_count > 1:
        return 0
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)