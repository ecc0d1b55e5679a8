"""Parsing and formatting of decimal integers."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_SPACE = " \n\t\r\v\f"
_DIGITS = "0123456789"


def parse_int(text: str) -> int:
    """Read a decimal integer from the start of ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and reading
    stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return sign * value


def _digits(n: int) -> str:
    magnitude = abs(n)
    if magnitude == 0:
        return "0"
    out = []
    while magnitude:
        magnitude, d = divmod(magnitude, 10)
        out.append(_DIGITS[d])
    return "".join(reversed(out))


def format_int(n: int) -> str:
    """Return the decimal text of ``n``, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return ("-" if n < 0 else "") + _digits(n)


def digit_count(n: int) -> int:
    """Number of characters in the decimal text of ``n``, the sign included."""
    return len(format_int(n))


def write_int(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of ``n`` to ``stream`` (standard output by default)."""
    target = sys.stdout if stream is None else stream
    target.write(format_int(n))