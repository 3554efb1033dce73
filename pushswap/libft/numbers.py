"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Read a decimal integer after leading whitespace and one optional sign.

    Reading stops at the first non-digit; no digits give 0. Results beyond
    the 32-bit int range are clamped to its nearest end.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        return max(-value, INT_MIN)
    return min(value, INT_MAX)


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading minus for negative numbers."""
    return str(n)