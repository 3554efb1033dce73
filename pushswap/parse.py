"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stack import Node, Stack

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid set of numbers."""


def parse_int(text: str) -> int:
    """Read an integer the lenient way: leading blanks, any signs, then digits.

    Reading stops at the first character that is not a digit; no digits give 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    signs = len(rest) - len(rest.lstrip("+-"))
    sign = -1 if rest[:signs].count("-") % 2 else 1
    rest = rest[signs:]
    digits = len(rest) - len(rest.lstrip(_DIGITS))
    return sign * int(rest[:digits]) if digits else 0


def is_valid_number(text: str) -> bool:
    """True for an optional single sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def parse_args(argv: Iterable[str]) -> Stack:
    """Build stack A from the arguments, skipping those that start with '--'.

    Raises ParseError on a malformed number, one outside the int range,
    or a value given twice.
    """
    stack = Stack()
    for arg in argv:
        if arg.startswith("--"):
            continue
        if not is_valid_number(arg):
            raise ParseError(f"not a number: {arg!r}")
        number = parse_int(arg)
        if number > INT_MAX or number < INT_MIN:
            raise ParseError(f"out of range: {arg!r}")
        stack.append(Node(number))
    if stack.has_duplicate():
        raise ParseError("duplicate value")
    return stack