"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO, Union

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _write(text: str, file: Optional[TextIO]) -> int:
    (file if file is not None else sys.stdout).write(text)
    return len(text)


def _char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >= 1 << 31 else n


def _hex(n: int, uppercase: bool) -> str:
    return format(n & _ULONG_MASK, "X" if uppercase else "x")


def _pointer(address: Optional[int]) -> str:
    if not address:
        return "(nil)"
    return "0x" + _hex(address, False)


def put_char(c: Union[str, int], file: Optional[TextIO] = None) -> int:
    """Write one character; return 1."""
    return _write(_char(c), file)


def put_str(s: Optional[str], file: Optional[TextIO] = None) -> int:
    """Write ``s``, or ``(null)`` for None; return the number of characters written."""
    return _write("(null)" if s is None else s, file)


def put_endl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; write nothing for None."""
    if s is not None:
        _write(s + "\n", file)


def put_nbr(n: int, file: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal; return the number of characters written."""
    return _write(str(n), file)


def put_nbr_unsigned(n: int, file: Optional[TextIO] = None) -> int:
    """Write ``n`` as a 32-bit unsigned decimal; return the count written."""
    return _write(str(n & _UINT_MASK), file)


def put_hex(n: int, uppercase: bool = False, file: Optional[TextIO] = None) -> int:
    """Write ``n`` as 64-bit unsigned hexadecimal; return the count written."""
    return _write(_hex(n, uppercase), file)


def put_ptr(address: Optional[int], file: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` and hex digits, or ``(nil)`` for a null one."""
    return _write(_pointer(address), file)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return "%" + spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return str(value & _UINT_MASK)
    return format(value & _UINT_MASK, "X" if spec == "X" else "x")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions c, s, p, d, i, u, x, X and %%.

    An unknown conversion is kept as written. A format ending in a single
    unescaped ``%`` raises ValueError, as do missing arguments (TypeError).
    """
    if fmt.endswith("%") and not fmt.endswith("%%"):
        raise ValueError("format ends with an incomplete conversion")
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write ``format_printf(fmt, *args)``; return the number of characters written."""
    return _write(format_printf(fmt, *args), file)