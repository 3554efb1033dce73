"""Byte-buffer helpers: filling, searching, comparing and copying.

Buffers are mutable byte sequences such as ``bytearray`` or writable
``memoryview`` objects; sources may be any bytes-like object.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Union[bytearray, memoryview], c: int, n: int) -> Union[bytearray, memoryview]:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256); return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Union[bytearray, memoryview], n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises OverflowError when the total size does not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size and nmemb > SIZE_MAX // size:
        raise OverflowError("requested size overflows")
    return bytearray(nmemb * size)


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (modulo 256) among the first ``n``.

    Returns None when there is no such byte.
    """
    _check_count(n, buf)
    position = bytes(buf[:n]).find(c & 0xFF)
    return position if position >= 0 else None


def memcmp(buf1: Optional[BytesLike], buf2: Optional[BytesLike], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they agree, otherwise the difference of the first pair of
    differing bytes. Two missing buffers compare equal; one missing buffer
    gives 1.
    """
    if buf1 is None and buf2 is None:
        return 0
    if buf1 is None or buf2 is None:
        return 1
    _check_count(n, buf1, buf2)
    for left, right in zip(bytes(buf1[:n]), bytes(buf2[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: Union[bytearray, memoryview], src: BytesLike, n: int) -> Union[bytearray, memoryview]:
    """Copy the first ``n`` bytes of ``src`` into ``dest``; return ``dest``."""
    if dest is None or src is None:
        raise ValueError("both dest and src are required")
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Union[bytearray, memoryview], src: BytesLike, n: int) -> Union[bytearray, memoryview]:
    """Copy ``n`` bytes like memcpy, correctly even when the buffers overlap."""
    if dest is None or src is None:
        raise ValueError("both dest and src are required")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest