"""String helpers: searching, slicing, joining, trimming and bounded copies.

Positions are returned as indexes into the string rather than pointers,
and None stands for "not found". The string terminator is modelled as the
position just past the last character.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_TERMINATOR = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    Returns None when ``c`` does not occur.
    """
    c = _single_char(c)
    position = s.find(c)
    if position >= 0:
        return position
    if c == _TERMINATOR:
        return len(s)
    return None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``.

    Searching for the terminator ``"\\0"`` finds the end of the string.
    Returns None when ``c`` does not occur.
    """
    c = _single_char(c)
    if c == _TERMINATOR:
        return len(s)
    position = s.rfind(c)
    return position if position >= 0 else None


def strdup(s: str) -> str:
    """An equal copy of ``s``."""
    return "".join(s)


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """``s`` without the leading and trailing characters found in ``charset``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    sep = _single_char(sep)
    return [word for word in s.split(sep) if word]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``, so truncation
    shows as a length not smaller than ``size``. A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` inside a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had. When ``dest`` already fills the buffer nothing is appended and the
    length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_length = min(len(dest), size)
    if dest_length == size:
        return dest, size + len(src)
    room = size - dest_length - 1
    return dest + src[:room], dest_length + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string of ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every character of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(list(chars)):
        chars[index] = func(index, char)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they agree, otherwise the difference of the code points
    of the first differing characters, the end of a string counting as 0.
    """
    if n <= 0:
        return 0
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    compared = min(len(s1), len(s2), n)
    if compared == n:
        return 0
    left = ord(s1[compared]) if compared < len(s1) else 0
    right = ord(s2[compared]) if compared < len(s2) else 0
    return left - right


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first ``little`` lying wholly within ``big[:length]``.

    An empty ``little`` is found at 0. Returns None when there is no match.
    """
    if not little:
        return 0
    position = big[:max(length, 0)].find(little)
    return position if position >= 0 else None