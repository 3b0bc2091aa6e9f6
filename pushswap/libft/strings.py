"""String scanning, searching, comparing and integer conversion."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the range of a 32-bit signed integer."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, and the result wraps to a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _to_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strlen(s: str) -> int:
    """Return the length of ``s``."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of ``s``; strings are immutable, so equal value suffices."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s[:]


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; NUL matches the end of the string."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL matches the end of the string."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at 0. As in the C routine, the search gives up
    as soon as a candidate start leaves too little room for the needle.
    """
    if needle == "":
        return 0
    for i, ch in enumerate(islice(haystack, max(length, 0))):
        if ch == needle[0]:
            if len(needle) > length - i:
                return None
            if haystack[i:i + len(needle)] == needle:
                return i
    return None