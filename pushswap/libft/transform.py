"""Splitting, joining, trimming, copying and mapping strings."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: Optional[str], sep: str) -> Optional[list[str]]:
    """Split ``s`` on every ``sep`` and drop the empty pieces.

    Returns None when ``s`` is None.
    """
    _check_char(sep)
    if s is None:
        return None
    return [word for word in s.split(sep) if word]


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on every character of ``s`` in place.

    A character returned by ``f`` replaces the one at that index; a return
    of None leaves it as it was. Nothing happens when ``s`` or ``f`` is None.
    """
    if s is None or f is None:
        return
    for index, char in enumerate(s):
        replacement = f(index, char)
        if replacement is not None:
            s[index] = _check_char(replacement)


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; if either is None the result is empty."""
    if s1 is None or s2 is None:
        return ""
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots, NUL included.

    Returns the resulting string and the length the full result would have
    had; when ``dst`` already fills the buffer that length is ``size + len(src)``
    and ``dst`` is returned unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, NUL included.

    Returns the resulting string and ``len(src)``. With a size of zero
    nothing is copied and ``dst`` comes back unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for every character of ``s``.

    Returns None when ``s`` or ``f`` is None.
    """
    if s is None or f is None:
        return None
    return "".join(_check_char(f(index, char)) for index, char in enumerate(s))


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    Returns None when either argument is None.
    """
    if s is None or charset is None:
        return None
    return s.strip(charset)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]