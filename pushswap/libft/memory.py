"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(buffer_len: int, n: int, start: int = 0) -> None:
    if n < 0 or start < 0:
        raise ValueError("length and offset must not be negative")
    if start + n > buffer_len:
        raise ValueError(f"span of {n} bytes at {start} exceeds buffer of {buffer_len}")


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` (taken modulo 256)."""
    _check_span(len(buffer), n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes."""
    _check_span(len(data), n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: bytes | bytearray, s2: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_span(len(s1), n)
    _check_span(len(s2), n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_span(len(dest), n)
    _check_span(len(src), n)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``; overlap is safe."""
    _check_span(len(buffer), n, src)
    _check_span(len(buffer), n, dest)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer