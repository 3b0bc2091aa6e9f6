"""Character classification and case conversion for ASCII characters."""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the decimal digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


_CASE_OFFSET = ord("a") - ord("A")


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c):
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c):
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code