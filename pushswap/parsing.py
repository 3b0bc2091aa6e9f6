"""Validating command-line numbers and turning them into ranks."""

from __future__ import annotations

from typing import Sequence

from pushswap.libft.transform import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the numbers given to the program are not acceptable."""


def parse_long(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one sign are skipped over, and parsing stops at
    the first character that is not a digit. Text without digits gives 0.
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
    return sign * result


def is_valid_number(text: str) -> bool:
    """True when ``text`` is an optional minus sign followed only by digits.

    A lone minus sign is rejected; a plus sign is not accepted.
    """
    digits = text[1:] if text.startswith("-") else text
    if text == "-":
        return False
    return all("0" <= ch <= "9" for ch in digits)


def split_arguments(args: Sequence[str]) -> list[str]:
    """Return the number tokens of the arguments.

    A single argument is split on spaces, empty pieces dropped; several
    arguments are each taken as one token.
    """
    if len(args) == 1:
        return split(args[0], " ") or []
    return list(args)


def check_input(args: Sequence[str]) -> None:
    """Raise :class:`InputError` unless every token is a distinct int-sized number."""
    tokens = split_arguments(args)
    if not tokens:
        return
    values = [parse_long(token) for token in tokens]
    for token, value in zip(tokens, values):
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"{token!r} is outside the range of an int")
        if len(set(values)) != len(values):
            raise InputError("duplicate numbers")
        if not is_valid_number(token):
            raise InputError(f"{token!r} is not a number")


def read_values(args: Sequence[str]) -> list[int]:
    """Return the numbers of the arguments, in order."""
    return [parse_long(token) for token in split_arguments(args)]


def assign_ranks(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in sorted order, starting from 0.

    Among equal values the later one gets the lower rank.
    """
    order = sorted(range(len(values)), key=lambda i: (values[i], -i))
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks