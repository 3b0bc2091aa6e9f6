"""Sorting stack ``a`` of ranks with the stack operations."""

from __future__ import annotations

from typing import Iterable

from pushswap.parsing import INT_MIN
from pushswap.stacks import Stacks


def find_max_index(stacks: Stacks) -> int:
    """Return the largest rank on stack ``a``, or INT_MIN when it is empty."""
    return max(stacks.a, default=INT_MIN)


def find_max_bits(max_index: int) -> int:
    """Return the number of bits needed to write ``max_index``; 0 for 0 or less."""
    return max_index.bit_length() if max_index > 0 else 0


def sort_three(stacks: Stacks) -> None:
    """Sort an ``a`` of two or three elements."""
    max_index = find_max_index(stacks)
    if stacks.a[0] == max_index:
        stacks.rotate_a()
    elif stacks.a[1] == max_index:
        stacks.reverse_rotate_a()
    if stacks.a[0] > stacks.a[1]:
        stacks.swap_a()


def sort_five(stacks: Stacks) -> None:
    """Sort an ``a`` of four or five ranks by parking ranks 0 and 1 on ``b``."""
    for _ in range(len(stacks.a)):
        if stacks.a[0] in (0, 1):
            stacks.push_b()
        else:
            stacks.rotate_a()
    sort_three(stacks)
    stacks.push_a()
    stacks.push_a()
    if stacks.a[0] > stacks.a[1]:
        stacks.swap_a()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` one bit at a time, least significant first."""
    max_index = find_max_index(stacks)
    for bit in range(find_max_bits(max_index)):
        for _ in range(max_index + 1):
            if (stacks.a[0] >> bit) & 1:
                stacks.rotate_a()
            else:
                stacks.push_b()
        while stacks.b:
            stacks.push_a()


def sort_stack(ranks: Iterable[int]) -> Stacks:
    """Sort the ranks 0..n-1 and return the stacks with the operations used."""
    stacks = Stacks(ranks)
    if stacks.is_sorted():
        return stacks
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)
    return stacks