"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Iterable


class Operation(Enum):
    """An instruction, valued by the name it is printed with."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque[int], target: deque[int]) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, tops on the left, with a log of applied operations.

    Every operation is logged, including those that change nothing because
    a stack is too short.
    """

    def __init__(self, a: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={list(self.a)!r}, b={list(self.b)!r})"

    def is_sorted(self) -> bool:
        """True when stack ``a`` is in ascending order from top to bottom."""
        return all(upper <= lower for upper, lower in pairwise(self.a))

    def apply(self, operation: Operation | str) -> None:
        """Perform an operation given as an :class:`Operation` or its name."""
        _DISPATCH[Operation(operation)](self)

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self.operations.append(Operation.PA)

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self.operations.append(Operation.PB)

    def swap_a(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap(self.a)
        self.operations.append(Operation.SA)

    def swap_b(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap(self.b)
        self.operations.append(Operation.SB)

    def swap_both(self) -> None:
        """Swap the tops of both stacks at once."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append(Operation.SS)

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a)
        self.operations.append(Operation.RA)

    def rotate_b(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b)
        self.operations.append(Operation.RB)

    def rotate_both(self) -> None:
        """Rotate both stacks at once."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append(Operation.RR)

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _reverse_rotate(self.a)
        self.operations.append(Operation.RRA)

    def reverse_rotate_b(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRB)

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRR)


_DISPATCH = {
    Operation.SA: Stacks.swap_a,
    Operation.SB: Stacks.swap_b,
    Operation.SS: Stacks.swap_both,
    Operation.PA: Stacks.push_a,
    Operation.PB: Stacks.push_b,
    Operation.RA: Stacks.rotate_a,
    Operation.RB: Stacks.rotate_b,
    Operation.RR: Stacks.rotate_both,
    Operation.RRA: Stacks.reverse_rotate_a,
    Operation.RRB: Stacks.reverse_rotate_b,
    Operation.RRR: Stacks.reverse_rotate_both,
}