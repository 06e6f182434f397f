"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from enum import Enum
from itertools import pairwise
from typing import Callable, Iterable, MutableSequence, Sequence


class Operation(str, Enum):
    """An instruction that rearranges stacks a and b."""

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


def swap(stack: MutableSequence[int]) -> None:
    """Exchange the two top elements; do nothing with fewer than two."""
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def rotate(stack: MutableSequence[int]) -> None:
    """Move the top element to the bottom."""
    if len(stack) > 1:
        stack.append(stack.pop(0))


def reverse_rotate(stack: MutableSequence[int]) -> None:
    """Move the bottom element to the top."""
    if len(stack) > 1:
        stack.insert(0, stack.pop())


def push(dest: MutableSequence[int], src: MutableSequence[int]) -> None:
    """Move the top of ``src`` onto ``dest``; do nothing if ``src`` is empty."""
    if src:
        dest.insert(0, src.pop(0))


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when the values never decrease from top to bottom."""
    return all(first <= second for first, second in pairwise(values))


_ACTIONS: dict[Operation, Callable[["Stacks"], None]] = {
    Operation.SA: lambda s: swap(s.a),
    Operation.SB: lambda s: swap(s.b),
    Operation.SS: lambda s: (swap(s.a), swap(s.b)) and None,
    Operation.PA: lambda s: push(s.a, s.b),
    Operation.PB: lambda s: push(s.b, s.a),
    Operation.RA: lambda s: rotate(s.a),
    Operation.RB: lambda s: rotate(s.b),
    Operation.RR: lambda s: (rotate(s.a), rotate(s.b)) and None,
    Operation.RRA: lambda s: reverse_rotate(s.a),
    Operation.RRB: lambda s: reverse_rotate(s.b),
    Operation.RRR: lambda s: (reverse_rotate(s.a), reverse_rotate(s.b)) and None,
}


class Stacks:
    """Stacks a and b, top first; optionally records every applied operation."""

    def __init__(self, values: Iterable[int] = (), record: bool = False) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.record = record
        self.operations: list[Operation] = []

    def apply(self, op: Operation | str) -> None:
        """Apply an operation given as an Operation or its name.

        Raises ValueError for an unknown name.
        """
        operation = Operation(op)
        _ACTIONS[operation](self)
        if self.record:
            self.operations.append(operation)

    def is_solved(self, expected_len: int | None = None) -> bool:
        """Return True when a is sorted, b is empty and a has the expected size."""
        if self.b or not is_sorted(self.a):
            return False
        return expected_len is None or len(self.a) == expected_len

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"