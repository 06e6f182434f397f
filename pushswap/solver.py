"""Turk-style sorting: push to b, then bring each element back at its cheapest cost."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .stack import Operation, Stacks, is_sorted


@dataclass(frozen=True)
class Move:
    """The planned return of one element of b to its place in a."""

    value: int
    target: int
    price: int
    value_above_median: bool
    target_above_median: bool


def _above_median(stack: Sequence[int], value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _rotation_cost(stack: Sequence[int], value: int) -> int:
    position = stack.index(value)
    if position <= len(stack) // 2:
        return position
    return len(stack) - position


def find_target(a: Sequence[int], value: int) -> int:
    """Return the smallest element of a above ``value``, or the smallest of a."""
    larger = [candidate for candidate in a if candidate > value]
    return min(larger) if larger else min(a)


def _plan(a: Sequence[int], b: Sequence[int], value: int) -> Move:
    target = find_target(a, value)
    value_above = _above_median(b, value)
    target_above = _above_median(a, target)
    cost_b = _rotation_cost(b, value)
    cost_a = _rotation_cost(a, target)
    price = max(cost_a, cost_b) if value_above == target_above else cost_a + cost_b
    return Move(value, target, price, value_above, target_above)


def cheapest_move(a: Sequence[int], b: Sequence[int]) -> Move:
    """Return the first move of minimal price over the elements of b.

    Raises ValueError when b is empty.
    """
    if not b:
        raise ValueError("stack b is empty")
    return min((_plan(a, b, value) for value in b), key=lambda move: move.price)


def _finish_rotation(stacks: Stacks, value: int, name: str, above_median: bool) -> None:
    stack = stacks.a if name == "a" else stacks.b
    if name == "a":
        op = Operation.RA if above_median else Operation.RRA
    else:
        op = Operation.RB if above_median else Operation.RRB
    while stack[0] != value:
        stacks.apply(op)


def _rotate_together(stacks: Stacks, move: Move, op: Operation) -> None:
    while stacks.a[0] != move.target and stacks.b[0] != move.value:
        stacks.apply(op)


def _move_nodes(stacks: Stacks) -> None:
    move = cheapest_move(stacks.a, stacks.b)
    value_above = move.value_above_median
    target_above = move.target_above_median
    if value_above == target_above:
        _rotate_together(stacks, move, Operation.RR if value_above else Operation.RRR)
        value_above = _above_median(stacks.b, move.value)
        target_above = _above_median(stacks.a, move.target)
    _finish_rotation(stacks, move.value, "b", value_above)
    _finish_rotation(stacks, move.target, "a", target_above)
    stacks.apply(Operation.PA)


def tiny_sort(stacks: Stacks) -> None:
    """Sort a stack a of two or three elements."""
    a = stacks.a
    highest = max(a)
    if a[0] == highest:
        stacks.apply(Operation.RA)
    elif a[1] == highest:
        stacks.apply(Operation.RRA)
    if a[0] > a[1]:
        stacks.apply(Operation.SA)


def handle_five(stacks: Stacks) -> None:
    """Push the smallest elements of a onto b until three remain in a."""
    while len(stacks.a) > 3:
        smallest = min(stacks.a)
        _finish_rotation(stacks, smallest, "a", _above_median(stacks.a, smallest))
        stacks.apply(Operation.PB)


def _push_swap(stacks: Stacks) -> None:
    if len(stacks.a) == 5:
        handle_five(stacks)
    else:
        while len(stacks.a) > 3:
            stacks.apply(Operation.PB)
    tiny_sort(stacks)
    while stacks.b:
        _move_nodes(stacks)
    smallest = min(stacks.a)
    op = Operation.RA if _above_median(stacks.a, smallest) else Operation.RRA
    while stacks.a[0] != smallest:
        stacks.apply(op)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` (distinct integers, top first)."""
    stacks = Stacks(values, record=True)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.apply(Operation.SA)
        elif len(stacks.a) == 3:
            tiny_sort(stacks)
        else:
            _push_swap(stacks)
    return stacks.operations