import pytest

from pushswap.stack import (
    Operation,
    Stacks,
    is_sorted,
    push,
    reverse_rotate,
    rotate,
    swap,
)


def test_operation_names():
    expected = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
    parsed = [Operation(name) for name in expected]
    assert [op.value for op in parsed] == expected
    assert set(parsed) == set(Operation)


def test_operation_from_string():
    assert Operation("rra") is Operation.RRA
    assert str(Operation.PB) == "pb"


def test_swap_exchanges_top_two():
    stack = [3, 1, 2]
    swap(stack)
    assert stack == [1, 3, 2]


def test_swap_twice_is_identity():
    stack = [5, 4, 9, 8]
    swap(stack)
    swap(stack)
    assert stack == [5, 4, 9, 8]


@pytest.mark.parametrize("stack", [[], [7]])
def test_swap_short_stack_is_noop(stack):
    before = list(stack)
    swap(stack)
    assert stack == before


def test_rotate_moves_top_to_bottom():
    original = [4, 8, 15, 16]
    stack = list(original)
    rotate(stack)
    assert stack[-1] == original[0]
    assert stack[:-1] == original[1:]


def test_reverse_rotate_moves_bottom_to_top():
    original = [4, 8, 15, 16]
    stack = list(original)
    reverse_rotate(stack)
    assert stack[0] == original[-1]
    assert stack[1:] == original[:-1]


def test_rotate_and_reverse_rotate_are_inverse():
    original = [10, -3, 7, 2, 0]
    stack = list(original)
    rotate(stack)
    reverse_rotate(stack)
    assert stack == original


def test_full_rotation_cycle_returns_original():
    original = [1, 2, 3, 4]
    stack = list(original)
    for _ in original:
        rotate(stack)
    assert stack == original


@pytest.mark.parametrize("func", [rotate, reverse_rotate])
@pytest.mark.parametrize("stack", [[], [42]])
def test_rotations_short_stack_noop(func, stack):
    before = list(stack)
    func(stack)
    assert stack == before


def test_push_moves_top_element():
    src = [1, 2, 3]
    dest = [9]
    push(dest, src)
    assert dest == [1, 9]
    assert src == [2, 3]


def test_push_from_empty_is_noop():
    src = []
    dest = [1, 2]
    push(dest, src)
    assert dest == [1, 2]
    assert src == []


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1], True), ([1, 2, 3], True), ([1, 1, 2], True), ([2, 1], False), ([1, 3, 2], False)],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_stacks_initial_state():
    stacks = Stacks([3, 2, 1])
    assert stacks.a == [3, 2, 1]
    assert stacks.b == []
    assert stacks.operations == []


def test_apply_records_operations_when_asked():
    stacks = Stacks([3, 2, 1], record=True)
    stacks.apply("pb")
    stacks.apply(Operation.RA)
    assert stacks.operations == [Operation.PB, Operation.RA]
    assert [str(op) for op in stacks.operations] == ["pb", "ra"]


def test_apply_without_record_keeps_no_history():
    stacks = Stacks([3, 2, 1])
    stacks.apply("sa")
    assert stacks.operations == []
    assert stacks.a == [2, 3, 1]


def test_apply_unknown_operation_raises():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_pb_then_pa_restores():
    stacks = Stacks([5, 6, 7])
    stacks.apply("pb")
    assert stacks.b == [5]
    stacks.apply("pa")
    assert stacks.a == [5, 6, 7]
    assert stacks.b == []


def test_double_operations_act_on_both():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply("pb")
    stacks.apply("pb")
    a_before, b_before = list(stacks.a), list(stacks.b)
    stacks.apply("ss")
    assert stacks.a == [a_before[1], a_before[0]]
    assert stacks.b == [b_before[1], b_before[0]]
    stacks.apply("ss")
    stacks.apply("rr")
    stacks.apply("rrr")
    assert stacks.a == a_before
    assert stacks.b == b_before


def test_is_solved():
    stacks = Stacks([2, 1, 3])
    assert not stacks.is_solved(3)
    stacks.apply("sa")
    assert stacks.is_solved(3)
    assert stacks.is_solved()
    assert not stacks.is_solved(4)


def test_is_solved_requires_empty_b():
    stacks = Stacks([1, 2, 3])
    stacks.apply("pb")
    assert not stacks.is_solved()