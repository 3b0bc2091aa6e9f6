import pytest

from pushswap.stacks import Operation, Stacks

ALL_NAMES = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


def test_operation_names_are_logged_in_order():
    stacks = Stacks([3, 1, 4, 0, 2])
    for name in ALL_NAMES:
        stacks.apply(name)
    assert [op.value for op in stacks.operations] == ALL_NAMES
    assert [op.value for op in Operation] == ALL_NAMES


def test_new_stacks():
    stacks = Stacks([2, 0, 1])
    assert list(stacks.a) == [2, 0, 1]
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_swap_a():
    stacks = Stacks([1, 0, 2])
    stacks.swap_a()
    assert list(stacks.a) == [0, 1, 2]
    assert stacks.operations == [Operation.SA]


def test_swap_short_stack_still_logged():
    stacks = Stacks([5])
    stacks.swap_a()
    stacks.swap_b()
    assert list(stacks.a) == [5]
    assert stacks.operations == [Operation.SA, Operation.SB]


def test_push_round_trip():
    stacks = Stacks([3, 1, 2])
    stacks.push_b()
    assert list(stacks.a) == [1, 2]
    assert list(stacks.b) == [3]
    stacks.push_a()
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []


def test_push_from_empty_does_nothing():
    stacks = Stacks([4])
    stacks.push_a()
    assert list(stacks.a) == [4]
    assert list(stacks.b) == []
    assert stacks.operations == [Operation.PA]


def test_rotate_and_reverse_rotate():
    stacks = Stacks([1, 2, 3])
    stacks.rotate_a()
    assert list(stacks.a) == [2, 3, 1]
    stacks.reverse_rotate_a()
    assert list(stacks.a) == [1, 2, 3]


def test_reverse_rotate_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.reverse_rotate_a()
    assert list(stacks.a) == [3, 1, 2]


def test_both_variants_act_on_both_stacks():
    stacks = Stacks([0, 1, 2, 3])
    stacks.push_b()
    stacks.push_b()
    assert list(stacks.b) == [1, 0]
    stacks.swap_both()
    assert list(stacks.a) == [3, 2]
    assert list(stacks.b) == [0, 1]
    stacks.rotate_both()
    stacks.reverse_rotate_both()
    assert list(stacks.a) == [3, 2]
    assert list(stacks.b) == [0, 1]
    assert stacks.operations[-3:] == [Operation.SS, Operation.RR, Operation.RRR]


def test_apply_by_name_and_enum():
    stacks = Stacks([1, 0])
    stacks.apply("sa")
    stacks.apply(Operation.RA)
    assert list(stacks.a) == [1, 0]
    assert stacks.operations == [Operation.SA, Operation.RA]


def test_apply_unknown_name():
    with pytest.raises(ValueError):
        Stacks([1]).apply("bogus")


@pytest.mark.parametrize("name", ALL_NAMES)
def test_every_operation_preserves_elements(name):
    stacks = Stacks([4, 2, 0, 3, 1])
    stacks.push_b()
    stacks.push_b()
    stacks.apply(name)
    assert sorted(list(stacks.a) + list(stacks.b)) == [0, 1, 2, 3, 4]
    assert stacks.operations[-1] is Operation(name)


def test_is_sorted():
    assert Stacks([0, 1, 2]).is_sorted()
    assert Stacks([]).is_sorted()
    assert Stacks([7]).is_sorted()
    assert not Stacks([1, 0, 2]).is_sorted()


def test_is_sorted_ignores_b():
    stacks = Stacks([2, 0, 1])
    stacks.push_b()
    assert stacks.is_sorted()
    assert list(stacks.b) == [2]