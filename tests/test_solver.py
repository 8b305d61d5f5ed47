from itertools import permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.parsing import rank
from pushswap.solver import (
    Move,
    Plan,
    check_order,
    execute_moves,
    find_the_way,
    set_stack_positions,
    set_targets,
    solve,
    sort_stacks,
    sort_three,
    sort_three_backwards,
)
from pushswap.stack import Element, Operation, Stack, Stacks


def make_stacks(a, b=()):
    return Stacks(
        Stack(Element(number=p, position=p) for p in a),
        Stack(Element(number=p, position=p) for p in b),
        record=True,
    )


def positions(stack):
    return [element.position for element in stack]


def replay(numbers, operations):
    stacks = Stacks(
        Stack(
            Element(number=n, position=p) for n, p in zip(numbers, rank(numbers))
        )
    )
    stacks.apply_all(operations)
    return stacks


@pytest.mark.parametrize("order", list(permutations([1, 2, 3])))
def test_sort_three_sorts_every_order(order):
    stacks = make_stacks(order)
    sort_three(stacks)
    assert positions(stacks.a) == [1, 2, 3]
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("order", list(permutations([4, 7, 9])))
def test_sort_three_backwards_sorts_descending(order):
    stacks = make_stacks([], order)
    sort_three_backwards(stacks)
    assert positions(stacks.b) == [9, 7, 4]
    assert len(stacks.operations) <= 2


def test_set_stack_positions_numbers_both_stacks():
    stacks = make_stacks([3, 1, 4, 2], [6, 5])
    set_stack_positions(stacks)
    assert [e.stack_pos for e in stacks.a] == [0, 1, 2, 3]
    assert [e.reverse_stack_pos for e in stacks.a] == [4, 3, 2, 1]
    assert [e.stack_pos for e in stacks.b] == [0, 1]
    assert [e.reverse_stack_pos for e in stacks.b] == [2, 1]


def test_check_order_false_leaves_stack_alone():
    stacks = make_stacks([2, 1, 3, 4])
    assert check_order(stacks) is False
    assert positions(stacks.a) == [2, 1, 3, 4]
    assert stacks.operations == []
    assert [e.reverse_stack_pos for e in stacks.a] == [4, 3, 2, 1]


def test_check_order_rotates_sorted_cycle_down():
    stacks = make_stacks([3, 4, 1, 2])
    assert check_order(stacks) is True
    assert positions(stacks.a) == [1, 2, 3, 4]
    assert stacks.operations == [Operation.RRA, Operation.RRA]


def test_check_order_rotates_sorted_cycle_up():
    stacks = make_stacks([4, 1, 2, 3])
    assert check_order(stacks) is True
    assert positions(stacks.a) == [1, 2, 3, 4]
    assert stacks.operations == [Operation.RA]


def test_check_order_empty_a_is_ordered():
    stacks = make_stacks([], [1, 2])
    assert check_order(stacks) is True
    assert stacks.operations == []


def test_set_targets_invariant():
    stacks = make_stacks([8, 2, 6, 1, 9], [7, 3, 5, 4])
    set_targets(stacks)
    b_ranks = positions(stacks.b)
    for element in stacks.a:
        smaller = [r for r in b_ranks if r < element.position]
        assert element.target in b_ranks
        if smaller:
            assert element.target < element.position
            assert all(r <= element.target for r in smaller)
        else:
            assert element.target == max(b_ranks)


def test_set_targets_requires_b():
    with pytest.raises(ValueError):
        set_targets(make_stacks([1, 2]))


def test_find_the_way_prefers_free_push():
    stacks = make_stacks([5, 1], [4, 3, 2])
    set_stack_positions(stacks)
    set_targets(stacks)
    plan = find_the_way(stacks)
    assert plan == Plan(pos=5, target=4, move=Move.BOTH_UP, distance=0)
    execute_moves(stacks, plan)
    assert stacks.operations == [Operation.PB]
    assert positions(stacks.b) == [5, 4, 3, 2]


@settings(max_examples=60, deadline=None)
@given(st.permutations(list(range(1, 13))), st.integers(min_value=1, max_value=8))
def test_execute_moves_places_element_on_its_target(order, split):
    stacks = make_stacks(order[split:], order[:split])
    set_stack_positions(stacks)
    set_targets(stacks)
    plan = find_the_way(stacks)
    assert plan.pos in positions(stacks.a)
    assert plan.target in positions(stacks.b)
    execute_moves(stacks, plan)
    top, below = list(stacks.b)[:2]
    assert top.position == plan.pos
    assert below.position == plan.target
    assert len(stacks.operations) <= plan.distance + 1
    assert stacks.operations[-1] is Operation.PB


def test_solve_sorted_needs_nothing():
    assert solve([1, 2, 3, 4, 5]) == []
    assert solve([]) == []


def test_solve_small_cases():
    assert solve([2, 1]) == [Operation.RRA]
    assert solve([3, 2, 1]) == [Operation.RA, Operation.SA]


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([1, 2, 1])


def test_sort_stacks_rejects_nonempty_b():
    with pytest.raises(ValueError):
        sort_stacks(make_stacks([2, 1], [3]))


@pytest.mark.parametrize("order", list(permutations([1, 2, 3, 4])))
def test_solve_every_order_of_four(order):
    assert replay(list(order), solve(order)).is_solved()


@pytest.mark.parametrize("order", list(permutations([1, 2, 3, 4, 5])))
def test_solve_every_order_of_five(order):
    assert replay(list(order), solve(order)).is_solved()


@settings(max_examples=80, deadline=None)
@given(
    st.lists(
        st.integers(min_value=-(2**31), max_value=2**31 - 1),
        unique=True,
        max_size=60,
    )
)
def test_solve_sorts_any_distinct_numbers(numbers):
    operations = solve(numbers)
    stacks = replay(numbers, operations)
    assert [e.number for e in stacks.a] == sorted(numbers)
    assert not stacks.b


@settings(max_examples=40, deadline=None)
@given(st.permutations(list(range(1, 30))))
def test_sort_stacks_in_place_matches_solve(order):
    stacks = make_stacks(order)
    sort_stacks(stacks)
    assert stacks.is_solved()
    assert stacks.operations == solve(order)
    assert positions(stacks.a) == list(range(1, 30))