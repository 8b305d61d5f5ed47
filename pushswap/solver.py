"""The sorting strategy: cost-driven pushes to b, then an ordered return to a."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence

from .parsing import rank
from .stack import Element, Operation, Stack, Stacks


class Move(IntEnum):
    """How the two stacks are turned before an element is pushed to b."""

    BOTH_UP = 1
    BOTH_DOWN = 2
    A_UP_B_DOWN = 3
    B_UP_A_DOWN = 4


@dataclass(frozen=True)
class Plan:
    """The cheapest push found: which rank of a goes above which rank of b."""

    pos: int
    target: int
    move: Move
    distance: int


def _bottom(stack: Stack) -> Element:
    return deque(stack, maxlen=1)[0]


def _number_stack(stack: Stack) -> None:
    size = len(stack)
    for index, element in enumerate(stack):
        element.stack_pos = index
        element.reverse_stack_pos = size - index


def set_stack_positions(stacks: Stacks) -> None:
    """Record each element's index from the top and its distance from below.

    The top element gets a reverse distance equal to the stack's length.
    """
    _number_stack(stacks.a)
    _number_stack(stacks.b)


def set_targets(stacks: Stacks) -> None:
    """Give every element of a the rank in b it should be pushed above.

    That is the largest smaller rank in b, or the largest rank in b when
    b holds nothing smaller.
    """
    ranks = sorted(element.position for element in stacks.b)
    if not ranks:
        raise ValueError("stack b is empty")
    highest = ranks[-1]
    for element in stacks.a:
        index = bisect_left(ranks, element.position)
        element.target = ranks[index - 1] if index else highest


def _plan_for(a_element: Element, b_element: Element) -> Plan:
    distances = (
        max(a_element.stack_pos, b_element.stack_pos),
        max(a_element.reverse_stack_pos, b_element.reverse_stack_pos),
        a_element.stack_pos + b_element.reverse_stack_pos,
        a_element.reverse_stack_pos + b_element.stack_pos,
    )
    index = min(range(len(distances)), key=distances.__getitem__)
    return Plan(
        pos=a_element.position,
        target=a_element.target,
        move=Move(index + 1),
        distance=distances[index],
    )


def _scan(
    a_order: Sequence[Element], b_elements: Iterable[Element], best: Optional[Plan]
) -> Optional[Plan]:
    for b_element in b_elements:
        match = next(
            (element for element in a_order if element.target == b_element.position),
            None,
        )
        if match is None:
            continue
        plan = _plan_for(match, b_element)
        if best is None or plan.distance < best.distance:
            best = plan
    return best


def find_the_way(stacks: Stacks) -> Plan:
    """Choose the cheapest element of a to push, given current positions and targets.

    For each element of b the first element of a aiming at it is weighed,
    then, unless a move of at most one step was found, the last one.
    """
    a_elements = list(stacks.a)
    b_elements = list(stacks.b)
    best = _scan(a_elements, b_elements, None)
    if best is None or best.distance > 1:
        best = _scan(a_elements[::-1], b_elements, best)
    if best is None:
        raise ValueError("no element of a targets an element of b")
    return best


def _rotate_together(
    stacks: Stacks,
    a_pending: Callable[[], bool],
    b_pending: Callable[[], bool],
    both: Operation,
    on_a: Operation,
    on_b: Operation,
) -> None:
    while True:
        a_left, b_left = a_pending(), b_pending()
        if a_left and b_left:
            stacks.apply(both)
        elif a_left:
            stacks.apply(on_a)
        elif b_left:
            stacks.apply(on_b)
        else:
            return


def _rotate_apart(
    stacks: Stacks,
    a_pending: Callable[[], bool],
    b_pending: Callable[[], bool],
    on_a: Operation,
    on_b: Operation,
) -> None:
    while a_pending() or b_pending():
        if a_pending():
            stacks.apply(on_a)
        if b_pending():
            stacks.apply(on_b)


def execute_moves(stacks: Stacks, plan: Plan) -> None:
    """Bring the planned elements to the tops of a and b, then push to b."""

    def a_pending() -> bool:
        return stacks.a.top().position != plan.pos

    def b_pending() -> bool:
        return stacks.b.top().position != plan.target

    if plan.move is Move.BOTH_UP:
        _rotate_together(
            stacks, a_pending, b_pending, Operation.RR, Operation.RA, Operation.RB
        )
    elif plan.move is Move.BOTH_DOWN:
        _rotate_together(
            stacks, a_pending, b_pending, Operation.RRR, Operation.RRA, Operation.RRB
        )
    elif plan.move is Move.A_UP_B_DOWN:
        _rotate_apart(stacks, a_pending, b_pending, Operation.RA, Operation.RRB)
    else:
        _rotate_apart(stacks, a_pending, b_pending, Operation.RRA, Operation.RB)
    stacks.apply(Operation.PB)


def check_order(stacks: Stacks) -> bool:
    """Tell whether a is ordered up to rotation; if so, turn its minimum to the top.

    Positions of both stacks are refreshed in every case.
    """
    a = stacks.a
    if not a:
        return True
    set_stack_positions(stacks)
    elements = list(a)
    start = min(range(len(elements)), key=lambda index: elements[index].position)
    cycle = elements[start:] + elements[:start]
    if any(
        current.position > following.position
        for current, following in zip(cycle, cycle[1:])
    ):
        return False
    minimum = elements[start]
    if start:
        if minimum.reverse_stack_pos > minimum.stack_pos:
            stacks.apply_all([Operation.RA] * start)
        else:
            stacks.apply_all([Operation.RRA] * (len(elements) - start))
    set_stack_positions(stacks)
    return True


def _top_two(stack: Stack) -> tuple[Element, Element]:
    first, second, *_ = stack
    return first, second


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of a in ascending order."""
    largest = max(element.position for element in list(stacks.a)[:3])
    first, second = _top_two(stacks.a)
    if first.position == largest:
        stacks.apply(Operation.RA)
    elif second.position == largest:
        stacks.apply(Operation.RRA)
    first, second = _top_two(stacks.a)
    if first.position > second.position:
        stacks.apply(Operation.SA)


def sort_three_backwards(stacks: Stacks) -> None:
    """Sort the three elements of b in descending order."""
    smallest = min(element.position for element in list(stacks.b)[:3])
    first, second = _top_two(stacks.b)
    if first.position == smallest:
        stacks.apply(Operation.RB)
    elif second.position == smallest:
        stacks.apply(Operation.RRB)
    first, second = _top_two(stacks.b)
    if first.position < second.position:
        stacks.apply(Operation.SB)


def _bring_max_up(stacks: Stacks, total: int) -> None:
    a, b = stacks.a, stacks.b
    largest = max(b, key=lambda element: element.position)
    turned_both = False
    if largest.reverse_stack_pos > largest.stack_pos:
        while b.top() is not largest:
            stacks.apply(Operation.RB)
    else:
        while b.top() is not largest:
            if _bottom(a).position == total and _bottom(b) is largest:
                stacks.apply(Operation.RRR)
                turned_both = True
            else:
                stacks.apply(Operation.RRB)
    if _bottom(a).position == total and not turned_both and not a.is_sorted(False):
        stacks.apply(Operation.RRA)


def _move_to_a(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    while b or a.top().position != 1:
        while _bottom(a).position == a.top().position - 1:
            stacks.apply(Operation.RRA)
        if b:
            stacks.apply(Operation.PA)


def _push_sort(stacks: Stacks) -> None:
    total = len(stacks.a)
    stacks.apply_all([Operation.PB] * 3)
    sort_three_backwards(stacks)
    while not check_order(stacks) and len(stacks.a) > 3:
        set_targets(stacks)
        execute_moves(stacks, find_the_way(stacks))
    if len(stacks.a) == 3:
        sort_three(stacks)
    _bring_max_up(stacks, total)
    _move_to_a(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort a in place, starting with b empty, using only the stack operations."""
    if stacks.b:
        raise ValueError("stack b must start empty")
    if check_order(stacks):
        return
    size = len(stacks.a)
    if size == 3:
        sort_three(stacks)
    elif size > 3:
        _push_sort(stacks)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given distinct numbers."""
    values = list(numbers)
    if len(set(values)) != len(values):
        raise ValueError("numbers must be distinct")
    stack = Stack(
        Element(number=number, position=position)
        for number, position in zip(values, rank(values))
    )
    stacks = Stacks(stack, record=True)
    sort_stacks(stacks)
    return list(stacks.operations)