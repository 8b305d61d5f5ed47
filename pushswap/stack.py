"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Element:
    """One number on a stack, with its rank and the solver's bookkeeping."""

    number: int
    position: int
    stack_pos: int = 0
    reverse_stack_pos: int = 0
    target: int = 0


class Operation(Enum):
    """The operations allowed on the two stacks, valued by their names."""

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


class Stack:
    """A circular stack of elements; iteration runs from top to bottom."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._items: deque[Element] = deque(elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        numbers = ", ".join(str(element.number) for element in self._items)
        return f"Stack([{numbers}])"

    def top(self) -> Element:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def pop(self) -> Element:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def push(self, element: Element) -> None:
        """Put an element on top."""
        self._items.appendleft(element)

    def swap(self) -> None:
        """Exchange the two top elements; fewer than two is a no-op."""
        if len(self._items) >= 2:
            first = self._items[0]
            self._items[0] = self._items[1]
            self._items[1] = first

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._items.rotate(1)

    def is_sorted(self, from_start: bool = False) -> bool:
        """Tell whether ranks rise by one from top to bottom.

        With ``from_start`` the top must also hold rank 1.
        """
        positions = [element.position for element in self._items]
        if not positions:
            return False
        if from_start and positions[0] != 1:
            return False
        return all(
            following == current + 1
            for current, following in zip(positions, positions[1:])
        )


_Action = Callable[[Stack], None]

_ACTIONS: dict[Operation, tuple[_Action, bool, bool]] = {
    Operation.SA: (Stack.swap, True, False),
    Operation.SB: (Stack.swap, False, True),
    Operation.SS: (Stack.swap, True, True),
    Operation.RA: (Stack.rotate, True, False),
    Operation.RB: (Stack.rotate, False, True),
    Operation.RR: (Stack.rotate, True, True),
    Operation.RRA: (Stack.reverse_rotate, True, False),
    Operation.RRB: (Stack.reverse_rotate, False, True),
    Operation.RRR: (Stack.reverse_rotate, True, True),
}


class Stacks:
    """Stacks a and b together, optionally recording the operations applied.

    A single-stack operation on an empty stack, or a push from an empty
    stack, does nothing and is not recorded; a double operation is always
    recorded.
    """

    def __init__(
        self, a: Stack, b: Optional[Stack] = None, record: bool = False
    ) -> None:
        self.a = a
        self.b = b if b is not None else Stack()
        self.record = record
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    @staticmethod
    def _push(source: Stack, destination: Stack) -> bool:
        if not source:
            return False
        destination.push(source.pop())
        return True

    def apply(self, operation: Operation) -> None:
        """Apply one operation."""
        if operation is Operation.PA:
            performed = self._push(self.b, self.a)
        elif operation is Operation.PB:
            performed = self._push(self.a, self.b)
        else:
            action, on_a, on_b = _ACTIONS[operation]
            targets = [
                stack for stack, chosen in ((self.a, on_a), (self.b, on_b)) if chosen
            ]
            performed = len(targets) == 2 or bool(targets[0])
            for stack in targets:
                action(stack)
        if performed and self.record:
            self.operations.append(operation)

    def apply_all(self, operations: Iterable[Operation]) -> None:
        """Apply operations in order."""
        for operation in operations:
            self.apply(operation)

    def is_solved(self) -> bool:
        """True when a holds ranks 1, 2, ... from the top and b is empty."""
        return self.a.is_sorted(True) and not self.b


def parse_operation(line: str) -> Operation:
    """Read one instruction line, which must be a name followed by a newline."""
    if not line.endswith("\n"):
        raise ValueError(f"invalid operation line: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise ValueError(f"invalid operation line: {line!r}") from None