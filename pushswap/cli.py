"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import InputError, build_stack
from .solver import sort_stacks
from .stack import Stacks, parse_operation

_BAD_INSTRUCTION = 17


def _report_error(error: InputError) -> int:
    sys.stderr.write("Error\n")
    return error.code


def run_checker(args: Sequence[str], lines: Iterable[str]) -> str:
    """Apply instruction lines to the stack built from ``args``.

    Returns "OK" when a ends sorted and b empty, "KO" otherwise. An invalid
    line raises InputError before any later line is applied.
    """
    stacks = Stacks(build_stack(args))
    for line in lines:
        try:
            operation = parse_operation(line)
        except ValueError as error:
            raise InputError(str(error), _BAD_INSTRUCTION) from None
        stacks.apply(operation)
    return "OK" if stacks.is_solved() else "KO"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        stack = build_stack(args)
    except InputError as error:
        return _report_error(error)
    stacks = Stacks(stack, record=True)
    sort_stacks(stacks)
    sys.stdout.write("".join(f"{operation.value}\n" for operation in stacks.operations))
    return 0


def checker_main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and report whether they sort."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        result = run_checker(args, sys.stdin)
    except InputError as error:
        return _report_error(error)
    sys.stdout.write(f"{result}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())