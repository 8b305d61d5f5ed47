# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations, and check whether a list of operations sorts a given input.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

## Installation

```
pip install .
```

## Command line

Print a list of operations that sorts the numbers, one per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The first number is the top of stack `a`. Numbers may be given as separate
arguments or as one argument holding several numbers separated by spaces.
Each must be an integer within the 32-bit signed range, written as digits
with an optional leading `+` or `-` (at most 11 characters of digits and
minus sign, leading zeros included), and no number may appear twice. On
invalid input `Error` is written to standard error and the program exits
with a non-zero status:

| Status | Cause |
|--------|-------|
| 2 | number too long or out of range |
| 3 | a token that is not an integer |
| 4 | an empty argument or a duplicate number |
| 18 | an argument holding only spaces |

With no arguments `push-swap` prints nothing and exits with status 1. Input
that is already sorted produces no operations.

Check a list of operations read from standard input:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

Each line must be exactly one operation name followed by a newline. The
checker prints `OK` when the operations leave `a` sorted in ascending order
with `b` empty, and `KO` otherwise. An invalid line makes it print `Error`
to standard error and exit with status 17. With no arguments it does nothing.

## Library use

```python
from pushswap.solver import solve
from pushswap.parsing import build_stack
from pushswap.stack import Stacks, parse_operation

operations = solve([3, 2, 5, 1, 4])

stacks = Stacks(build_stack(["3", "2", "5", "1", "4"]), None, False)
stacks.apply_all(operations)
assert stacks.is_solved()

print(parse_operation("rra\n"))
```

- `pushswap.stack` holds `Element`, `Stack`, `Stacks`, the `Operation` enum
  and `parse_operation`. A `Stacks` created with `record=True` keeps the
  operations it performed in `operations`.
- `pushswap.parsing` validates arguments (`split_arguments`, `parse_integer`,
  `parse_arguments`), ranks numbers (`rank`) and builds stack `a`
  (`build_stack`). Invalid input raises `InputError`, whose `code` is the
  exit status listed above.
- `pushswap.solver` holds the sorting strategy: `solve(numbers)` returns the
  operation list, and `sort_stacks(stacks)` sorts a `Stacks` in place.
- `pushswap.cli.run_checker(args, lines)` runs the checker on a list of
  arguments and an iterable of operation lines and returns `"OK"` or `"KO"`.

Supporting modules, not needed to sort or check:

- `pushswap.linereader`: `LineReader` and `read_lines` read lines from file
  descriptors with a fixed read size.
- `pushswap.text`, `pushswap.chars`, `pushswap.memory`: string, character and
  byte-buffer helpers.
- `pushswap.lists`: a singly linked list, `LinkedList`.
- `pushswap.formatting`: a small printf-style formatter, `format_printf`, and
  writers for characters, strings, lines and numbers.