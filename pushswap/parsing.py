"""Validation of command-line numbers and construction of the initial stack."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable

from .stack import Element, Stack

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_LENGTH = 11
_DIGITS = frozenset("0123456789")

_OVERFLOW = 2
_NOT_A_NUMBER = 3
_EMPTY_OR_DUPLICATE = 4
_BLANK_ARGUMENT = 18


class InputError(ValueError):
    """Invalid input; ``code`` is the exit status the program reports."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def split_arguments(args: Iterable[str]) -> list[str]:
    """Split arguments that contain spaces into separate tokens."""
    tokens: list[str] = []
    for arg in args:
        if " " in arg:
            if not arg.strip(" "):
                raise InputError("argument holds only spaces", _BLANK_ARGUMENT)
            tokens.extend(part for part in arg.split(" ") if part)
        else:
            tokens.append(arg)
    return tokens


def _check_format(token: str) -> None:
    if not token:
        raise InputError("empty argument", _EMPTY_OR_DUPLICATE)
    body = token[1:] if token[0] in "+-" else token
    if not body or not _DIGITS.issuperset(body):
        raise InputError(f"not an integer: {token!r}", _NOT_A_NUMBER)


def parse_integer(text: str) -> int:
    """Convert one token to a 32-bit signed integer.

    At most 11 characters of digits and minus sign are accepted, leading
    zeros included.
    """
    _check_format(text)
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if len(digits) + negative > _MAX_LENGTH:
        raise InputError(f"number too long: {text!r}", _OVERFLOW)
    value = -int(digits) if negative else int(digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise InputError(f"number out of range: {text!r}", _OVERFLOW)
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate every argument and return the distinct integers in order."""
    tokens = split_arguments(args)
    for token in tokens:
        _check_format(token)
    numbers = [parse_integer(token) for token in tokens]
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            raise InputError(f"duplicate number: {number}", _EMPTY_OR_DUPLICATE)
        seen.add(number)
    return numbers


def rank(numbers: Iterable[int]) -> list[int]:
    """Rank each number from 1: one more than the count of smaller numbers."""
    values = list(numbers)
    ordered = sorted(values)
    return [bisect_left(ordered, value) + 1 for value in values]


def build_stack(args: Iterable[str]) -> Stack:
    """Build stack a from the arguments, first argument on top."""
    numbers = parse_arguments(args)
    return Stack(
        Element(number=number, position=position)
        for number, position in zip(numbers, rank(numbers))
    )