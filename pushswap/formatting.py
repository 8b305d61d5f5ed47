"""A small printf-style formatter and plain writers for text and numbers."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

_INT_MODULUS = 1 << 32
_INT_MAX = (1 << 31) - 1
_POINTER_MODULUS = 1 << 64
_NULL_TEXT = "(null)"
_MISSING = object()


def _wrap_signed(value: int) -> int:
    value = int(value) % _INT_MODULUS
    return value - _INT_MODULUS if value > _INT_MAX else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return _NULL_TEXT if value is None else str(value)


def _pointer(value: Any) -> str:
    return "0x" + format(int(value) % _POINTER_MODULUS, "x")


def _signed(value: Any) -> str:
    return str(_wrap_signed(value))


def _unsigned(value: Any) -> str:
    return str(int(value) % _INT_MODULUS)


def _hex_lower(value: Any) -> str:
    return format(int(value) % _INT_MODULUS, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) % _INT_MODULUS, "X")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise ValueError(f"not enough arguments for %{spec}")
    return converter(value)


def format_printf(template: str, *args: Any) -> str:
    """Format ``template`` with the conversions %c %s %p %d %i %u %x %X and %%.

    Unknown conversions produce nothing and consume no argument. A missing
    string prints as ``(null)``; integers wrap to 32 bits (64 for %p).
    """
    remaining = iter(args)
    chars = iter(template)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        pieces.append(_convert(next(chars, ""), remaining))
    return "".join(pieces)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default)
    and return the number of characters written."""
    text = format_printf(template, *args)
    _target(stream).write(text)
    return len(text)


def write_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def write_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is not None:
        _target(stream).write(text)


def write_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is not None:
        _target(stream).write(text + "\n")


def write_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number``, wrapped to a 32-bit signed integer, in decimal."""
    _target(stream).write(str(_wrap_signed(number)))