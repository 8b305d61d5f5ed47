"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MODULUS = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def is_alnum(code: int) -> bool:
    """True for the ASCII codes of letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_alpha(code: int) -> bool:
    """True for the ASCII codes of letters."""
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(code: int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= code <= 127


def is_digit(code: int) -> bool:
    """True for the ASCII codes of ``0`` to ``9``."""
    return 48 <= code <= 57


def is_print(code: int) -> bool:
    """True for printable ASCII codes, space through tilde."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter code to lower case; others unchanged."""
    return code + 32 if 65 <= code <= 90 else code


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter code to upper case; others unchanged."""
    return code - 32 if 97 <= code <= 122 else code


def _wrap_int(value: int) -> int:
    value %= _INT_MODULUS
    return value - _INT_MODULUS if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading integer from ``text``.

    Leading whitespace and one sign are skipped, then digits are read until
    the first non-digit. Text with no digits gives 0. The result wraps to a
    32-bit signed integer.
    """
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    negative = False
    if index < len(text) and text[index] in "+-":
        negative = text[index] == "-"
        index += 1
    value = 0
    while index < len(text) and text[index] in _DIGITS:
        value = _wrap_int(value * 10 + int(text[index]))
        index += 1
    return _wrap_int(-value) if negative else value


def itoa(number: int) -> str:
    """Write ``number`` in decimal, with a minus sign when negative."""
    return str(number)