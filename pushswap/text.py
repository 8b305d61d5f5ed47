"""String helpers with the bounded-copy and search rules the program relies on."""

from __future__ import annotations

from typing import Callable, Optional

_TERMINATOR = "\0"


def _require_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words.

    A NUL separator never occurs inside a string, so the whole text is one word.
    """
    _require_char(sep)
    if sep == _TERMINATOR:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def find_char(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    _require_char(char)
    if char == _TERMINATOR:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    _require_char(char)
    if char == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``; a size of
    zero copies nothing.
    """
    _require_non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def bounded_concat(dst: Optional[str], src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would need,
    counted as ``size + len(src)`` when ``size`` is smaller than ``dst``.
    A missing ``dst`` is allowed only with a size of zero.
    """
    _require_non_negative("size", size)
    if dst is None:
        if size:
            raise ValueError("a missing destination needs a size of zero")
        return "", len(src)
    room = max(size - 1 - len(dst), 0) if size else 0
    result = dst + src[:room]
    overshoot = max(len(dst) - size, 0)
    return result, len(dst) + len(src) - overshoot


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the result is the difference of the
    first differing code points, an exhausted string counting as NUL."""
    _require_non_negative("n", n)
    for index in range(n):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def find_substring(haystack: Optional[str], needle: str, limit: int) -> Optional[int]:
    """Return where ``needle`` starts in ``haystack`` if it lies wholly within
    the first ``limit`` characters, or None. An empty needle is found at 0."""
    _require_non_negative("limit", limit)
    if haystack is None:
        if limit:
            raise ValueError("a missing haystack needs a limit of zero")
        return None
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_indexed(text: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for every character of ``text`` in order."""
    for index, char in enumerate(text):
        func(index, char)