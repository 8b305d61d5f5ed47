"""Byte-buffer helpers: fill, allocate, search, compare, copy and move."""

from __future__ import annotations

from typing import Optional, Union

_SIZE_LIMIT = 2**64 - 1

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(name: str, n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"{name}={n} exceeds a buffer of {len(buffer)} bytes")


def zero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    fill(buffer, 0, n)


def allocate(count: int, size: int) -> bytearray:
    """Return a zeroed buffer for ``count`` items of ``size`` bytes.

    Raises OverflowError when the total would not fit in 64 bits.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_LIMIT:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(total)


def find_byte(buffer: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (taken modulo 256)
    among the first ``n`` bytes, or None."""
    _check_count("n", n, buffer)
    index = bytes(buffer[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    _check_count("n", n, first, second)
    return next(
        (left - right for left, right in zip(first[:n], second[:n]) if left != right),
        0,
    )


def copy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    _check_count("n", n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def move(buffer: Buffer, dst_offset: int, src_offset: int, n: int) -> Buffer:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dst_offset``,
    correctly even when the two regions overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count("n", n)
    if max(dst_offset, src_offset) + n > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dst_offset : dst_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def fill(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` modulo 256."""
    _check_count("n", n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer