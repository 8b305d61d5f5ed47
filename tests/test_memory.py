import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.memory import allocate, compare, copy, fill, find_byte, move, zero


@given(st.binary(max_size=600), st.data())
def test_zero_clears_prefix_only(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buffer = bytearray(data)
    zero(buffer, n)
    assert buffer[:n] == bytes(n)
    assert buffer[n:] == data[n:]


def test_zero_rejects_count_past_end():
    with pytest.raises(IndexError):
        zero(bytearray(2), 3)


@pytest.mark.parametrize("count,size", [(0, 5), (5, 0), (3, 4), (1, 1)])
def test_allocate_returns_zeroed_buffer(count, size):
    buffer = allocate(count, size)
    assert len(buffer) == count * size
    assert not any(buffer)


def test_allocate_overflow():
    with pytest.raises(OverflowError):
        allocate(2**33, 2**33)


def test_find_byte_locates_first_occurrence():
    data = b"abcabc"
    assert find_byte(data, ord("c"), len(data)) == 2
    assert find_byte(data, ord("c"), 2) is None


def test_find_byte_takes_value_modulo_256():
    data = b"xyz"
    assert find_byte(data, ord("y") + 256, 3) == 1


def test_compare_reports_sign_of_first_difference():
    assert compare(b"abc", b"abd", 3) < 0
    assert compare(b"abd", b"abc", 3) > 0
    assert compare(b"abc", b"abd", 2) == 0
    assert compare(b"abc", b"xyz", 0) == 0


def test_compare_is_unsigned():
    assert compare(b"\x00", b"\xff", 1) < 0


@given(st.binary(), st.binary())
def test_compare_is_antisymmetric(first, second):
    n = min(len(first), len(second))
    assert compare(first, second, n) == -compare(second, first, n)


@given(st.binary(), st.binary(), st.data())
def test_copy_overwrites_prefix(dst_bytes, src_bytes, draw):
    n = draw.draw(st.integers(min_value=0, max_value=min(len(dst_bytes), len(src_bytes))))
    dst = bytearray(dst_bytes)
    result = copy(dst, src_bytes, n)
    assert result is dst
    assert dst[:n] == src_bytes[:n]
    assert dst[n:] == dst_bytes[n:]


def test_copy_rejects_short_source():
    with pytest.raises(IndexError):
        copy(bytearray(4), b"ab", 3)


@given(st.binary(min_size=1, max_size=64), st.data())
def test_move_handles_overlap(data, draw):
    size = len(data)
    src = draw.draw(st.integers(min_value=0, max_value=size))
    dst = draw.draw(st.integers(min_value=0, max_value=size))
    n = draw.draw(st.integers(min_value=0, max_value=size - max(src, dst)))
    buffer = bytearray(data)
    move(buffer, dst, src, n)
    assert buffer[dst : dst + n] == data[src : src + n]
    assert buffer[:dst] == data[:dst]
    assert buffer[dst + n :] == data[dst + n :]


def test_move_rejects_out_of_range():
    with pytest.raises(IndexError):
        move(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        move(bytearray(4), -1, 0, 1)


@given(st.binary(), st.integers(min_value=-1000, max_value=1000), st.data())
def test_fill_sets_prefix(data, value, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buffer = bytearray(data)
    fill(buffer, value, n)
    assert all(byte == value % 256 for byte in buffer[:n])
    assert buffer[n:] == data[n:]


def test_fill_rejects_negative_count():
    with pytest.raises(ValueError):
        fill(bytearray(3), 1, -1)