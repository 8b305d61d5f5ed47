import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_letters(letter):
    assert to_lower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_letters(letter):
    assert to_upper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_mapping_leaves_non_letters(char):
    assert to_lower(ord(char)) == ord(char)
    assert to_upper(ord(char)) == ord(char)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 3") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -(2**31)


@given(INT32)
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


@given(INT32)
def test_itoa_matches_decimal_form(number):
    text = itoa(number)
    assert text.startswith("-") == (number < 0)
    assert text.lstrip("-").isdigit()
    assert int(text) == number