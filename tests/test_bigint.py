import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kata_kit.bigint import add_strings, increment_string, multiply, sum_strings, up_array

DIGIT_STRINGS = st.text(alphabet="0123456789", min_size=1, max_size=80)


@given(DIGIT_STRINGS, DIGIT_STRINGS)
def test_add_strings_matches_integer_sum(a, b):
    result = add_strings(a, b)
    assert int(result) == int(a) + int(b)
    width = max(len(a), len(b))
    assert len(result) in (width, width + 1)


@given(DIGIT_STRINGS, DIGIT_STRINGS)
def test_add_strings_is_commutative(a, b):
    assert add_strings(a, b) == add_strings(b, a)


def test_add_strings_keeps_leading_zeros():
    assert add_strings("007", "1") == "008"
    assert add_strings("0000", "0") == "0000"


def test_add_strings_of_empty_strings_is_empty():
    assert add_strings("", "") == ""


@pytest.mark.parametrize("a, b", [("12a", "1"), ("-1", "1"), (" 1", "1"), ("1", "1.0")])
def test_add_strings_rejects_non_digits(a, b):
    with pytest.raises(ValueError):
        add_strings(a, b)


@given(DIGIT_STRINGS, DIGIT_STRINGS)
def test_sum_strings_agrees_with_add_strings(a, b):
    assert sum_strings(a, b) == add_strings(a, b)


@given(DIGIT_STRINGS, DIGIT_STRINGS)
def test_multiply_matches_integer_product(a, b):
    result = multiply(a, b)
    assert int(result) == int(a) * int(b)
    assert result == "0" or not result.startswith("0")


@given(DIGIT_STRINGS, DIGIT_STRINGS)
def test_multiply_is_commutative(a, b):
    assert multiply(a, b) == multiply(b, a)


def test_multiply_by_zero():
    assert multiply("0", "999") == "0"
    assert multiply("000", "5") == "0"


def test_multiply_strips_leading_zeros():
    assert multiply("0007", "1") == "7"


@pytest.mark.parametrize("a, b", [("", "1"), ("1", ""), ("1.5", "2"), ("x", "3")])
def test_multiply_rejects_bad_operands(a, b):
    with pytest.raises(ValueError):
        multiply(a, b)


def test_increment_string_appends_one_without_number():
    assert increment_string("foo") == "foo1"
    assert increment_string("") == "1"


@given(
    st.text(alphabet=string.ascii_letters + " -_", max_size=10),
    st.text(alphabet="0123456789", min_size=1, max_size=20),
)
def test_increment_string_increments_trailing_number(prefix, digits):
    result = increment_string(prefix + digits)
    assert result.startswith(prefix)
    suffix = result[len(prefix):]
    assert suffix.isdigit()
    assert int(suffix) == int(digits) + 1
    assert len(suffix) >= len(digits)


def test_increment_string_keeps_padding():
    assert increment_string("foo0042") == "foo0043"


@given(st.text(max_size=15).map(lambda s: s + "x"))
def test_increment_string_text_ending_in_letter(text):
    assert increment_string(text) == text + "1"


@given(st.lists(st.integers(0, 9), min_size=1, max_size=30))
def test_up_array_adds_one(digits):
    result = up_array(digits)
    before = int("".join(map(str, digits)))
    assert int("".join(map(str, result))) == before + 1
    assert len(result) in (len(digits), len(digits) + 1)
    assert all(0 <= d <= 9 for d in result)


def test_up_array_overflow_grows():
    assert up_array([9, 9]) == [1, 0, 0]


def test_up_array_keeps_leading_zeros():
    assert up_array([0, 0]) == [0, 1]


def test_up_array_does_not_modify_input():
    digits = [1, 9]
    up_array(digits)
    assert digits == [1, 9]


@pytest.mark.parametrize("digits", [[], [1, -1], [10], [4, 3, 12]])
def test_up_array_rejects_invalid(digits):
    with pytest.raises(ValueError):
        up_array(digits)