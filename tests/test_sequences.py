import pytest
from hypothesis import given
from hypothesis import strategies as st

from kata_kit.sequences import (
    contains_all,
    find_odd,
    longest_consec,
    make_looper,
    move_zeroes,
    sort_odd,
    unique_in_order,
)

ints = st.lists(st.integers(min_value=-50, max_value=50))


@given(ints, st.data())
def test_contains_all_subset_is_true(items, data):
    targets = data.draw(st.lists(st.sampled_from(items))) if items else []
    assert contains_all(items, targets) is True


@given(ints)
def test_contains_all_missing_value_is_false(items):
    missing = max(items, default=0) + 1
    assert contains_all(items, [missing]) is False


def test_contains_all_empty_targets():
    assert contains_all([1, 2], []) is True


@given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
def test_find_odd_returns_single_odd_value(pairs, odd):
    numbers = [value for value in pairs if value != odd] * 2 + [odd]
    assert find_odd(numbers) == odd


def test_find_odd_prefers_smallest():
    assert find_odd([7, 3, 3, 3]) == 3


@pytest.mark.parametrize("numbers", [[], [4, 4, 9, 9]])
def test_find_odd_without_odd_count_raises(numbers):
    with pytest.raises(ValueError):
        find_odd(numbers)


@given(ints)
def test_move_zeroes_invariants(values):
    result = move_zeroes(values)
    non_zero = [value for value in values if value != 0]
    assert result[: len(non_zero)] == non_zero
    assert result[len(non_zero):] == [0] * values.count(0)
    assert len(result) == len(values)


def test_move_zeroes_example():
    assert move_zeroes([1, 0, 1, 2, 0, 1, 3]) == [1, 1, 2, 1, 3, 0, 0]


def test_move_zeroes_does_not_modify_input():
    values = [0, 5, 0]
    move_zeroes(values)
    assert values == [0, 5, 0]


@given(ints)
def test_sort_odd_invariants(values):
    result = sort_odd(values)
    assert len(result) == len(values)
    for before, after in zip(values, result):
        assert (before % 2 == 0) == (after % 2 == 0)
        if before % 2 == 0:
            assert before == after
    odd_result = [value for value in result if value % 2]
    assert odd_result == sorted(value for value in values if value % 2)


def test_sort_odd_example():
    assert sort_odd([5, 3, 2, 8, 1, 4]) == [1, 3, 2, 8, 5, 4]


def test_unique_in_order_string():
    assert unique_in_order("AAAABBBCCDAABBB") == list("ABCDAB")


def test_unique_in_order_empty():
    assert unique_in_order([]) == []


@given(ints)
def test_unique_in_order_has_no_adjacent_repeats(values):
    result = unique_in_order(values)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == set(values)


def test_longest_consec_example():
    words = ["zone", "abigail", "theta", "form", "libe", "zas"]
    assert longest_consec(words, 2) == "abigailtheta"


def test_longest_consec_first_on_tie():
    assert longest_consec(["ab", "cd"], 1) == "ab"


@pytest.mark.parametrize("strings, k", [([], 1), (["a"], 2), (["a"], 0), (["a"], -1)])
def test_longest_consec_out_of_range(strings, k):
    assert longest_consec(strings, k) == ""


@given(st.lists(st.text(max_size=4), min_size=1, max_size=8), st.data())
def test_longest_consec_length_is_maximal(strings, data):
    k = data.draw(st.integers(1, len(strings)))
    result = longest_consec(strings, k)
    lengths = [len("".join(strings[i:i + k])) for i in range(len(strings) - k + 1)]
    assert len(result) == max(lengths)


def test_make_looper_cycles():
    looper = make_looper("abc")
    assert [looper() for _ in range(7)] == list("abcabca")


def test_make_looper_empty_raises():
    with pytest.raises(ValueError):
        make_looper("")