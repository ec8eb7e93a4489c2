"""Puzzles over sequences: membership, counting, reordering and cycling."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from functools import partial
from itertools import cycle, groupby
from typing import TypeVar

T = TypeVar("T")


def contains_all(items: Iterable[int], targets: Iterable[int]) -> bool:
    """True if every target value occurs somewhere among the items."""
    present = set(items)
    return all(target in present for target in targets)


def find_odd(numbers: Iterable[int]) -> int:
    """Return the smallest value that occurs an odd number of times.

    Raises ValueError when no value occurs an odd number of times.
    """
    counts = Counter(numbers)
    for value in sorted(counts):
        if counts[value] % 2:
            return value
    raise ValueError("no value occurs an odd number of times")


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Move every zero to the end, keeping the other values in order."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def sort_odd(values: Iterable[int]) -> list[int]:
    """Sort the odd values in ascending order, leaving even values in place."""
    items = list(values)
    odds = iter(sorted(value for value in items if value % 2))
    return [next(odds) if value % 2 else value for value in items]


def unique_in_order(iterable: Iterable[T]) -> list[T]:
    """Collapse runs of equal consecutive elements into one element each."""
    return [key for key, _ in groupby(iterable)]


def longest_consec(strings: Sequence[str], k: int) -> str:
    """Return the first longest concatenation of ``k`` consecutive strings.

    Returns an empty string when ``k`` is not positive or exceeds the number
    of strings.
    """
    n = len(strings)
    if n == 0 or k <= 0 or k > n:
        return ""
    windows = ("".join(strings[start:start + k]) for start in range(n - k + 1))
    return max(windows, key=len)


def make_looper(text: str) -> Callable[[], str]:
    """Return a function that yields the characters of ``text`` in a loop."""
    if not text:
        raise ValueError("text must not be empty")
    return partial(next, cycle(text))