"""Arithmetic on non-negative integers written as strings or lists of decimal digits."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")


def _require_digits(value: str) -> None:
    if not _DIGITS.issuperset(value):
        raise ValueError(f"not a string of decimal digits: {value!r}")


def add_strings(a: str, b: str) -> str:
    """Add two digit strings.

    The shorter operand is zero-padded on the left, so the result is as wide
    as the wider operand, or one digit wider when the top digit carries.
    Leading zeros of the operands are kept.
    """
    _require_digits(a)
    _require_digits(b)
    width = max(len(a), len(b))
    digits: list[str] = []
    carry = 0
    for x, y in zip(reversed(a.zfill(width)), reversed(b.zfill(width))):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def sum_strings(a: str, b: str) -> str:
    """Sum two digit strings; see :func:`add_strings`."""
    return add_strings(a, b)


def multiply(a: str, b: str) -> str:
    """Multiply two digit strings, returning the product without leading zeros."""
    if not a or not b:
        raise ValueError("operands must not be empty")
    _require_digits(a)
    _require_digits(b)
    a = a.lstrip("0")
    b = b.lstrip("0")
    if not a or not b:
        return "0"

    product = [0] * (len(a) + len(b))
    for i, x in enumerate(reversed(a)):
        carry = 0
        for j, y in enumerate(reversed(b)):
            carry, product[i + j] = divmod(product[i + j] + int(x) * int(y) + carry, 10)
        product[i + len(b)] += carry

    return "".join(map(str, reversed(product))).lstrip("0") or "0"


def increment_string(text: str) -> str:
    """Increment the number that ends ``text``, keeping its zero padding.

    Text that does not end in a digit gets ``"1"`` appended.
    """
    prefix = text.rstrip("0123456789")
    number = text[len(prefix):]
    if not number:
        return text + "1"
    return prefix + add_strings(number, "1")


def up_array(digits: Iterable[int]) -> list[int]:
    """Return the digits of the number one greater than the one given as digits.

    Raises ValueError for an empty sequence or any element outside 0..9.
    """
    values = list(digits)
    if not values:
        raise ValueError("digit sequence must not be empty")
    for value in values:
        if not 0 <= value <= 9:
            raise ValueError(f"not a decimal digit: {value!r}")
    number = "".join(map(str, values))
    return [int(char) for char in add_strings(number, "1")]