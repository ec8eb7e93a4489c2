"""Small number puzzles: tables, digit games, counting and word parsing."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

_NUMBER_WORDS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4,
    "five": 5, "six": 6, "seven": 7, "eight": 8, "nine": 9,
    "ten": 10, "eleven": 11, "twelve": 12, "thirteen": 13,
    "fourteen": 14, "fifteen": 15, "sixteen": 16, "seventeen": 17,
    "eighteen": 18, "nineteen": 19,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}


def multiplication_table(n: int) -> list[list[int]]:
    """Return the n-by-n multiplication table of 1..n."""
    factors = range(1, n + 1)
    return [[row * col for col in factors] for row in factors]


def boolean_order(symbols: str, operators: str) -> int:
    """Count the parenthesisations of a boolean expression that evaluate to true.

    ``symbols`` holds ``t`` for true and anything else for false; ``operators``
    holds ``&``, ``|`` or ``^`` between consecutive symbols.
    """
    n = len(symbols)
    if n == 0:
        raise ValueError("expression must have at least one symbol")
    if len(operators) < n - 1:
        raise ValueError("too few operators for the symbols given")

    true = [[0] * n for _ in range(n)]
    false = [[0] * n for _ in range(n)]
    for i, symbol in enumerate(symbols):
        if symbol == "t":
            true[i][i] = 1
        else:
            false[i][i] = 1

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            for k in range(i, j):
                op = operators[k]
                lt, lf = true[i][k], false[i][k]
                rt, rf = true[k + 1][j], false[k + 1][j]
                if op == "&":
                    true[i][j] += lt * rt
                    false[i][j] += lt * rf + lf * rt + lf * rf
                elif op == "|":
                    true[i][j] += lt * rt + lt * rf + lf * rt
                    false[i][j] += lf * rf
                elif op == "^":
                    true[i][j] += lt * rf + lf * rt
                    false[i][j] += lt * rt + lf * rf
    return true[0][n - 1]


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Determinant of a square matrix by cofactor expansion along the first row.

    An empty matrix gives 0.
    """
    rows = [list(row) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    if n == 0:
        return 0
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]

    total = 0
    for col, value in enumerate(rows[0]):
        minor = [row[:col] + row[col + 1:] for row in rows[1:]]
        sign = -1 if col % 2 else 1
        total += sign * value * determinant(minor)
    return total


def is_narcissistic(value: int) -> bool:
    """True if the value equals the sum of its digits each raised to the digit count.

    Every value below 10 counts as narcissistic.
    """
    if value < 10:
        return True
    digits = str(value)
    power = len(digits)
    return sum(int(d) ** power for d in digits) == value


def off_switches(n: int) -> list[int]:
    """Switches left off after toggling every multiple of 2..n among switches 1..n.

    A switch ends up off exactly when it has an odd number of divisors,
    which is when its position is a perfect square. Up to three switches
    the answer is ``[1]``.
    """
    if n <= 3:
        return [1]
    return [k * k for k in range(1, math.isqrt(n) + 1)]


def smallest_possible_sum(values: Iterable[int]) -> int:
    """Smallest sum reachable by repeatedly replacing x with x - y for x > y."""
    items = list(values)
    if not items:
        return 0
    return math.gcd(*items) * len(items)


def digital_root(n: int) -> int:
    """Repeatedly sum the digits of n until a single digit remains."""
    while n >= 10:
        n = sum(map(int, str(n)))
    return n


def persistence(n: int) -> int:
    """How many times the digits of n must be multiplied to reach one digit."""
    steps = 0
    while n >= 10:
        n = math.prod(map(int, str(n)))
        steps += 1
    return steps


def dig_pow(n: int, p: int) -> int:
    """Return k where the digits of n raised to p, p+1, ... sum to k * n, else -1."""
    if n <= 0:
        raise ValueError("n must be positive")
    if p < 0:
        raise ValueError("p must not be negative")
    total = sum(int(d) ** (p + i) for i, d in enumerate(str(n)))
    quotient, remainder = divmod(total, n)
    return quotient if remainder == 0 else -1


def next_bigger(n: int) -> int:
    """Smallest number greater than n made of the same digits, or -1."""
    if n <= 0:
        return -1
    digits = list(str(n))
    i = len(digits) - 2
    while i >= 0 and digits[i] >= digits[i + 1]:
        i -= 1
    if i < 0:
        return -1
    j = len(digits) - 1
    while digits[j] <= digits[i]:
        j -= 1
    digits[i], digits[j] = digits[j], digits[i]
    digits[i + 1:] = reversed(digits[i + 1:])
    return int("".join(digits))


def add_without_plus(x: int, y: int) -> int:
    """Add two 32-bit signed integers using only bitwise operations.

    The result wraps around like 32-bit two's complement arithmetic.
    """
    x &= _INT32_MASK
    y &= _INT32_MASK
    while y:
        x, y = x ^ y, ((x & y) << 1) & _INT32_MASK
    return x - (1 << 32) if x & _INT32_SIGN else x


def group_by_commas(n: int) -> str:
    """Format a non-negative integer with commas between groups of three digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    return f"{n:,}"


def parse_int(text: str) -> int:
    """Parse an English number phrase such as "two hundred and forty-six".

    Words that are not part of a number are ignored.
    """
    result = 0
    current = 0
    for word in text.split():
        if word == "and":
            continue
        if word in _NUMBER_WORDS:
            current += _NUMBER_WORDS[word]
        elif word == "hundred":
            current *= 100
        elif word == "thousand":
            result += current * 1000
            current = 0
        elif word == "million":
            result += current * 1_000_000
            current = 0
        elif "-" in word:
            left, _, right = word.partition("-")
            current += _NUMBER_WORDS.get(left, 0) + _NUMBER_WORDS.get(right, 0)
    return result + current