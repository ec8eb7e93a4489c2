"""Arithmetic spelled as nested calls, such as ``seven(times(five()))``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(Enum):
    """The four integer operations."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDED_BY = "/"


def _truncating_division(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


@dataclass(frozen=True)
class Operation:
    """An operator waiting for its left operand."""

    operator: Operator
    operand: int

    def apply(self, left: int) -> int:
        """Combine ``left`` with the stored operand; division truncates toward zero."""
        if self.operator is Operator.PLUS:
            return left + self.operand
        if self.operator is Operator.MINUS:
            return left - self.operand
        if self.operator is Operator.TIMES:
            return left * self.operand
        return _truncating_division(left, self.operand)


def _evaluate(value: int, operation: Operation | None) -> int:
    return value if operation is None else operation.apply(value)


def zero(operation: Operation | None = None) -> int:
    """Zero, or zero combined with ``operation``; zero divided by anything is zero."""
    if operation is not None and operation.operator is Operator.DIVIDED_BY:
        return 0
    return _evaluate(0, operation)


def one(operation: Operation | None = None) -> int:
    """One, or one combined with ``operation``."""
    return _evaluate(1, operation)


def two(operation: Operation | None = None) -> int:
    """Two, or two combined with ``operation``."""
    return _evaluate(2, operation)


def three(operation: Operation | None = None) -> int:
    """Three, or three combined with ``operation``."""
    return _evaluate(3, operation)


def four(operation: Operation | None = None) -> int:
    """Four, or four combined with ``operation``."""
    return _evaluate(4, operation)


def five(operation: Operation | None = None) -> int:
    """Five, or five combined with ``operation``."""
    return _evaluate(5, operation)


def six(operation: Operation | None = None) -> int:
    """Six, or six combined with ``operation``."""
    return _evaluate(6, operation)


def seven(operation: Operation | None = None) -> int:
    """Seven, or seven combined with ``operation``."""
    return _evaluate(7, operation)


def eight(operation: Operation | None = None) -> int:
    """Eight, or eight combined with ``operation``."""
    return _evaluate(8, operation)


def nine(operation: Operation | None = None) -> int:
    """Nine, or nine combined with ``operation``."""
    return _evaluate(9, operation)


def plus(number: int) -> Operation:
    """Add ``number`` to the digit that receives this operation."""
    return Operation(Operator.PLUS, number)


def minus(number: int) -> Operation:
    """Subtract ``number`` from the digit that receives this operation."""
    return Operation(Operator.MINUS, number)


def times(number: int) -> Operation:
    """Multiply the digit that receives this operation by ``number``."""
    return Operation(Operator.TIMES, number)


def divided_by(number: int) -> Operation:
    """Divide the digit that receives this operation by ``number``, truncating."""
    return Operation(Operator.DIVIDED_BY, number)