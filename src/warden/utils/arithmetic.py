"""Checked arithmetic helpers."""

from __future__ import annotations

from numbers import Real
from typing import TypeVar

from warden.errors import InvalidArgumentError

NumberT = TypeVar("NumberT", int, float)


def divide(dividend: NumberT, divisor: NumberT) -> NumberT:
    """Divide two numbers, rejecting a zero divisor.

    Integer operands use division truncated toward zero, so ``divide(-7, 2)``
    is ``-3``. Any other real operands use true division.
    """

    if not isinstance(dividend, Real) or not isinstance(divisor, Real):
        raise InvalidArgumentError("Operands must be real numbers")
    if divisor == 0:
        raise InvalidArgumentError("Division by zero")

    if isinstance(dividend, int) and isinstance(divisor, int):
        quotient = abs(dividend) // abs(divisor)
        return quotient if (dividend < 0) == (divisor < 0) else -quotient
    return dividend / divisor


__all__ = ["divide"]
