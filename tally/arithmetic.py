"""
Elementary arithmetic helpers with explicit failure modes.

Division by zero and negative factorials raise package errors instead of
returning infinities or relying on the interpreter's messages.
"""

from __future__ import annotations

import math
import numbers

from .errors import DivisionByZeroError, NegativeFactorialError


class Calculator:
    """Stateless two-operand arithmetic."""

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        """Return ``a / b``.

        Raises:
            DivisionByZeroError: If ``b`` is zero.
        """
        if b == 0:
            raise DivisionByZeroError("Division by zero is not allowed")
        return a / b

    def power(self, base: float, exponent: float) -> float:
        return base**exponent


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer.

    Args:
        n (int): Non-negative integer.

    Returns:
        int: ``1`` for ``n`` in ``{0, 1}``, otherwise ``n * (n - 1) * ... * 1``.

    Raises:
        TypeError: If ``n`` is not an integer.
        NegativeFactorialError: If ``n`` is negative.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"Factorial requires an integer; got {n!r}")
    if n < 0:
        raise NegativeFactorialError("Factorial is not defined for negative numbers")
    return math.factorial(int(n))


__all__ = ["Calculator", "factorial"]
