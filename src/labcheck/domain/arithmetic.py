"""Integer arithmetic helpers."""

from __future__ import annotations

from labcheck.domain.errors import InvalidArgumentError


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: int, b: int) -> float:
    """True division of *a* by *b*.

    Raises:
        InvalidArgumentError: If *b* is zero (``argument="divisor"``).
    """
    if b == 0:
        msg = "Divisor cannot be zero."
        raise InvalidArgumentError("divisor", b, msg)
    return a / b


def is_even(number: int) -> bool:
    return number % 2 == 0
