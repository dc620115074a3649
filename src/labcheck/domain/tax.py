"""Percentage-based tax calculation.

``tax = amount * (rate / 100)`` and ``total = amount + tax``, in floating
point with no rounding. Currency rounding belongs to whoever displays
the value.
"""

from __future__ import annotations

import math

from labcheck.domain.errors import InvalidArgumentError


def _check_argument(name: str, label: str, value: float) -> None:
    if not math.isfinite(value):
        msg = f"{label} must be a finite number: {value}"
        raise InvalidArgumentError(name, value, msg)
    if value < 0:
        msg = f"{label} cannot be negative: {value}"
        raise InvalidArgumentError(name, value, msg)


def _check_arguments(amount: float, rate: float) -> None:
    _check_argument("amount", "Amount", amount)
    _check_argument("rate", "Tax rate", rate)


def tax_amount(amount: float, rate: float) -> float:
    """Return only the tax portion of *amount* at *rate* percent.

    Raises:
        InvalidArgumentError: ``argument`` is ``"amount"`` or ``"rate"``,
            whichever is negative or not finite (amount is checked first).
    """
    _check_arguments(amount, rate)
    return amount * (rate / 100)


def total_with_tax(amount: float, rate: float) -> float:
    """Return *amount* plus its tax at *rate* percent.

    Examples:
        >>> total_with_tax(100.0, 10.0)
        110.0
        >>> total_with_tax(0.0, 0.0)
        0.0
    """
    _check_arguments(amount, rate)
    return amount + amount * (rate / 100)
