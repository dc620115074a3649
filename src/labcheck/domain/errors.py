"""Rule violations raised by the guard-style domain operations.

The email checker never raises; the string rule and the calculators do.
"""

from __future__ import annotations

from typing import Any


class RuleError(ValueError):
    """Base class for rule violations."""


class InvalidInputError(RuleError):
    """Raised when text is absent or blank after trimming.

    Attributes:
        reason: ``"null"`` for absent input, ``"empty"`` for blank input.
    """

    def __init__(self, reason: str) -> None:
        if reason == "null":
            msg = "Input cannot be null."
        else:
            msg = "Input cannot be empty."
        super().__init__(msg)
        self.reason = reason


class InvalidArgumentError(RuleError):
    """Raised when a numeric argument violates its precondition.

    Attributes:
        argument: Name of the offending argument (``"amount"``, ``"rate"``, ...).
        value: The rejected value.
    """

    def __init__(self, argument: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value
