"""RuleService: the domain rules behind the ServiceResult contract.

Rule violations raised by the guard-style domain functions become
``ok=False`` results with a structured ServiceError. The email checker
never fails: a rejected address is a successful check with ``valid=False``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from labcheck.config.models import TaxConfig
from labcheck.domain import arithmetic, email, strings, tax
from labcheck.domain.errors import InvalidArgumentError, InvalidInputError
from labcheck.services.result import ServiceResult
from labcheck.services.telemetry import traced

logger = structlog.get_logger(__name__)

BINARY_OPERATIONS: dict[str, Callable[[int, int], int | float]] = {
    "add": arithmetic.add,
    "subtract": arithmetic.subtract,
    "multiply": arithmetic.multiply,
    "divide": arithmetic.divide,
}

UNARY_OPERATIONS: dict[str, Callable[[int], bool]] = {
    "is_even": arithmetic.is_even,
}


def _rule_failure(op: str, exc: InvalidInputError | InvalidArgumentError) -> ServiceResult:
    """Map a domain rule violation to a failed ServiceResult."""
    detail: dict[str, Any]
    if isinstance(exc, InvalidInputError):
        code = "INVALID_INPUT"
        detail = {"reason": exc.reason}
    else:
        code = "INVALID_ARGUMENT"
        detail = {"argument": exc.argument, "value": exc.value}
    logger.debug("rule.rejected", op=op, code=code, **detail)
    return ServiceResult.failure(op, code, str(exc), **detail)


class RuleService:
    """Runs validation and calculation rules for the CLI.

    Args:
        tax_config: Supplies the rate used when ``compute_tax`` gets none.
    """

    def __init__(self, tax_config: TaxConfig | None = None) -> None:
        self._tax = tax_config or TaxConfig()

    @traced
    def check_email(self, text: str | None) -> ServiceResult:
        """Run the structural email check and report each predicate."""
        valid = email.is_valid_email(text)
        warnings: list[str] = []
        if valid and not email.is_conventional_order(text):
            warnings.append(
                f"{text!r} passes the structural check but is not shaped like local@domain.tld"
            )
        logger.debug("email.checked", valid=valid)
        return ServiceResult.success(
            "check_email",
            warnings,
            email=text,
            valid=valid,
            present=email.is_present(text),
            non_blank=email.is_non_blank(text),
            has_at=email.contains_at(text),
            has_dot=email.contains_dot(text),
        )

    @traced
    def require_text(self, text: str | None) -> ServiceResult:
        op = "require_text"
        try:
            strings.require_non_blank(text)
        except InvalidInputError as exc:
            return _rule_failure(op, exc)
        return ServiceResult.success(op, text=text)

    @traced
    def check_palindrome(self, text: str | None) -> ServiceResult:
        op = "check_palindrome"
        try:
            palindrome = strings.is_palindrome(text)
        except InvalidInputError as exc:
            return _rule_failure(op, exc)
        logger.debug("palindrome.checked", palindrome=palindrome)
        return ServiceResult.success(op, text=text, palindrome=palindrome)

    @traced
    def compute_tax(self, amount: float, rate: float | None = None) -> ServiceResult:
        """Compute tax and total for *amount*.

        When *rate* is None the configured ``tax.default_rate`` applies.
        """
        op = "compute_tax"
        if rate is None:
            rate = self._tax.default_rate
        try:
            tax_value = tax.tax_amount(amount, rate)
            total = tax.total_with_tax(amount, rate)
        except InvalidArgumentError as exc:
            return _rule_failure(op, exc)
        logger.debug("tax.computed", amount=amount, rate=rate, total=total)
        return ServiceResult.success(op, amount=amount, rate=rate, tax=tax_value, total=total)

    @traced
    def calculate(self, operation: str, a: int, b: int | None = None) -> ServiceResult:
        """Apply a named arithmetic operation.

        Binary operations (``add``, ``subtract``, ``multiply``, ``divide``)
        require *b*; ``is_even`` uses *a* only.
        """
        op = "calculate"
        if operation in UNARY_OPERATIONS:
            return ServiceResult.success(
                op, operation=operation, a=a, result=UNARY_OPERATIONS[operation](a)
            )
        if operation not in BINARY_OPERATIONS:
            return ServiceResult.failure(
                op,
                "UNKNOWN_OPERATION",
                f"Unknown operation: {operation!r}",
                known=sorted([*BINARY_OPERATIONS, *UNARY_OPERATIONS]),
            )
        try:
            if b is None:
                msg = f"Operation {operation!r} needs a second operand."
                raise InvalidArgumentError("b", b, msg)
            result = BINARY_OPERATIONS[operation](a, b)
        except InvalidArgumentError as exc:
            return _rule_failure(op, exc)
        return ServiceResult.success(op, operation=operation, a=a, b=b, result=result)
