"""String rules: a non-blank guard and a palindrome check."""

from __future__ import annotations

import re

from labcheck.domain.errors import InvalidInputError

_WHITESPACE = re.compile(r"\s+")


def require_non_blank(text: str | None) -> None:
    """Raise :class:`InvalidInputError` if *text* is ``None`` or blank.

    This is a guard, not a query. Wrap it when a boolean is needed.
    """
    if text is None:
        raise InvalidInputError("null")
    if not text.strip():
        raise InvalidInputError("empty")


def fold_for_palindrome(text: str) -> str:
    """Drop every whitespace character and case-fold.

    Examples:
        >>> fold_for_palindrome("Take a Cat")
        'takeacat'
    """
    return _WHITESPACE.sub("", text).casefold()


def is_palindrome(text: str | None) -> bool:
    """Check whether *text* reads the same backwards, ignoring whitespace and case.

    Raises:
        InvalidInputError: If *text* is ``None`` or blank. Checked before any work.
    """
    require_non_blank(text)
    assert text is not None
    folded = fold_for_palindrome(text)
    return folded == folded[::-1]
