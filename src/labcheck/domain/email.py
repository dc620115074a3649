"""Coarse structural checks for email-like strings.

Rules applied by :func:`is_valid_email`, in order:

1. ``None`` is invalid.
2. Blank after trimming is invalid.
3. Missing ``@`` is invalid.
4. Missing ``.`` is invalid.

There is no check on the order, count, or position of ``@`` and ``.``:
``"@."`` and ``".@"`` both pass. Callers that need real address parsing
must look elsewhere.

INVARIANT: nothing here raises. Absent input folds to ``False``.
"""

from __future__ import annotations


def is_present(text: str | None) -> bool:
    """Return True when *text* is not ``None``."""
    return text is not None


def is_non_blank(text: str | None) -> bool:
    """Return True when *text* is present and not blank after trimming."""
    return text is not None and text.strip() != ""


def contains_at(text: str | None) -> bool:
    return text is not None and "@" in text


def contains_dot(text: str | None) -> bool:
    return text is not None and "." in text


def is_valid_email(text: str | None) -> bool:
    """Check *text* against the structural email rules.

    Examples:
        >>> is_valid_email("usuario@dominio.com")
        True
        >>> is_valid_email("usuario@dominio")
        False
        >>> is_valid_email(".@")
        True
    """
    if not is_present(text):
        return False
    if not is_non_blank(text):
        return False
    if not contains_at(text):
        return False
    return contains_dot(text)


def is_conventional_order(text: str | None) -> bool:
    """Return True when a ``.`` follows the first ``@`` with text on both sides.

    Not part of :func:`is_valid_email`; used to warn about values the
    permissive check accepts (``"@."``, ``"a.b@c"``).
    """
    if text is None or "@" not in text:
        return False
    local, _, domain = text.strip().partition("@")
    name, dot, tld = domain.rpartition(".")
    return bool(local) and bool(dot) and bool(name) and bool(tld)
