"""Commands: non-blank guard and palindrome check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labcheck.commands._base import LabCommand

if TYPE_CHECKING:
    from labcheck.commands._context import AppContext


@click.command(
    cls=LabCommand,
    examples="""\
  labcheck palindrome reconocer
  labcheck palindrome "Taco cat"
  labcheck --json palindrome Hola""",
)
@click.argument("text")
@click.pass_obj
def palindrome(app: AppContext, text: str) -> None:
    """Check whether TEXT is a palindrome, ignoring whitespace and case."""
    app.emit(app.rules.check_palindrome(text))


@click.command(
    cls=LabCommand,
    examples="""\
  labcheck require hello
  labcheck require "   \"""",
)
@click.argument("text")
@click.pass_obj
def require(app: AppContext, text: str) -> None:
    """Fail unless TEXT is non-blank."""
    app.emit(app.rules.require_text(text))
