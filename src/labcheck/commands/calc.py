"""Command group: integer arithmetic."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labcheck.commands._base import LabGroup

if TYPE_CHECKING:
    from labcheck.commands._context import AppContext


@click.group(
    cls=LabGroup,
    examples="""\
  labcheck calc add 2 3
  labcheck calc divide 4 2
  labcheck calc is-even 4""",
)
def calc() -> None:
    """Basic integer arithmetic."""


def _binary(name: str, help_text: str) -> None:
    @calc.command(name, help=help_text)
    @click.argument("a", type=int)
    @click.argument("b", type=int)
    @click.pass_obj
    def _command(app: AppContext, a: int, b: int) -> None:
        app.emit(app.rules.calculate(name, a, b))


_binary("add", "Add A and B.")
_binary("subtract", "Subtract B from A.")
_binary("multiply", "Multiply A by B.")
_binary("divide", "Divide A by B.")


@calc.command("is-even")
@click.argument("number", type=int)
@click.pass_obj
def is_even(app: AppContext, number: int) -> None:
    """Check whether NUMBER is even."""
    app.emit(app.rules.calculate("is_even", number))
