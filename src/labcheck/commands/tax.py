"""Command: tax and total for an amount."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labcheck.commands._base import LabCommand

if TYPE_CHECKING:
    from labcheck.commands._context import AppContext


@click.command(
    cls=LabCommand,
    examples="""\
  labcheck tax 100 --rate 10
  labcheck tax 29.99
  labcheck -q tax 200 --rate 15""",
)
@click.argument("amount", type=float)
@click.option(
    "--rate",
    type=float,
    default=None,
    help="Tax rate in percent. Defaults to [tax] default_rate.",
)
@click.pass_obj
def tax(app: AppContext, amount: float, rate: float | None) -> None:
    """Compute the tax on AMOUNT and the total including tax."""
    app.emit(app.rules.compute_tax(amount, rate))
