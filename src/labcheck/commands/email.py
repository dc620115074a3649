"""Command: structural email check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labcheck.commands._base import LabCommand

if TYPE_CHECKING:
    from labcheck.commands._context import AppContext


@click.command(
    cls=LabCommand,
    examples="""\
  labcheck email usuario@dominio.com
  labcheck --json email "usuario@dominio"
  labcheck -q email "a@b.c\"""",
)
@click.argument("text")
@click.pass_obj
def email(app: AppContext, text: str) -> None:
    """Check whether TEXT looks like an email address (needs '@' and '.')."""
    app.emit(app.rules.check_email(text))
