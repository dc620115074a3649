"""Subcommand modules for labcheck.

Provides register_commands() which uses deferred imports to keep
``labcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (``calc``) + 4 standalone commands.
    """
    from labcheck.commands.calc import calc

    cli.add_command(calc)

    from labcheck.commands.email import email
    from labcheck.commands.tax import tax
    from labcheck.commands.text import palindrome, require

    cli.add_command(email)
    cli.add_command(palindrome)
    cli.add_command(require)
    cli.add_command(tax)
