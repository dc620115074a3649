"""Click base classes adding an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-paste invocations
and exits before the command body runs.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Registers an eager ``--examples`` option when examples are given."""

    examples: str | None
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class LabCommand(_ExamplesMixin, click.Command):
    """Command accepting an ``examples=`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class LabGroup(_ExamplesMixin, click.Group):
    """Group accepting an ``examples=`` keyword; subcommands default to LabCommand."""

    command_class = LabCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
