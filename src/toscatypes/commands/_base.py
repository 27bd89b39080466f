"""Click base classes shared by every toscatypes command.

Commands may pass ``examples=[...]``, a list of ready-to-paste invocations.
They are printed by an eager ``--examples`` flag, so a command's required
arguments are not demanded first. ``-h`` is accepted as ``--help``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


def _examples_option(examples: Sequence[str]) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in examples:
            click.echo(f"  $ {line}")
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples and exit.",
    )


class ToscaCommand(click.Command):
    """Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        kwargs.setdefault("context_settings", CONTEXT_SETTINGS)
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option(self.examples))


class ToscaGroup(click.Group):
    """Root group; subcommands default to :class:`ToscaCommand`."""

    command_class = ToscaCommand

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("context_settings", CONTEXT_SETTINGS)
        super().__init__(*args, **kwargs)
