"""Subcommand modules for toscatypes.

Provides register_commands() which uses deferred imports to keep
``toscatypes --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from toscatypes.commands.check import check
    from toscatypes.commands.evaluate import evaluate

    cli.add_command(evaluate)
    cli.add_command(check)
