"""Command: validate and normalize scalar-unit values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from toscatypes.commands._base import ToscaCommand

if TYPE_CHECKING:
    from toscatypes.commands._context import AppContext


@click.command(
    cls=ToscaCommand,
    examples=[
        'toscatypes evaluate "10 GB"',
        'toscatypes evaluate "1 GiB" "2.5 GHz" "500 ms"',
        'toscatypes -q evaluate "4 KiB"',
        'toscatypes --json evaluate "1.5 h"',
    ],
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def evaluate(app: AppContext, values: tuple[str, ...]) -> None:
    """Normalize VALUES to bytes, Hz or nanoseconds."""
    from toscatypes.services.scalar import ScalarService

    app.emit(ScalarService(app.settings).evaluate(list(values)))
