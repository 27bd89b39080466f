"""Command: lint scalar-unit values in a YAML document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from toscatypes.commands._base import ToscaCommand

if TYPE_CHECKING:
    from toscatypes.commands._context import AppContext


@click.command(
    cls=ToscaCommand,
    examples=[
        "toscatypes check service.yaml",
        "toscatypes check service.yaml --errors-only",
        "toscatypes check service.yaml --evaluate",
        "toscatypes --json check service.yaml",
    ],
)
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default=None,
    help="Hide issues below this severity (default from [check] config).",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.option("--evaluate", "evaluate_values", is_flag=True, help="Also list normalized values.")
@click.pass_obj
def check(
    app: AppContext,
    document: Path,
    min_severity: str | None,
    errors_only: bool,
    evaluate_values: bool,
) -> None:
    """Check every scalar-unit value in DOCUMENT."""
    from toscatypes.services.check import CheckService

    threshold = "error" if errors_only else min_severity
    app.emit(
        CheckService(app.settings).check(
            document,
            min_severity=threshold,  # type: ignore[arg-type]
            evaluate=evaluate_values,
        )
    )
