"""AppContext, the object every command receives via ``@click.pass_obj``.

Holds the resolved settings and owns result emission, so commands only
build a ServiceResult and hand it over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from toscatypes.config.logging import configure_logging
from toscatypes.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from toscatypes.config.settings import ToscaSettings
    from toscatypes.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Settings plus stdout/stderr routing for one CLI invocation."""

    def __init__(self, settings: ToscaSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )
        if settings.config_path is not None:
            logger.debug("Using config %s", settings.config_path)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Success goes to stdout; its warnings go to stderr unless they are
        already part of the JSON payload. Failure goes to stderr and exits
        with status 1.
        """
        mode = self.output_settings
        text = format_result(result, settings=mode)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not mode.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
