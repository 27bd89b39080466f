"""ToscaSettings: one frozen object for CLI flags, env vars and TOML.

Highest priority first:

1. Keyword arguments (the CLI flags Click parsed)
2. ``TOSCATYPES_*`` environment variables (``__`` reaches into sections,
   e.g. ``TOSCATYPES_CHECK__MIN_SEVERITY=error``)
3. ``toscatypes.toml``
4. Defaults baked into :mod:`toscatypes.config.models`
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from toscatypes.config.discovery import find_config, read_toml
from toscatypes.config.models import CheckConfig, OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by an already-located TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_toml(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


# settings_customise_sources() is a classmethod with a fixed signature, so
# the file chosen by from_cli() reaches it through thread-local state.
_pending = threading.local()


class ToscaSettings(BaseSettings):
    """Resolved settings for one toscatypes invocation.

    Attributes:
        project_root: Directory holding the config file, or the working
            directory when there is none.
        config_path: The config file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TOSCATYPES_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # global CLI flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # toscatypes.toml sections
    check: CheckConfig = Field(default_factory=CheckConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> ToscaSettings:
        """Build settings for a CLI run.

        An explicit *config_path* must exist; otherwise the config is
        discovered by walking up from *project_root* (default: cwd).

        Raises:
            click.ClickException: Explicit config file missing, or the
                config file is not valid TOML.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        _pending.toml_path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None
