"""Locate and read ``toscatypes.toml``.

Lookup order:

1. ``TOSCATYPES_CONFIG``, when set. A missing file there means no config;
   the walk-up is not attempted.
2. The nearest ``toscatypes.toml`` walking up from the start directory,
   the way git finds ``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

from toscatypes.config.models import ToscaConfig

CONFIG_FILENAME = "toscatypes.toml"
CONFIG_ENV_VAR = "TOSCATYPES_CONFIG"


def config_candidates(start: Path | None = None) -> Iterator[Path]:
    """Yield each walk-up location of ``toscatypes.toml``, nearest first."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None
    return next((c for c in config_candidates(start) if c.is_file()), None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> ToscaConfig:
    """Validate the config at *path*, discovering it from *cwd* when omitted.

    No config file at all yields the code defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return ToscaConfig()
    return ToscaConfig.model_validate(read_toml(path))
