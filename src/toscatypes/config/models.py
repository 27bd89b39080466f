"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, toscatypes.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Severity = Literal["warning", "error"]


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    unknown_unit_severity: Severity = "warning"
    min_severity: Severity = "warning"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    duration_format: Literal["ticks", "timedelta"] = "ticks"


class ToscaConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    check: CheckConfig = Field(default_factory=CheckConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
