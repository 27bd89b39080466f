"""toscatypes — TOSCA scalar-unit and structural value types."""

from __future__ import annotations

__version__ = "0.1.0"
