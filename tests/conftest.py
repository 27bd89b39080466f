"""Shared pytest fixtures and test helpers for toscatypes tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from toscatypes.config.settings import ToscaSettings

SAMPLE_DOCUMENT = """\
tosca_definitions_version: tosca_simple_yaml_1_3
description: Web server with 3 replicas
topology_template:
  node_templates:
    server:
      type: tosca.nodes.Compute
      capabilities:
        host:
          properties:
            mem_size: 4 GiB
            disk_size: 10GB
            cpu_frequency: 2.5 GHz
    app:
      properties:
        timeout: 30 s
        retry: 3 tries
        ports:
          - 80
          - abc ms
"""

CLEAN_DOCUMENT = """\
node_templates:
  server:
    properties:
      mem_size: 4 GiB
      timeout: 500 ms
      frequencies: [1 GHz, 2.4 GHz]
"""


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings resolution."""
    for name in ("TOSCATYPES_CONFIG", "TOSCATYPES_JSON_OUTPUT", "TOSCATYPES_QUIET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ToscaSettings:
    """Default settings rooted in an empty temp directory."""
    return ToscaSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def sample_document(tmp_path: Path) -> Path:
    """A TOSCA-like document mixing valid and invalid scalar-unit values."""
    path = tmp_path / "service.yaml"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def clean_document(tmp_path: Path) -> Path:
    """A document whose scalar-unit values are all valid."""
    path = tmp_path / "clean.yaml"
    path.write_text(CLEAN_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so config discovery finds nothing unexpected."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """CLI runs reconfigure logging onto CliRunner's streams; undo that."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package = logging.getLogger("toscatypes")
    package_level = package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
