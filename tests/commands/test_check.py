"""Tests for the check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from toscatypes.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestCheckCommand:
    def test_clean_document(self, cli_runner: CliRunner, clean_document: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(clean_document)])
        assert result.exit_code == 0
        assert "No issues found (4 scalar-unit values" in result.output

    def test_reports_issues(self, cli_runner: CliRunner, sample_document: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(sample_document)])
        assert result.exit_code == 0
        assert "disk_size (line 11)" in result.output
        assert "ports[1] (line 19)" in result.output
        assert "2 errors, 1 warnings" in result.output

    def test_json_output(self, cli_runner: CliRunner, sample_document: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(sample_document)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["count"] == 3
        assert data["error_count"] == 2
        assert data["warning_count"] == 1
        assert data["healthy"] is False
        assert {i["kind"] for i in data["issues"]} == {
            "MALFORMED_SCALAR",
            "INVALID_NUMBER",
            "UNKNOWN_UNIT",
        }

    def test_errors_only(self, cli_runner: CliRunner, sample_document: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(sample_document), "--errors-only"])
        data = json.loads(result.stdout)["data"]
        assert data["count"] == 2
        assert data["warning_count"] == 0

    def test_min_severity(self, cli_runner: CliRunner, sample_document: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "check", str(sample_document), "--min-severity", "error"]
        )
        assert json.loads(result.stdout)["data"]["count"] == 2

    def test_min_severity_rejects_unknown_level(
        self, cli_runner: CliRunner, sample_document: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["check", str(sample_document), "--min-severity", "info"])
        assert result.exit_code == 2

    def test_evaluate_clean(self, cli_runner: CliRunner, clean_document: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(clean_document), "--evaluate"])
        assert result.exit_code == 0
        assert "mem_size" in result.output
        assert "4294967296" in result.output

    def test_evaluate_skipped_with_errors(
        self, cli_runner: CliRunner, sample_document: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["check", str(sample_document), "--evaluate"])
        assert result.exit_code == 0
        assert "WARNING: Document has errors; skipped evaluation" in result.stderr
        assert "skipped evaluation" not in result.stdout

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert json.loads(result.stderr)["error"]["code"] == "FILE_NOT_FOUND"

    def test_invalid_yaml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        doc = tmp_path / "broken.yaml"
        doc.write_text("key: [unclosed\n")
        result = cli_runner.invoke(cli, ["check", str(doc)])
        assert result.exit_code == 1
        assert "INVALID_YAML" in result.stderr

    def test_undecodable_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        doc = tmp_path / "latin1.yaml"
        doc.write_bytes(b"size: \xff\xfe 10 GB\n")
        result = cli_runner.invoke(cli, ["--json", "check", str(doc)])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNREADABLE_FILE"

    def test_quiet(self, cli_runner: CliRunner, clean_document: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", str(clean_document)])
        assert result.stdout.strip() == "OK: check"
