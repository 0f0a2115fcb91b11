"""Tests for the fresh CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from puzzlectl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestFreshCommand:
    def test_human_output(self, cli_runner: CliRunner, fresh_input: Path) -> None:
        result = cli_runner.invoke(cli, ["fresh", str(fresh_input)])
        assert result.exit_code == 0
        assert "answer: 3" in result.stdout
        assert "total_ranges: 4" in result.stdout

    def test_quiet(self, cli_runner: CliRunner, fresh_input: Path) -> None:
        result = cli_runner.invoke(cli, ["--quiet", "fresh", str(fresh_input)])
        assert result.stdout == "3\n"

    def test_json(self, cli_runner: CliRunner, fresh_input: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "fresh", str(fresh_input)])
        data = json.loads(result.stdout)
        assert data["data"] == {"answer": 3, "total_ids": 6, "total_ranges": 4}

    def test_missing_separator(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.txt"
        bad.write_text("3-5\n1\n")
        result = cli_runner.invoke(cli, ["--json", "fresh", str(bad)])
        assert result.exit_code == 1
        assert "MALFORMED_INPUT" in result.stderr

    def test_malformed_range(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.txt"
        bad.write_text("35\n\n1\n")
        result = cli_runner.invoke(cli, ["fresh", str(bad)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "no '-' separator" in result.stderr
