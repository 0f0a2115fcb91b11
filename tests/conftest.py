"""Shared pytest fixtures for puzzlectl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from hypothesis import HealthCheck
from hypothesis import settings as hypothesis_settings

from puzzlectl.config.settings import PuzzleSettings
from puzzlectl.services.telemetry import _current_span, disable_telemetry

# The autouse env/telemetry reset below is per test, not per example.
hypothesis_settings.register_profile(
    "puzzlectl",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
hypothesis_settings.load_profile("puzzlectl")

DIAL_EXAMPLE = """\
L68
L30
R48
L5
R60
L55
L1
L99
R14
L82"""

FRESH_EXAMPLE = """\
3-5
10-14
16-20
12-18

1
5
8
11
17
32"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop PUZZLECTL_* env vars, then reset telemetry and log handlers."""
    for key in list(os.environ):
        if key.startswith("PUZZLECTL_"):
            monkeypatch.delenv(key)
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PuzzleSettings:
    """Default settings with no config file in reach."""
    return PuzzleSettings.from_cli(config_path=None, start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no puzzlectl.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def dial_input(tmp_path: Path) -> Path:
    path = tmp_path / "dial.txt"
    path.write_text(DIAL_EXAMPLE + "\n", encoding="utf-8")
    return path


@pytest.fixture
def fresh_input(tmp_path: Path) -> Path:
    path = tmp_path / "fresh.txt"
    path.write_text(FRESH_EXAMPLE + "\n", encoding="utf-8")
    return path


@pytest.fixture
def dial_text() -> str:
    return DIAL_EXAMPLE


@pytest.fixture
def fresh_text() -> str:
    return FRESH_EXAMPLE
