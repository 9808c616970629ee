"""Tests for CLI help, version and usage errors."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pythcheck import __version__
from pythcheck.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_flags(flag: str) -> None:
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert "Usage" in result.output
    assert "--ignore-hidden" in result.output
    assert "--ignore-tests" in result.output
    assert "--ignore-return" in result.output


@pytest.mark.parametrize("flag", ["-V", "--version"])
def test_version_flags(flag: str) -> None:
    result = runner.invoke(app, [flag])
    assert result.exit_code == 0
    assert f"pythcheck {__version__}" in result.output


def test_no_arguments_shows_usage() -> None:
    result = runner.invoke(app, [])
    assert "Usage" in result.output


def test_missing_path_is_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing")])
    assert result.exit_code == 2


def test_invalid_jobs_is_usage_error(tmp_path: Path) -> None:
    (tmp_path / "a.py").write_text("def f() -> None: ...\n", encoding="utf-8")
    result = runner.invoke(app, [str(tmp_path), "--jobs", "0"])
    assert result.exit_code == 2
    assert "Worker count" in result.output


def test_invalid_jobs_env_is_usage_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a.py").write_text("def f() -> None: ...\n", encoding="utf-8")
    monkeypatch.setenv("PYTHCHECK_JOBS", "many")
    result = runner.invoke(app, [str(tmp_path)])
    assert result.exit_code == 2
    assert "PYTHCHECK_JOBS" in result.output
