"""Shared pytest fixtures for labcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from labcheck.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir with no labcheck env overrides.

    Keeps a stray ``labcheck.toml`` or ``LABCHECK_*`` variable on the
    developer machine out of settings discovery.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LABCHECK_CONFIG", raising=False)
    monkeypatch.delenv("LABCHECK_TAX__DEFAULT_RATE", raising=False)
    monkeypatch.delenv("LABCHECK_OUTPUT__DECIMALS", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    lab = logging.getLogger("labcheck")
    lab_level = lab.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    lab.setLevel(lab_level)
    disable_telemetry()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes ``labcheck.toml`` into the temp dir."""

    def _write(content: str) -> Path:
        path = tmp_path / "labcheck.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
