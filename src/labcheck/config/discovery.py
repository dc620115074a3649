"""Locate and load ``labcheck.toml``.

Lookup order: the ``LABCHECK_CONFIG`` env var, then a walk up from the
starting directory to the filesystem root (the way git finds ``.git/``).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from labcheck.config.models import LabConfig

CONFIG_FILENAME = "labcheck.toml"
CONFIG_ENV_VAR = "LABCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    A ``LABCHECK_CONFIG`` pointing at a missing file disables discovery.
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* into a raw dict; syntax errors become a ClickException."""
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> LabConfig:
    """Parse and validate a config file into :class:`LabConfig`.

    Falls back to discovery from *cwd* when *path* is None, and to the
    code defaults when nothing is found.
    """
    path = path or find_config(cwd)
    if path is None:
        return LabConfig()
    try:
        return LabConfig.model_validate(read_toml(path))
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}:\n{exc}"
        raise click.ClickException(msg) from exc
