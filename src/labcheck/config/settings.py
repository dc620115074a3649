"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  (CLI flags passed by Click)
  2. Env vars     (``LABCHECK_*`` prefix, ``__`` for nested sections)
  3. TOML file    (``labcheck.toml`` discovered via walk-up)
  4. Code defaults (baked into the section models)
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from labcheck.config.discovery import find_config, read_toml
from labcheck.config.models import OutputConfig, TaxConfig

# TOML file chosen by from_cli(), read while the settings object is built.
_active_toml: ContextVar[Path | None] = ContextVar("_active_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a ``labcheck.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values = read_toml(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return self._values


class LabSettings(BaseSettings):
    """Unified settings for the labcheck CLI.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        tax: ``[tax]`` section.
        output: ``[output]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LABCHECK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    tax: TaxConfig = Field(default_factory=TaxConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Order sources as CLI kwargs, then env vars, then TOML."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> LabSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* is used only when it names an existing
        file; discovery is skipped either way. Without it, ``labcheck.toml``
        is searched for upward from *start* (default: cwd).

        Raises:
            click.ClickException: The TOML file is malformed, or a TOML or
                ``LABCHECK_*`` value fails validation.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except (ValidationError, SettingsError) as exc:
            msg = f"Invalid configuration:\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _active_toml.reset(token)
