"""Tests for LabSettings: unified settings with TOML source."""

from collections.abc import Callable
from pathlib import Path

import click
import pytest

from labcheck.config.settings import LabSettings


class TestLabSettingsDefaults:
    def test_all_defaults(self) -> None:
        settings = LabSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.tax.default_rate == 12.0
        assert settings.output.decimals == 2

    def test_frozen(self) -> None:
        settings = LabSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_discovered_toml(self, write_config: Callable[[str], Path]) -> None:
        path = write_config("[tax]\ndefault_rate = 15.0\n")
        settings = LabSettings.from_cli()
        assert settings.config_path == path.resolve()
        assert settings.tax.default_rate == 15.0
        assert settings.output.decimals == 2  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\ndecimals = 5\n")
        settings = LabSettings.from_cli(config_path=str(custom))
        assert settings.output.decimals == 5
        assert settings.config_path == custom

    def test_missing_explicit_path_skips_discovery(
        self, write_config: Callable[[str], Path], tmp_path: Path
    ) -> None:
        write_config("[tax]\ndefault_rate = 15.0\n")
        settings = LabSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.tax.default_rate == 12.0

    def test_invalid_toml(self, write_config: Callable[[str], Path]) -> None:
        write_config("[tax\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LabSettings.from_cli()


class TestPriority:
    def test_env_overrides_toml(
        self, write_config: Callable[[str], Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config("[tax]\ndefault_rate = 15.0\n")
        monkeypatch.setenv("LABCHECK_TAX__DEFAULT_RATE", "8.5")
        settings = LabSettings.from_cli()
        assert settings.tax.default_rate == 8.5

    def test_cli_flags_override_toml(self, write_config: Callable[[str], Path]) -> None:
        write_config("quiet = true\n")
        settings = LabSettings.from_cli(quiet=False)
        assert settings.quiet is False

    def test_toml_top_level_flag(self, write_config: Callable[[str], Path]) -> None:
        write_config("json_output = true\n")
        assert LabSettings.from_cli().json_output is True


class TestInvalidValues:
    def test_toml_value_out_of_range(self, write_config: Callable[[str], Path]) -> None:
        write_config("[tax]\ndefault_rate = -5\n")
        with pytest.raises(click.ClickException, match="Invalid configuration") as exc:
            LabSettings.from_cli()
        assert "default_rate" in exc.value.message

    def test_toml_decimals_out_of_range(self, write_config: Callable[[str], Path]) -> None:
        write_config("[output]\ndecimals = 99\n")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            LabSettings.from_cli()

    def test_env_value_not_a_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LABCHECK_TAX__DEFAULT_RATE", "abc")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            LabSettings.from_cli()
