"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from rulebook.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    ConfigFileError,
    find_config,
    read_config_file,
)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[logging]\nverbose = true\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "anywhere") == config_file

    def test_env_var_pointing_nowhere(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadConfigFile:
    def test_parses_sections(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[messages]\nvalidation_required = "is mandatory"\n[logging]\nlog_json = true\n'
        )
        assert read_config_file(config_file) == {
            "messages": {"validation_required": "is mandatory"},
            "logging": {"log_json": True},
        }

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_config_file(config_file) == {}

    def test_invalid_toml_names_the_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("not = [valid\n")
        with pytest.raises(ConfigFileError, match=CONFIG_FILENAME):
            read_config_file(config_file)

    def test_config_file_error_is_value_error(self) -> None:
        assert issubclass(ConfigFileError, ValueError)
