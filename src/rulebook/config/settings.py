"""Unified settings: init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: passed by the embedding application
  2. Env vars: ``RULEBOOK_*`` prefix
  3. TOML file: ``rulebook.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`rulebook.config.discovery`.

Rules resolve message overrides through :mod:`rulebook.config.messages` at
failure time, against the *active* settings. Until an application installs
settings with :func:`use_settings` (usually ``use_settings(RulebookSettings.load())``
or :func:`rulebook.config.logging.configure_from_settings`) the active
settings are the code defaults: no env vars, no file discovery.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rulebook.config.discovery import find_config, read_config_file
from rulebook.config.models import LoggingConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rulebook.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config_file(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RulebookSettings(BaseSettings):
    """Unified settings for the validation engine.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        messages: Error code -> message template overrides.
        logging: Logging section (verbosity and renderer).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RULEBOOK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    messages: dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> RulebookSettings:
        """Construct settings, discovering ``rulebook.toml`` when needed.

        An explicit *config_path* wins over walk-up discovery from *start*
        (default: cwd). *overrides* take priority over env vars and TOML.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


# Code defaults only: built without consulting env vars or files.
DEFAULT_SETTINGS = RulebookSettings.model_construct()

_active: RulebookSettings = DEFAULT_SETTINGS


def get_settings() -> RulebookSettings:
    """Return the active settings (code defaults until replaced)."""
    return _active


def use_settings(settings: RulebookSettings) -> None:
    """Install *settings* as the active settings."""
    global _active
    _active = settings


def reset_settings() -> None:
    """Go back to the code defaults."""
    global _active
    _active = DEFAULT_SETTINGS
