"""Locate and read rulebook.toml.

Discovery only runs when an application asks for it through
``RulebookSettings.load()`` or ``configure_from_settings()``. Validation
itself never touches the filesystem.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "rulebook.toml"
CONFIG_ENV_VAR = "RULEBOOK_CONFIG"


class ConfigFileError(ValueError):
    """rulebook.toml exists but is not valid TOML."""


def _candidates(start: Path) -> Iterator[Path]:
    """Yield ``rulebook.toml`` in *start* and in each of its ancestors."""
    current = start.resolve()
    yield current / CONFIG_FILENAME
    for parent in current.parents:
        yield parent / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Path of the config file that applies to *start* (default: cwd), if any.

    ``RULEBOOK_CONFIG`` names the file explicitly and disables the walk-up;
    when it points at nothing there is no config.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return next((c for c in _candidates(start or Path.cwd()) if c.is_file()), None)


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigFileError: The file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(f"Invalid TOML in {path}: {exc}") from exc
