"""Pydantic configuration section models with code-baked defaults.

Sparse TOML contract: defaults baked here, rulebook.toml only contains
overrides. An absent section is equivalent to an empty one.
"""

from __future__ import annotations

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section.

    Attributes:
        verbose: Emit the engine's DEBUG traversal summaries.
        log_json: Render log lines as JSON instead of console text.
    """

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
