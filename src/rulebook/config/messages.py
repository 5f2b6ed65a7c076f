"""Message templates resolved against the active settings.

Rules and traversal build their failures through :func:`new_error` so that a
``[messages]`` override in the active settings replaces the built-in English
text for a given error code. The lookup is a plain dict read; it never loads
configuration itself.
"""

from __future__ import annotations

from typing import Any

from rulebook.config.settings import get_settings
from rulebook.domain.errors import ValidationError


def message_template(code: str, default: str) -> str:
    """Template for *code*: the configured override, else *default*."""
    if not code:
        return default
    return get_settings().messages.get(code, default)


def new_error(code: str, default: str, **params: Any) -> ValidationError:
    """Build a ValidationError whose template honours message overrides."""
    return ValidationError(message_template(code, default), code=code, params=params)
