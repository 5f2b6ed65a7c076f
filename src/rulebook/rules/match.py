"""``Match(pattern)``: the value must match a regular expression."""

from __future__ import annotations

import re
from typing import Any

from rulebook.domain.errors import ValidationError
from rulebook.rules.base import MessageRule


class Match(MessageRule):
    """String (or bytes) value must match *pattern*. Blank values pass.

    Non-string values fail with the same "invalid format" error.
    """

    code = "validation_match_invalid"
    message = "must be in a valid format"

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> ValidationError | None:
        if value is None or value == "" or value == b"":
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if isinstance(value, str) and self.pattern.search(value) is not None:
            return None
        return self.fail()
