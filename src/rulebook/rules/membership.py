"""Set membership rules: ``In`` and ``NotIn``. Blank values pass."""

from __future__ import annotations

from typing import Any

from rulebook.domain.errors import ValidationError
from rulebook.domain.values import is_empty
from rulebook.rules.base import MessageRule


class In(MessageRule):
    """Value must equal one of *elements*."""

    code = "validation_in_invalid"
    message = "must be a valid value"

    def __init__(self, *elements: Any) -> None:
        self.elements = elements

    def validate(self, value: Any) -> ValidationError | None:
        if is_empty(value) or value in self.elements:
            return None
        return self.fail()


class NotIn(MessageRule):
    """Value must differ from every one of *elements*."""

    code = "validation_not_in_invalid"
    message = "must not be in list"

    def __init__(self, *elements: Any) -> None:
        self.elements = elements

    def validate(self, value: Any) -> ValidationError | None:
        if is_empty(value) or value not in self.elements:
            return None
        return self.fail()
