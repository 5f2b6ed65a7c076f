"""Presence rules: ``required``, ``not_nil``, ``nil``, ``empty``.

``required`` conflates "absent" with "present but blank": ``0``, ``False``
and ``""`` all fail it, the same as ``None``. Use ``not_nil`` when a blank
value is acceptable and only ``None`` should be rejected.
"""

from __future__ import annotations

import copy
from typing import Any, Self

from rulebook.domain.errors import ValidationError
from rulebook.domain.values import is_empty, is_nil
from rulebook.rules.base import MessageRule


class ConditionalMessageRule(MessageRule):
    """MessageRule that can be switched off with ``when(False)``."""

    condition: bool = True

    def when(self, condition: bool) -> Self:
        """Copy of this rule that only applies when *condition* is true."""
        clone = copy.copy(self)
        clone.condition = condition
        return clone


class RequiredRule(ConditionalMessageRule):
    """Fails on None and on the blank value of any type."""

    code = "validation_required"
    message = "cannot be blank"

    def validate(self, value: Any) -> ValidationError | None:
        if self.condition and is_empty(value):
            return self.fail()
        return None


class NotNilRule(ConditionalMessageRule):
    """Fails only on None."""

    code = "validation_not_nil_required"
    message = "is required"

    def validate(self, value: Any) -> ValidationError | None:
        if self.condition and is_nil(value):
            return self.fail()
        return None


class NilRule(ConditionalMessageRule):
    """Fails on anything but None."""

    code = "validation_nil"
    message = "must be blank"

    def validate(self, value: Any) -> ValidationError | None:
        if self.condition and not is_nil(value):
            return self.fail()
        return None


class EmptyRule(ConditionalMessageRule):
    """Fails on anything that is not blank."""

    code = "validation_empty"
    message = "must be blank"

    def validate(self, value: Any) -> ValidationError | None:
        if self.condition and not is_empty(value):
            return self.fail()
        return None


required = RequiredRule()
not_nil = NotNilRule()
nil = NilRule()
empty = EmptyRule()
