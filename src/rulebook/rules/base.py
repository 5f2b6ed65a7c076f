"""Shared machinery for rules that fail with a configurable message."""

from __future__ import annotations

import copy
from typing import Any, Self

from rulebook.config.messages import new_error
from rulebook.domain.errors import ValidationError
from rulebook.domain.rule import Rule


class MessageRule(Rule):
    """A rule whose failure carries an error code and a message template.

    Subclasses set ``code`` and ``message`` as class attributes and call
    :meth:`fail` with the template parameters. Callers customise a single
    use with :meth:`with_message` / :meth:`with_code`; a ``[messages]``
    override in the settings replaces the class default for every use.
    """

    code: str = ""
    message: str = ""
    _custom_message: str | None = None

    def with_message(self, message: str) -> Self:
        """Copy of this rule failing with *message* instead of the default."""
        clone = copy.copy(self)
        clone._custom_message = message
        return clone

    def with_code(self, code: str) -> Self:
        """Copy of this rule reporting *code*."""
        clone = copy.copy(self)
        clone.code = code
        return clone

    def fail(self, **params: Any) -> ValidationError:
        """Build this rule's failure."""
        if self._custom_message is not None:
            return ValidationError(self._custom_message, code=self.code, params=params)
        return new_error(self.code, self.message, **params)
