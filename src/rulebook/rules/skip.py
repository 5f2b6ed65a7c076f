"""Rules that end evaluation early: ``skip`` and ``optional``.

Both answer with the ``SKIP`` outcome, which the evaluation loop treats as
"valid, stop here". They never produce an error.
"""

from __future__ import annotations

from typing import Any

from rulebook.domain.context import Context
from rulebook.domain.errors import ValidationFailure
from rulebook.domain.rule import SKIP, VALID, Outcome, Rule
from rulebook.domain.values import is_empty


class SkipRule(Rule):
    """Stop evaluating the remaining rules, optionally only when a condition holds."""

    def __init__(self, condition: bool = True) -> None:
        self.condition = condition

    def when(self, condition: bool) -> SkipRule:
        return SkipRule(condition)

    def validate(self, value: Any) -> ValidationFailure | None:
        return None

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        return SKIP if self.condition else VALID


class OptionalRule(Rule):
    """Stop evaluating the remaining rules when the value is blank.

    ``validate("", optional, Length(5, 100), is_url)`` is valid, while a
    non-blank value still has to satisfy every rule after ``optional``.
    """

    def validate(self, value: Any) -> ValidationFailure | None:
        return None

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        return SKIP if is_empty(value) else VALID


skip = SkipRule()
optional = OptionalRule()
