"""``Each``: apply one rule list to every element of a collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from rulebook.core.evaluate import run
from rulebook.domain.context import Context
from rulebook.domain.errors import Errors, NotIterableError, ValidationFailure, add_entry
from rulebook.domain.rule import Outcome, Rule, RuleLike


class Each(Rule):
    """Validate every element of a sequence, or every value of a mapping.

    Failures are labelled by index (sequences) or key (mappings). Strings
    and bytes are scalars here, not sequences of characters.

    Example::

        validate(["a@b.io", "nope"], Each(is_email))
        # str(err) == "1: must be a valid email address."
    """

    def __init__(self, *rules: RuleLike) -> None:
        self.rules = rules

    def validate(self, value: Any) -> ValidationFailure | None:
        return self._run(value, None)

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        return Outcome.from_error(self._run(value, ctx))

    def _run(self, value: Any, ctx: Context | None) -> Errors | None:
        if value is None:
            return None
        if isinstance(value, Mapping):
            members: Iterable[tuple[Any, Any]] = value.items()
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray)):
            members = enumerate(value)
        else:
            raise NotIterableError(value)
        entries: dict[str, ValidationFailure | None] = {}
        for label, member in members:
            add_entry(entries, label, run(member, self.rules, ctx))
        return Errors(entries).filter()
