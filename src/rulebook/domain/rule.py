"""Rule and self-validation capabilities.

A rule answers one question about one value. The engine only ever talks to
rules through :meth:`Rule.check`, which yields a three-state
:class:`Outcome`: valid, skip the remaining rules, or failed with an error.
Most rules only implement ``validate()`` and inherit the default ``check``;
skip-signalling rules override ``check`` directly so that "stop here" never
travels through the error channel.

Values opt into self-validation by subclassing :class:`Validatable` (or
:class:`ContextValidatable`). The engine checks for these ABCs, never for
a method that merely happens to be called ``validate``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from rulebook.domain.context import Context
from rulebook.domain.errors import ValidationFailure


class Verdict(StrEnum):
    """What a single rule decided about a value."""

    VALID = "valid"
    SKIP = "skip"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of running one rule (or one rule list) against a value."""

    verdict: Verdict
    error: ValidationFailure | None = None

    @classmethod
    def from_error(cls, error: ValidationFailure | None) -> Outcome:
        """Map the ``error-or-None`` rule contract onto an outcome."""
        if error is None:
            return VALID
        return cls(Verdict.FAILED, error)


VALID = Outcome(Verdict.VALID)
SKIP = Outcome(Verdict.SKIP)


class Rule(ABC):
    """A validation rule. Stateless, reentrant, never mutates the value."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationFailure | None:
        """Return None if *value* passes, otherwise the failure."""
        ...

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        """Evaluate this rule for the engine. *ctx* is ignored by default."""
        return Outcome.from_error(self.validate(value))


class ContextRule(Rule):
    """A rule that reads the validation context."""

    @abstractmethod
    def validate_with_context(self, ctx: Context, value: Any) -> ValidationFailure | None:
        """Return None if *value* passes under *ctx*, otherwise the failure."""
        ...

    def validate(self, value: Any) -> ValidationFailure | None:
        return self.validate_with_context(Context.background(), value)

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        if ctx is None:
            return Outcome.from_error(self.validate(value))
        return Outcome.from_error(self.validate_with_context(ctx, value))


# Anything accepted in a rule list: Rule instances or plain predicates that
# follow the same ``value -> failure-or-None`` contract.
RuleLike = Rule | Callable[[Any], ValidationFailure | None]


class Validatable(ABC):
    """Capability of values that know how to validate themselves."""

    @abstractmethod
    def validate(self) -> ValidationFailure | None:
        """Return None if valid, otherwise the failure (usually ``Errors``)."""
        ...


class ContextValidatable(Validatable):
    """Self-validation that reads the validation context."""

    @abstractmethod
    def validate_with_context(self, ctx: Context) -> ValidationFailure | None:
        """Return None if valid under *ctx*, otherwise the failure."""
        ...

    def validate(self) -> ValidationFailure | None:
        return self.validate_with_context(Context.background())
