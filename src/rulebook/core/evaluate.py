"""Evaluation loop and the ``validate`` entry points.

A rule list is evaluated in declaration order against one value:

- ``SKIP`` stops evaluation and the value counts as valid;
- the first ``FAILED`` outcome wins, later rules are never invoked;
- ``VALID`` moves on to the next rule.

With no rules at all, the value validates itself: a ``Validatable`` calls
its own ``validate()``; lists, tuples and mappings validate every member
that way and report failures under the member's index or key.

INVARIANT: The engine never touches the context it is given. The same
``Context`` instance reaches every rule at every depth.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from rulebook.domain.context import Context
from rulebook.domain.errors import Errors, ValidationFailure, add_entry
from rulebook.domain.rule import (
    VALID,
    ContextValidatable,
    Outcome,
    Rule,
    RuleLike,
    Validatable,
    Verdict,
)
from rulebook.domain.values import is_mapping, is_sequence

logger = logging.getLogger(__name__)


def check_rule(rule: RuleLike, value: Any, ctx: Context | None = None) -> Outcome:
    """Run one rule. Plain callables follow the ``value -> failure-or-None`` contract."""
    if isinstance(rule, Rule):
        return rule.check(value, ctx)
    return Outcome.from_error(rule(value))


def apply_rules(value: Any, rules: Iterable[RuleLike], ctx: Context | None = None) -> Outcome:
    """Evaluate *rules* against *value*, stopping at the first skip or failure."""
    for rule in rules:
        outcome = check_rule(rule, value, ctx)
        if outcome.verdict is not Verdict.VALID:
            return outcome
    return VALID


def validate(value: Any, *rules: RuleLike) -> ValidationFailure | None:
    """Validate *value* against *rules*.

    Returns None when valid, otherwise a ``ValidationError`` (a single rule
    failed) or ``Errors`` (members of an aggregate failed).

    Example::

        err = validate("example", required, Length(5, 100), is_url)
        # str(err) == "must be a valid URL"
    """
    return run(value, rules, None)


def validate_with_context(ctx: Context, value: Any, *rules: RuleLike) -> ValidationFailure | None:
    """Like :func:`validate`, threading *ctx* to every context-aware rule."""
    return run(value, rules, ctx)


def run(value: Any, rules: Sequence[RuleLike], ctx: Context | None) -> ValidationFailure | None:
    """Shared body of every entry point: rules if given, else self-validation."""
    if rules:
        return apply_rules(value, rules, ctx).error
    return self_validate(value, ctx)


def self_validate(value: Any, ctx: Context | None = None) -> ValidationFailure | None:
    """Validate *value* through its own capability, if it has one."""
    if ctx is not None and isinstance(value, ContextValidatable):
        return value.validate_with_context(ctx)
    if isinstance(value, Validatable):
        return value.validate()
    if is_mapping(value):
        return _validate_members(value.items(), ctx)
    if is_sequence(value):
        return _validate_members(enumerate(value), ctx)
    return None


def _validate_members(
    members: Iterable[tuple[Any, Any]],
    ctx: Context | None,
) -> Errors | None:
    entries: dict[str, ValidationFailure | None] = {}
    for label, member in members:
        add_entry(entries, label, self_validate(member, ctx))
    result = Errors(entries).filter()
    logger.debug(
        "Validated %d members, %d failed",
        len(entries),
        len(result) if result is not None else 0,
    )
    return result
