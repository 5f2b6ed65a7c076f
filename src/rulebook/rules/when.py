"""Conditional rule selection: ``When(condition, *rules).otherwise(*rules)``."""

from __future__ import annotations

from typing import Any

from rulebook.core.evaluate import apply_rules
from rulebook.domain.context import Context
from rulebook.domain.errors import ValidationFailure
from rulebook.domain.rule import Outcome, Rule, RuleLike


class When(Rule):
    """Run *rules* when *condition* is true, the ``otherwise`` rules if not.

    The condition is fixed when the rule is built; the chosen list is
    evaluated afresh on every call. A skip inside the chosen list ends the
    enclosing rule list too, so ``When(is_draft, skip)`` is a conditional
    skip.

    Example::

        validate(
            customer.vat_id,
            When(customer.country in EU, required, Match(VAT_RE)).otherwise(nil),
        )
    """

    def __init__(self, condition: bool, *rules: RuleLike) -> None:
        self.condition = condition
        self.rules = rules
        self.else_rules: tuple[RuleLike, ...] = ()

    def otherwise(self, *rules: RuleLike) -> When:
        """Copy of this rule with *rules* as the alternate list."""
        clone = When(self.condition, *self.rules)
        clone.else_rules = rules
        return clone

    def validate(self, value: Any) -> ValidationFailure | None:
        return self.check(value).error

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        chosen = self.rules if self.condition else self.else_rules
        return apply_rules(value, chosen, ctx)
