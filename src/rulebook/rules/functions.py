"""Wrap plain functions as rules: ``By`` and ``WithContext``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

from rulebook.domain.context import Context
from rulebook.domain.errors import ValidationError, ValidationFailure
from rulebook.domain.rule import ContextRule, Rule

Check: TypeAlias = Callable[[Any], ValidationFailure | str | None]
ContextCheck: TypeAlias = Callable[[Context, Any], ValidationFailure | str | None]


def _as_failure(result: ValidationFailure | str | None) -> ValidationFailure | None:
    if isinstance(result, str):
        return ValidationError(result)
    return result


class By(Rule):
    """Rule backed by ``func(value)``.

    *func* returns None when the value passes, or the failure. A plain
    string is taken as the failure message.
    """

    def __init__(self, func: Check) -> None:
        self.func = func

    def validate(self, value: Any) -> ValidationFailure | None:
        return _as_failure(self.func(value))


class WithContext(ContextRule):
    """Rule backed by ``func(ctx, value)``.

    Called without a context (plain :func:`validate`), *func* receives
    ``Context.background()``.

    Example::

        same_owner = WithContext(
            lambda ctx, value: None if value == ctx.value("owner") else "unexpected value"
        )
    """

    def __init__(self, func: ContextCheck) -> None:
        self.func = func

    def validate_with_context(self, ctx: Context, value: Any) -> ValidationFailure | None:
        return _as_failure(self.func(ctx, value))
