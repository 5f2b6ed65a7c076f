"""Mapping validation: ``Map`` of ``Key`` declarations.

    validate(customer, Map(
        Key("Name", required, Length(5, 20)),
        Key("Address", Map(
            Key("Street", required),
            Key("Zip", required, Match(r"^[0-9]{5}$")),
        )),
    ))

Labels must be unique within one map: a key label that collides with another
key (or with an undeclared key name) raises ``DuplicateLabelError``.

A declared key missing from the mapping is validated as ``None`` (so
``required`` reports it as blank) unless the key is marked ``optional()``.
Keys that are not declared fail with "key not expected" unless the map
allows extra keys.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rulebook.config.messages import new_error
from rulebook.core.evaluate import run
from rulebook.domain.context import Context
from rulebook.domain.errors import Errors, NotAMappingError, ValidationFailure, add_entry
from rulebook.domain.rule import Outcome, Rule, RuleLike

logger = logging.getLogger(__name__)

KEY_UNEXPECTED = "validation_key_unexpected"


class Key:
    """One mapping key and the rules for its value."""

    __slots__ = ("key", "rules", "label", "is_optional")

    def __init__(self, key: Any, *rules: RuleLike, label: str | None = None) -> None:
        self.key = key
        self.rules = rules
        self.label = label
        self.is_optional = False

    def optional(self) -> Key:
        """Copy of this key that is skipped entirely when absent."""
        clone = Key(self.key, *self.rules, label=self.label)
        clone.is_optional = True
        return clone

    def __repr__(self) -> str:
        return f"Key({self.key!r}, rules={len(self.rules)})"


class Map(Rule):
    """Rule validating a mapping against an ordered list of keys."""

    def __init__(self, *keys: Key, allow_extra: bool = False) -> None:
        self.keys = keys
        self.allow_extra = allow_extra

    def allow_extra_keys(self) -> Map:
        """Copy of this rule that ignores undeclared keys."""
        return Map(*self.keys, allow_extra=True)

    def validate(self, value: Any) -> ValidationFailure | None:
        return self.evaluate(value, None)

    def check(self, value: Any, ctx: Context | None = None) -> Outcome:
        return Outcome.from_error(self.evaluate(value, ctx))

    def evaluate(self, value: Any, ctx: Context | None) -> Errors | None:
        """Validate every declared key of *value* (a mapping or None)."""
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise NotAMappingError(value)

        entries: dict[str, ValidationFailure | None] = {}
        declared = set()
        for key in self.keys:
            declared.add(key.key)
            if key.key in value:
                member = value[key.key]
            elif key.is_optional:
                continue
            else:
                member = None
            add_entry(entries, key.label or key.key, run(member, key.rules, ctx))

        if not self.allow_extra:
            for extra in value:
                if extra not in declared:
                    add_entry(entries, extra, new_error(KEY_UNEXPECTED, "key not expected"))

        result = Errors(entries).filter()
        logger.debug(
            "Validated mapping: %d keys, %d failed",
            len(entries),
            len(result) if result is not None else 0,
        )
        return result


def validate_map(mapping: Mapping[Any, Any] | None, *keys: Key) -> Errors | None:
    """Validate *mapping* against *keys*; None when every key passed."""
    return Map(*keys).evaluate(mapping, None)


def validate_map_with_context(
    ctx: Context,
    mapping: Mapping[Any, Any] | None,
    *keys: Key,
) -> Errors | None:
    """Like :func:`validate_map`, threading *ctx* to every rule."""
    return Map(*keys).evaluate(mapping, ctx)
