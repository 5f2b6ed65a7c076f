"""Validation error values and engine exceptions.

Two families live here:

- ``ValidationFailure`` subclasses describe *invalid data*. Rules return
  them (they are exceptions only so callers may ``raise`` them); the engine
  collects them, it never raises them itself.
- ``RulebookError`` subclasses describe a *broken call site* (asking for an
  attribute that does not exist, applying ``Map`` to a list) or a cancelled
  validation. These are raised and abort the whole call.

INVARIANT: ``str(Errors)`` is deterministic. Labels render in sorted order
no matter how the aggregate was built.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class RulebookError(Exception):
    """Base class for errors raised (not returned) by the engine."""


class FieldNotFoundError(RulebookError, AttributeError):
    """A ``Field`` names an attribute the record does not have."""

    def __init__(self, path: str, owner: object) -> None:
        self.path = path
        self.owner_type = type(owner).__name__
        super().__init__(f"field {path!r} not found on {self.owner_type}")


class NotAMappingError(RulebookError, TypeError):
    """``Map`` was applied to a value that is not a mapping."""

    def __init__(self, value: object) -> None:
        super().__init__(f"only a mapping can be validated by Map, got {type(value).__name__}")


class NotIterableError(RulebookError, TypeError):
    """``Each`` was applied to a value that cannot be iterated."""

    def __init__(self, value: object) -> None:
        super().__init__(f"must be an iterable (sequence or mapping), got {type(value).__name__}")


class DuplicateLabelError(RulebookError, ValueError):
    """Two members of one aggregate resolved to the same label."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"label {label!r} is used by more than one member")


class ValidationCancelled(RulebookError):
    """The validation context was cancelled or its deadline passed."""


class ValidationFailure(Exception):
    """Common base of leaf and aggregate validation errors."""


class ValidationError(ValidationFailure):
    """Why one concrete value failed one rule.

    Attributes:
        code: Stable machine-readable identifier (e.g. ``"validation_required"``).
        template: Message template with ``str.format`` placeholders.
        params: Values substituted into *template*.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.template = message
        self.params: dict[str, Any] = dict(params or {})
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """The rendered message."""
        if not self.params:
            return self.template
        return self.template.format_map(self.params)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r}, code={self.code!r})"


def add_entry(
    entries: dict[str, ValidationFailure | None],
    label: Any,
    error: ValidationFailure | None,
) -> None:
    """Record *error* under *label*, refusing to overwrite an earlier entry.

    Raises:
        DuplicateLabelError: *label* is already present in *entries*.
    """
    key = str(label)
    if key in entries:
        raise DuplicateLabelError(key)
    entries[key] = error


class Errors(ValidationFailure, Mapping[str, "ValidationFailure | None"]):
    """Label -> error aggregate for records, sequences and mappings.

    Entries may be ``None`` (that member passed). Labels are strings; integer
    indices and other keys are converted with ``str()`` on construction, and
    two entries converting to the same label raise ``DuplicateLabelError``.

    Examples:
        >>> str(Errors({"zip": ValidationError("cannot be blank"), "name": None}))
        'zip: cannot be blank.'
        >>> Errors({"name": None}).filter() is None
        True
    """

    def __init__(
        self,
        entries: Mapping[Any, ValidationFailure | None] | None = None,
        /,
        **named: ValidationFailure | None,
    ) -> None:
        data: dict[str, ValidationFailure | None] = {}
        for label, error in [*(entries or {}).items(), *named.items()]:
            add_entry(data, label, error)
        self._entries = data
        super().__init__()

    # Compared and hashed by identity, like any other exception. Compare
    # contents through as_dict().
    __eq__ = Exception.__eq__
    __hash__ = Exception.__hash__

    def __getitem__(self, label: str) -> ValidationFailure | None:
        return self._entries[label]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def filter(self) -> Errors | None:
        """Drop ``None`` entries; return ``None`` when nothing is left.

        Nested aggregates are filtered too, and disappear when they end up
        empty.
        """
        kept: dict[str, ValidationFailure] = {}
        for label, error in self._entries.items():
            if isinstance(error, Errors):
                error = error.filter()
            if error is not None:
                kept[label] = error
        return Errors(kept) if kept else None

    def as_dict(self) -> dict[str, Any]:
        """Nested ``{label: message}`` tree, ``None`` entries omitted."""
        tree: dict[str, Any] = {}
        for label in self:
            error = self._entries[label]
            if error is None:
                continue
            tree[label] = error.as_dict() if isinstance(error, Errors) else str(error)
        return tree

    def _render(self) -> str:
        parts: list[str] = []
        for label in self:
            error = self._entries[label]
            if error is None:
                continue
            if isinstance(error, Errors):
                parts.append(f"{label}: ({error._render()})")
            else:
                parts.append(f"{label}: {error}")
        return "; ".join(parts)

    def __str__(self) -> str:
        rendered = self._render()
        return f"{rendered}." if rendered else ""

    def __repr__(self) -> str:
        inner = ", ".join(f"{label!r}: {self._entries[label]!r}" for label in self)
        return f"Errors({{{inner}}})"
