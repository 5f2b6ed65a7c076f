"""Record validation: explicit (attribute, rules) declarations.

Records are not introspected. The record's author lists the attributes to
check, in the order they should run:

    @dataclass
    class Address(Validatable):
        street: str = ""
        city: str = ""

        def validate(self) -> ValidationFailure | None:
            return validate_struct(
                self,
                Field("street", required, Length(5, 50), label="Street"),
                Field("city", required, Length(5, 50), label="City"),
            )

Composition is label-transparent when asked for: a dotted path such as
``Field("employee.name", required)`` reports under ``name``, and
``Embedded("employee")`` merges the member's own errors into the parent
level as siblings. A merged label that the parent already uses raises
``DuplicateLabelError`` rather than hiding either failure.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from pydantic import BaseModel

from rulebook.core.evaluate import run
from rulebook.domain.context import Context
from rulebook.domain.errors import Errors, FieldNotFoundError, ValidationFailure, add_entry
from rulebook.domain.rule import RuleLike

logger = logging.getLogger(__name__)


def _resolve(obj: Any, path: str) -> tuple[Any, Any, str]:
    """Return ``(owner, value, attribute)`` for a dotted *path* on *obj*.

    A ``None`` link part-way down the path yields a ``None`` value.
    """
    owner = obj
    names = path.split(".")
    for name in names[:-1]:
        if not hasattr(owner, name):
            raise FieldNotFoundError(path, obj)
        owner = getattr(owner, name)
        if owner is None:
            return None, None, names[-1]
    last = names[-1]
    if not hasattr(owner, last):
        raise FieldNotFoundError(path, obj)
    return owner, getattr(owner, last), last


def _label_for(owner: Any, attribute: str) -> str:
    """Label of *attribute*: pydantic alias or dataclass ``label`` metadata, else its name."""
    if isinstance(owner, BaseModel):
        info = type(owner).model_fields.get(attribute)
        if info is not None and info.alias:
            return info.alias
    elif dataclasses.is_dataclass(owner):
        for f in dataclasses.fields(owner):
            if f.name == attribute and "label" in f.metadata:
                return str(f.metadata["label"])
    return attribute


class Field:
    """One record attribute and the rules that apply to it.

    A Field without rules defers to the attribute value's own
    ``Validatable.validate()``.
    """

    __slots__ = ("path", "rules", "label")

    def __init__(self, path: str, *rules: RuleLike, label: str | None = None) -> None:
        self.path = path
        self.rules = rules
        self.label = label

    def collect(
        self,
        obj: Any,
        ctx: Context | None,
        entries: dict[str, ValidationFailure | None],
    ) -> None:
        """Validate this attribute of *obj* and record the result in *entries*."""
        owner, value, attribute = _resolve(obj, self.path)
        label = self.label or _label_for(owner, attribute)
        add_entry(entries, label, run(value, self.rules, ctx))

    def __repr__(self) -> str:
        return f"Field({self.path!r}, rules={len(self.rules)})"


class Embedded(Field):
    """A composed member whose errors are reported as the parent's own.

    The member is validated with *rules* (or its own ``validate()`` when
    none are given). An ``Errors`` result is merged entry by entry into the
    parent aggregate; any other failure is reported under the member's label.
    """

    __slots__ = ()

    def collect(
        self,
        obj: Any,
        ctx: Context | None,
        entries: dict[str, ValidationFailure | None],
    ) -> None:
        owner, value, attribute = _resolve(obj, self.path)
        error = run(value, self.rules, ctx)
        if isinstance(error, Errors):
            for label, member_error in error.items():
                add_entry(entries, label, member_error)
        elif error is not None:
            add_entry(entries, self.label or _label_for(owner, attribute), error)


def validate_struct(obj: Any, *fields: Field) -> Errors | None:
    """Validate the declared attributes of *obj*.

    Every field is evaluated, so one failure never hides another. Returns
    the filtered aggregate, or None when every field passed.

    Raises:
        TypeError: *obj* is None.
        FieldNotFoundError: A field names an attribute *obj* does not have.
        DuplicateLabelError: Two fields report under the same label.
    """
    return _validate_struct(obj, fields, None)


def validate_struct_with_context(ctx: Context, obj: Any, *fields: Field) -> Errors | None:
    """Like :func:`validate_struct`, threading *ctx* to every rule."""
    return _validate_struct(obj, fields, ctx)


def _validate_struct(obj: Any, fields: tuple[Field, ...], ctx: Context | None) -> Errors | None:
    if obj is None:
        raise TypeError("validate_struct requires an object, got None")
    entries: dict[str, ValidationFailure | None] = {}
    for field in fields:
        field.collect(obj, ctx, entries)
    result = Errors(entries).filter()
    logger.debug(
        "Validated %s: %d fields, %d failed",
        type(obj).__name__,
        len(entries),
        len(result) if result is not None else 0,
    )
    return result
