"""ValidationReport: serialisable summary of one validation call.

The engine itself returns ``None`` or a failure object. Adapters that need
to ship a result across a boundary (HTTP responses, logs, JSON files)
convert it once with :func:`build_report`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rulebook.domain.errors import Errors, ValidationError, ValidationFailure


class ErrorDetail(BaseModel):
    """Leaf failure payload."""

    model_config = {"frozen": True}

    code: str = ""
    message: str
    params: dict[str, Any] = Field(default_factory=dict)


class ValidationReport(BaseModel):
    """Result of a validation call.

    Attributes:
        ok: True when the value was valid.
        op: Name of what was validated (e.g. ``"customer"``).
        message: Rendered failure text, empty when ok.
        errors: Nested ``{label: message}`` tree for aggregate failures.
        detail: Code, message and params for a leaf failure.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str = "validate"
    message: str = ""
    errors: dict[str, Any] = Field(default_factory=dict)
    detail: ErrorDetail | None = None


def build_report(error: ValidationFailure | None, *, op: str = "validate") -> ValidationReport:
    """Convert an engine result into a :class:`ValidationReport`."""
    if error is None:
        return ValidationReport(ok=True, op=op)
    if isinstance(error, Errors):
        return ValidationReport(ok=False, op=op, message=str(error), errors=error.as_dict())
    detail = None
    if isinstance(error, ValidationError):
        detail = ErrorDetail(code=error.code, message=error.message, params=error.params)
    return ValidationReport(ok=False, op=op, message=str(error), detail=detail)
