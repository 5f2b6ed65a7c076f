"""rulebook: composable validation rules with exhaustive, structured errors.

    from rulebook import Field, Length, Match, required, validate_struct

    err = validate_struct(
        address,
        Field("street", required, Length(5, 50), label="Street"),
        Field("state", required, Match(r"^[A-Z]{2}$"), label="State"),
    )
    print(err)  # State: must be in a valid format; Street: cannot be blank.
"""

from rulebook.core.each import Each
from rulebook.core.evaluate import (
    apply_rules,
    check_rule,
    self_validate,
    validate,
    validate_with_context,
)
from rulebook.core.mappings import Key, Map, validate_map, validate_map_with_context
from rulebook.core.records import (
    Embedded,
    Field,
    validate_struct,
    validate_struct_with_context,
)
from rulebook.domain.context import CancelFunc, Context
from rulebook.domain.errors import (
    DuplicateLabelError,
    Errors,
    FieldNotFoundError,
    NotAMappingError,
    NotIterableError,
    RulebookError,
    ValidationCancelled,
    ValidationError,
    ValidationFailure,
)
from rulebook.domain.rule import (
    SKIP,
    VALID,
    ContextRule,
    ContextValidatable,
    Outcome,
    Rule,
    RuleLike,
    Validatable,
    Verdict,
)
from rulebook.domain.values import is_empty, is_nil
from rulebook.rules.base import MessageRule
from rulebook.rules.formats import StringRule, is_email, is_url
from rulebook.rules.functions import By, WithContext
from rulebook.rules.length import Length
from rulebook.rules.match import Match
from rulebook.rules.membership import In, NotIn
from rulebook.rules.required import empty, nil, not_nil, required
from rulebook.rules.skip import optional, skip
from rulebook.rules.when import When

__all__ = [
    "SKIP",
    "VALID",
    "By",
    "CancelFunc",
    "Context",
    "ContextRule",
    "ContextValidatable",
    "DuplicateLabelError",
    "Each",
    "Embedded",
    "Errors",
    "Field",
    "FieldNotFoundError",
    "In",
    "Key",
    "Length",
    "Map",
    "Match",
    "MessageRule",
    "NotAMappingError",
    "NotIn",
    "NotIterableError",
    "Outcome",
    "Rule",
    "RuleLike",
    "RulebookError",
    "StringRule",
    "Validatable",
    "ValidationCancelled",
    "ValidationError",
    "ValidationFailure",
    "Verdict",
    "When",
    "WithContext",
    "apply_rules",
    "check_rule",
    "empty",
    "is_email",
    "is_empty",
    "is_nil",
    "is_url",
    "nil",
    "not_nil",
    "optional",
    "required",
    "self_validate",
    "skip",
    "validate",
    "validate_map",
    "validate_map_with_context",
    "validate_struct",
    "validate_struct_with_context",
    "validate_with_context",
]
