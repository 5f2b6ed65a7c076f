"""Emptiness and shape predicates shared by rules and traversal.

"Empty" is the blank representative of a value's type: ``None``, ``""``,
``b""``, an empty container, ``False``, numeric zero, or a record
(dataclass / pydantic model) whose fields are all empty.
"""

from __future__ import annotations

import dataclasses
import numbers
from collections.abc import Mapping, Sized
from typing import Any

from pydantic import BaseModel


def is_nil(value: Any) -> bool:
    """True only for ``None``."""
    return value is None


def is_empty(value: Any) -> bool:
    """True when *value* is the blank representative of its type.

    Examples:
        >>> is_empty(""), is_empty(0), is_empty([]), is_empty("x")
        (True, True, True, False)
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, (str, bytes, bytearray)):
        return len(value) == 0
    if isinstance(value, BaseModel):
        return all(is_empty(getattr(value, name)) for name in type(value).model_fields)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_empty(getattr(value, f.name)) for f in dataclasses.fields(value))
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_sequence(value: Any) -> bool:
    """True for lists and tuples: the containers traversed by index."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)
