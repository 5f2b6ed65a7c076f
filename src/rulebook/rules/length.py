"""``Length(min, max)``: bounds on ``len(value)``. Blank values pass."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from rulebook.domain.errors import ValidationError
from rulebook.domain.values import is_empty
from rulebook.rules.base import MessageRule


class Length(MessageRule):
    """Length of a string, bytes or container must be within ``[min, max]``.

    A bound of 0 means "unbounded" on that side; ``Length(0, 0)`` requires
    the value to be blank.
    """

    def __init__(self, min: int, max: int) -> None:
        self.min = min
        self.max = max
        if min == 0 and max == 0:
            self.code = "validation_length_empty_required"
            self.message = "the value must be empty"
        elif min == max:
            self.code = "validation_length_invalid"
            self.message = "the length must be exactly {min}"
        elif max == 0:
            self.code = "validation_length_too_short"
            self.message = "the length must be no less than {min}"
        elif min == 0:
            self.code = "validation_length_too_long"
            self.message = "the length must be no more than {max}"
        else:
            self.code = "validation_length_out_of_range"
            self.message = "the length must be between {min} and {max}"

    def validate(self, value: Any) -> ValidationError | None:
        if is_empty(value):
            return None
        if not isinstance(value, Sized):
            raise TypeError(f"cannot get the length of {type(value).__name__}")
        size = len(value)
        too_short = self.min > 0 and size < self.min
        too_long = self.max > 0 and size > self.max
        if too_short or too_long or (self.min == 0 and self.max == 0):
            return self.fail(min=self.min, max=self.max)
        return None
