"""Tests for emptiness and shape predicates."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import pytest
from pydantic import BaseModel

from rulebook.domain.values import is_empty, is_mapping, is_nil, is_sequence


@dataclass
class Point:
    x: int = 0
    y: int = 0


class Tag(BaseModel):
    name: str = ""
    weight: float = 0.0


class TestIsEmpty:
    @pytest.mark.parametrize(
        "value",
        [None, "", b"", [], (), {}, set(), 0, 0.0, Decimal("0"), False, Point(), Tag()],
    )
    def test_empty_values(self, value: object) -> None:
        assert is_empty(value)

    @pytest.mark.parametrize(
        "value",
        ["x", b"x", [0], (None,), {"k": None}, 12, -1, 0.5, True, Point(x=1), Tag(name="a")],
    )
    def test_non_empty_values(self, value: object) -> None:
        assert not is_empty(value)

    def test_plain_object_is_not_empty(self) -> None:
        assert not is_empty(object())


class TestShapes:
    def test_is_nil(self) -> None:
        assert is_nil(None)
        assert not is_nil(0)
        assert not is_nil("")

    def test_sequences(self) -> None:
        assert is_sequence([1])
        assert is_sequence(())
        assert not is_sequence("abc")
        assert not is_sequence({1, 2})

    def test_mappings(self) -> None:
        assert is_mapping({})
        assert not is_mapping([])
