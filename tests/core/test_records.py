"""Tests for validate_struct, Field and Embedded."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from pydantic import BaseModel
from pydantic import Field as ModelField

from rulebook import (
    Context,
    DuplicateLabelError,
    Embedded,
    Errors,
    Field,
    FieldNotFoundError,
    Length,
    ValidationError,
    ValidationFailure,
    WithContext,
    required,
    validate_struct,
    validate_struct_with_context,
)
from tests.conftest import Address, RecordingRule


@dataclass
class Profile:
    handle: str = ""
    bio: str = ""
    address: Address | None = None


class TestValidateStruct:
    def test_valid_record_is_none(self) -> None:
        p = Profile(handle="qiang", bio="hi")
        assert validate_struct(p, Field("handle", required), Field("bio", required)) is None

    def test_every_field_is_evaluated(self) -> None:
        handle_rule, bio_rule = RecordingRule(ValidationError("bad")), RecordingRule()
        err = validate_struct(
            Profile(handle="h", bio="b"),
            Field("handle", handle_rule),
            Field("bio", bio_rule),
        )
        assert str(err) == "handle: bad."
        assert handle_rule.calls == ["h"]
        assert bio_rule.calls == ["b"]

    def test_label_defaults_to_attribute_name(self) -> None:
        err = validate_struct(Profile(), Field("handle", required))
        assert isinstance(err, Errors)
        assert list(err) == ["handle"]

    def test_explicit_label(self) -> None:
        err = validate_struct(Profile(), Field("handle", required, label="Handle"))
        assert str(err) == "Handle: cannot be blank."

    def test_dataclass_label_metadata(self) -> None:
        @dataclass
        class Tagged:
            slug: str = field(default="", metadata={"label": "Slug"})

        assert str(validate_struct(Tagged(), Field("slug", required))) == "Slug: cannot be blank."

    def test_pydantic_alias_is_label(self) -> None:
        class Order(BaseModel):
            order_id: str = ModelField(default="", alias="orderId")
            note: str = ""

        err = validate_struct(Order(), Field("order_id", required), Field("note", required))
        assert str(err) == "note: cannot be blank; orderId: cannot be blank."

    def test_field_without_rules_uses_self_validation(self) -> None:
        p = Profile(handle="h", address=Address(street="123 Main St", city="Vienna", state="VA"))
        err = validate_struct(p, Field("handle", required), Field("address", label="Address"))
        assert str(err) == "Address: (Zip: cannot be blank)."

    def test_field_without_rules_and_none_value(self) -> None:
        assert validate_struct(Profile(handle="h"), Field("address")) is None

    def test_explicit_rules_replace_self_validation(self) -> None:
        p = Profile(address=Address())
        assert validate_struct(p, Field("address", RecordingRule())) is None

    def test_nested_leaf_rule_on_member(self) -> None:
        err = validate_struct(Profile(), Field("address", required, label="Address"))
        assert str(err) == "Address: cannot be blank."


class TestDottedPaths:
    def test_member_fields_reported_as_siblings(self) -> None:
        p = Profile(handle="h", address=Address(city="Vienna"))
        err = validate_struct(
            p,
            Field("handle", required),
            Field("address.street", required),
            Field("address.city", required, Length(1, 3)),
        )
        assert isinstance(err, Errors)
        assert list(err) == ["city", "street"]
        assert str(err) == "city: the length must be between 1 and 3; street: cannot be blank."

    def test_none_link_yields_none_value(self) -> None:
        err = validate_struct(Profile(), Field("address.street", required))
        assert str(err) == "street: cannot be blank."


@dataclass
class Audit:
    created_by: str = ""

    def validate(self) -> ValidationFailure | None:
        # Not a Validatable subclass, so the engine never calls this.
        raise AssertionError("duck-typed validate() must not be called")


class TestEmbedded:
    def test_merges_member_errors(self) -> None:
        @dataclass
        class Site:
            name: str = ""
            address: Address = field(default_factory=Address)

        err = validate_struct(Site(), Field("name", required, label="Name"), Embedded("address"))
        assert isinstance(err, Errors)
        assert list(err) == ["City", "Name", "State", "Street", "Zip"]

    def test_leaf_failure_keeps_member_label(self) -> None:
        @dataclass
        class Site:
            address: Address | None = None

        err = validate_struct(Site(), Embedded("address", required, label="Address"))
        assert str(err) == "Address: cannot be blank."

    def test_valid_member_adds_nothing(self) -> None:
        @dataclass
        class Site:
            address: Address = field(
                default_factory=lambda: Address(
                    street="123 Main St", city="Vienna", state="VA", zip="12345"
                )
            )

        assert validate_struct(Site(), Embedded("address")) is None

    def test_duck_typed_validate_is_not_a_capability(self) -> None:
        @dataclass
        class Entry:
            audit: Audit = field(default_factory=Audit)

        assert validate_struct(Entry(), Field("audit")) is None


class TestMisuse:
    def test_none_subject(self) -> None:
        with pytest.raises(TypeError):
            validate_struct(None, Field("x", required))

    def test_unknown_attribute(self) -> None:
        with pytest.raises(FieldNotFoundError, match="nickname"):
            validate_struct(Profile(), Field("nickname", required))

    def test_unknown_attribute_in_path(self) -> None:
        with pytest.raises(FieldNotFoundError):
            validate_struct(Profile(), Field("owner.name", required))


class TestWithContext:
    def test_context_reaches_field_rules(self) -> None:
        def limit(ctx: Context, value: Any) -> str | None:
            return "too long" if len(value) > ctx.value("max") else None

        p = Profile(handle="qiang")
        rule = WithContext(limit)
        short = Context.background().with_value("max", 3)
        long = Context.background().with_value("max", 10)
        assert str(validate_struct_with_context(short, p, Field("handle", rule))) == (
            "handle: too long."
        )
        assert validate_struct_with_context(long, p, Field("handle", rule)) is None


class TestLabelCollisions:
    def test_two_fields_with_one_label_raise(self) -> None:
        with pytest.raises(DuplicateLabelError, match="Handle"):
            validate_struct(
                Profile(),
                Field("handle", required, label="Handle"),
                Field("bio", required, label="Handle"),
            )

    def test_embedded_label_already_used_by_parent_raises(self) -> None:
        @dataclass
        class Site:
            zip: str = ""
            address: Address = field(default_factory=Address)

        with pytest.raises(DuplicateLabelError, match="Zip"):
            validate_struct(Site(), Field("zip", required, label="Zip"), Embedded("address"))

    def test_embedded_collision_raises_even_when_parent_field_passed(self) -> None:
        @dataclass
        class Site:
            zip: str = "12345"
            address: Address = field(default_factory=Address)

        with pytest.raises(DuplicateLabelError):
            validate_struct(Site(), Field("zip", required, label="Zip"), Embedded("address"))
