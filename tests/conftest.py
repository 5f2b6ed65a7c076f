"""Shared pytest fixtures and sample record types for rulebook tests."""

from __future__ import annotations

import re
from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any

import pytest

from rulebook import (
    Context,
    ContextValidatable,
    Field,
    In,
    Length,
    Match,
    Validatable,
    ValidationFailure,
    WithContext,
    is_email,
    required,
    validate_struct,
    validate_struct_with_context,
)
from rulebook.config.settings import reset_settings

STATE_RE = re.compile(r"^[A-Z]{2}$")
ZIP_RE = re.compile(r"^[0-9]{5}$")


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test against code-default settings, never a stray rulebook.toml."""
    monkeypatch.delenv("RULEBOOK_CONFIG", raising=False)
    reset_settings()
    yield
    reset_settings()


# ---------------------------------------------------------------------------
# Sample records (used across test modules)
# ---------------------------------------------------------------------------


@dataclass
class Address(Validatable):
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    def validate(self) -> ValidationFailure | None:
        return validate_struct(
            self,
            Field("street", required, Length(5, 50), label="Street"),
            Field("city", required, Length(5, 50), label="City"),
            Field("state", required, Match(STATE_RE), label="State"),
            Field("zip", required, Match(ZIP_RE), label="Zip"),
        )


@dataclass
class Customer(Validatable):
    name: str = ""
    gender: str = ""
    email: str = ""
    address: Address = field(default_factory=Address)

    def validate(self) -> ValidationFailure | None:
        return validate_struct(
            self,
            Field("name", required, Length(5, 20), label="Name"),
            Field("gender", In("Female", "Male"), label="Gender"),
            Field("email", required, is_email, label="Email"),
            Field("address", label="Address"),
        )


OWNER_KEY = "owner"


def owner_matches(ctx: Context, value: Any) -> str | None:
    """Context check: the value must equal the owner stored in the context."""
    if value == ctx.value(OWNER_KEY):
        return None
    return "unexpected value"


@dataclass
class Account(ContextValidatable):
    owner: str = ""

    def validate_with_context(self, ctx: Context) -> ValidationFailure | None:
        return validate_struct_with_context(
            ctx,
            self,
            Field("owner", required, WithContext(owner_matches), label="Owner"),
        )


@dataclass
class Portfolio(ContextValidatable):
    account: Account = field(default_factory=Account)
    accounts: list[Account] = field(default_factory=list)

    def validate_with_context(self, ctx: Context) -> ValidationFailure | None:
        return validate_struct_with_context(
            ctx,
            self,
            Field("account", label="Account"),
            Field("accounts", label="Accounts"),
        )


class RecordingRule:
    """Plain-callable rule that records every value it sees."""

    def __init__(self, result: ValidationFailure | None = None) -> None:
        self.result = result
        self.calls: list[Any] = []

    def __call__(self, value: Any) -> ValidationFailure | None:
        self.calls.append(value)
        return self.result


def must_not_run(value: Any) -> ValidationFailure | None:
    raise AssertionError(f"rule should not have been invoked for {value!r}")
