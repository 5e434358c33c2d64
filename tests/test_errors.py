"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from modulefield.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FieldDefinitionError,
    FieldKindNotFoundError,
    FieldKindRegistrationError,
    InvalidInputError,
    ModuleFieldError,
)


class TestModuleFieldError:
    def test_attributes(self) -> None:
        cause = ValueError("root")
        err = ModuleFieldError(code="X", message="msg", details={"k": 1}, cause=cause)
        assert err.code == "X"
        assert err.message == "msg"
        assert err.details == {"k": 1}
        assert err.cause is cause
        assert err.timestamp
        assert str(err) == "[X] msg"

    def test_details_default(self) -> None:
        assert ModuleFieldError(code="X", message="msg").details == {}


class TestSubclasses:
    @pytest.mark.parametrize(
        ("err", "code"),
        [
            (ConfigNotFoundError("a.yaml"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError("bad"), ErrorCodes.CONFIG_INVALID),
            (FieldKindNotFoundError("Rating"), ErrorCodes.FIELD_KIND_NOT_FOUND),
            (FieldKindRegistrationError("Rating", "taken"), ErrorCodes.FIELD_KIND_REGISTRATION_ERROR),
            (FieldDefinitionError(file_path="f.yaml", reason="bad"), ErrorCodes.FIELD_DEFINITION_INVALID),
            (InvalidInputError(), ErrorCodes.GENERAL_INVALID_INPUT),
        ],
    )
    def test_codes(self, err: ModuleFieldError, code: str) -> None:
        assert isinstance(err, ModuleFieldError)
        assert err.code == code

    def test_messages(self) -> None:
        assert ConfigNotFoundError("a.yaml").message == "Configuration file not found: a.yaml"
        assert FieldKindNotFoundError("Rating").message == "Field kind not found: Rating"
        assert (
            FieldKindRegistrationError("Rating", "taken").message
            == "Cannot register field kind 'Rating': taken"
        )


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().CONFIG_INVALID = "x"  # type: ignore[misc]
