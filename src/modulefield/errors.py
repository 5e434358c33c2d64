"""Error hierarchy for the modulefield package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ModuleFieldError",
    "ConfigNotFoundError",
    "ConfigError",
    "FieldKindNotFoundError",
    "FieldKindRegistrationError",
    "FieldDefinitionError",
    "InvalidInputError",
    "ErrorCodes",
]


class ModuleFieldError(Exception):
    """Base error for all modulefield errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ModuleFieldError):
    """Raised when a configuration or definition file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ModuleFieldError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class FieldKindNotFoundError(ModuleFieldError):
    """Raised when a field kind is not registered."""

    def __init__(self, kind: str, **kwargs: Any) -> None:
        super().__init__(
            code="FIELD_KIND_NOT_FOUND",
            message=f"Field kind not found: {kind}",
            details={"kind": kind},
            **kwargs,
        )

    @property
    def kind(self) -> str:
        """The kind name that was looked up."""
        return self.details["kind"]


class FieldKindRegistrationError(ModuleFieldError):
    """Raised when a field kind cannot be registered."""

    def __init__(self, kind: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="FIELD_KIND_REGISTRATION_ERROR",
            message=f"Cannot register field kind '{kind}': {reason}",
            details={"kind": kind, "reason": reason},
            **kwargs,
        )


class FieldDefinitionError(ModuleFieldError):
    """Raised when a field definition file has parse errors or an invalid shape."""

    def __init__(self, *, file_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="FIELD_DEFINITION_INVALID",
            message=f"Invalid field definition file '{file_path}': {reason}",
            details={"file_path": file_path, "reason": reason},
            **kwargs,
        )


class InvalidInputError(ModuleFieldError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.FIELD_KIND_NOT_FOUND:
            fall_back_to_base_kind()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    FIELD_KIND_NOT_FOUND = "FIELD_KIND_NOT_FOUND"
    FIELD_KIND_REGISTRATION_ERROR = "FIELD_KIND_REGISTRATION_ERROR"
    FIELD_DEFINITION_INVALID = "FIELD_DEFINITION_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
