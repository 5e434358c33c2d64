"""Value validation result types and the emptiness predicate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["ValidatorError", "ValidationResult", "is_empty"]


@dataclass(frozen=True)
class ValidatorError:
    """A single value validation failure.

    Attributes:
        message: Human-readable failure description.
        code: Machine-readable failure kind (e.g. ``"required"``).
        meta: Extra context for the caller, such as the field name.
    """

    message: str
    code: str = "invalid"
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Result of value validation.

    Attributes:
        valid: Whether validation passed.
        errors: Failures collected during validation; empty when valid.
    """

    valid: bool
    errors: list[ValidatorError] = field(default_factory=list)

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str, code: str = "invalid", **meta: Any) -> ValidationResult:
        """Create a failed result holding one error."""
        return cls(valid=False, errors=[ValidatorError(message=message, code=code, meta=meta)])

    @property
    def message(self) -> str | None:
        """Message of the first error, or None when valid."""
        return self.errors[0].message if self.errors else None

    def __bool__(self) -> bool:
        return self.valid


def is_empty(value: Any) -> bool:
    """Return True for None, empty strings, and sequences of only empty items."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return all(is_empty(item) for item in value)
    return False
