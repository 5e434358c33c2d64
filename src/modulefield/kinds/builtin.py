"""Built-in field kinds and their value validators."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import urlparse

from modulefield.kinds.types import Capabilities, FieldKind
from modulefield.validator import ValidationResult

if TYPE_CHECKING:
    from modulefield.field import ModuleField

__all__ = ["BUILTIN_KINDS", "validate_number", "validate_email", "validate_url"]

_EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


def _items(value: Any) -> list[str]:
    """Non-empty string items of a single or multi value."""
    items = value if isinstance(value, (list, tuple)) else [value]
    return [str(item) for item in items if item is not None and item != ""]


def _check_items(
    field: ModuleField,
    value: Any,
    accept: Callable[[str], bool],
    message: str,
    code: str,
) -> ValidationResult:
    for item in _items(value):
        if not accept(item):
            return ValidationResult.fail(message, code=code, field=field.name, value=item)
    return ValidationResult.ok()


def _is_number(item: str) -> bool:
    try:
        return math.isfinite(float(item))
    except ValueError:
        return False


def _is_url(item: str) -> bool:
    parsed = urlparse(item)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_number(field: ModuleField, value: Any) -> ValidationResult:
    return _check_items(field, value, _is_number, "invalid number", "number")


def validate_email(field: ModuleField, value: Any) -> ValidationResult:
    return _check_items(field, value, lambda item: bool(_EMAIL_PATTERN.fullmatch(item)), "invalid email", "email")


def validate_url(field: ModuleField, value: Any) -> ValidationResult:
    return _check_items(field, value, _is_url, "invalid URL", "url")


BUILTIN_KINDS: tuple[FieldKind, ...] = (
    FieldKind("Bool", Capabilities(multi=False), description="Checkbox"),
    FieldKind("DateTime", description="Date and/or time"),
    FieldKind("Email", validate=validate_email, description="Email address"),
    FieldKind("File", description="File attachment"),
    FieldKind("Number", validate=validate_number, description="Number"),
    FieldKind("Record", description="Reference to another record"),
    FieldKind("Select", description="Select from a list of options"),
    FieldKind("String", description="Text"),
    FieldKind("Url", validate=validate_url, description="URL"),
    FieldKind("User", description="Reference to a user"),
)
