"""Field kind types: Capabilities, FieldKind."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from modulefield.field import ModuleField
    from modulefield.validator import ValidationResult

__all__ = ["Capabilities", "FieldKind", "BASE_CAPABILITIES"]


@dataclass(frozen=True)
class Capabilities:
    """Which behavioral flags a field kind may set.

    A disabled capability forces the matching field flag to False.

    Attributes:
        configurable: Whether the field can be configured at all.
        multi: Whether ``is_multi`` may be set.
        writable: Whether ``is_writable`` may be set.
        required: Whether ``is_required`` may be set.
        private: Whether ``is_private`` may be set.
    """

    configurable: bool = True
    multi: bool = True
    writable: bool = True
    required: bool = True
    private: bool = True


BASE_CAPABILITIES = Capabilities()


@dataclass(frozen=True)
class FieldKind:
    """A named field kind with its capabilities and optional value validator.

    ``validate`` receives the field and the candidate value and returns a
    ValidationResult. It is only called once the base required check passed.
    """

    name: str
    capabilities: Capabilities = field(default_factory=Capabilities)
    validate: Callable[[ModuleField, Any], ValidationResult] | None = None
    description: str = ""
