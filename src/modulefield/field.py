"""Module field descriptor: the schema of one attribute of a data module."""

from __future__ import annotations

import copy
import dataclasses
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from modulefield.cast import NO_ID, apply_props, cast_bool, cast_id, cast_number, cast_str
from modulefield.kinds.registry import registry
from modulefield.kinds.types import Capabilities
from modulefield.utils.merge import deep_merge
from modulefield.validator import ValidationResult, is_empty

logger = logging.getLogger(__name__)

__all__ = ["ModuleField", "DefaultValue", "FIELD_NAME_PATTERN", "RESOURCE_TYPE"]

FIELD_NAME_PATTERN = re.compile(r"^\w+$", re.ASCII)
RESOURCE_TYPE = "compose:module-field"

# Wire (camelCase) key -> attribute name. Attribute names are accepted as input too.
_KEY_ALIASES: dict[str, str] = {
    "fieldID": "field_id",
    "defaultValue": "default_value",
    "maxLength": "max_length",
    "isRequired": "is_required",
    "isPrivate": "is_private",
    "isMulti": "is_multi",
    "isSystem": "is_system",
    "isWritable": "is_writable",
    "canUpdateRecordValue": "can_update_record_value",
    "canReadRecordValue": "can_read_record_value",
}

# Field flag -> capability that must be enabled for the flag to be set.
_FLAG_CAPABILITIES: tuple[tuple[str, str], ...] = (
    ("is_multi", "multi"),
    ("is_required", "required"),
    ("is_private", "private"),
    ("is_writable", "writable"),
)


@dataclass(frozen=True)
class DefaultValue:
    """One default value entry."""

    value: Any


def _normalize_default_values(entries: Any) -> tuple[DefaultValue, ...]:
    """Drop entries without a value and reduce the rest to DefaultValue."""
    result: list[DefaultValue] = []
    for entry in entries:
        if isinstance(entry, Mapping):
            value = entry.get("value")
        else:
            value = getattr(entry, "value", None)
        if value is not None:
            result.append(DefaultValue(value))
    return tuple(result)


@dataclass(frozen=True)
class ModuleField:
    """Schema descriptor for one field of a user-defined data module.

    Instances are immutable. ``apply`` returns an updated copy, and every
    instance is normalized on creation: flags not allowed by the kind's
    capabilities are cleared and system fields always allow reading and
    updating record values. Capabilities are read from the shared kind
    registry at creation time; after the registry changes, existing fields
    keep their flags until ``normalized`` or a non-empty ``apply``.

    Attributes:
        field_id: Identifier; ``NO_ID`` until persisted.
        name: Programmatic name, valid when it matches ``FIELD_NAME_PATTERN``.
        kind: Field kind name, resolved through the kind registry.
        label: Display name.
        default_value: Ordered default values.
        max_length: Length constraint, 0 when unset. Stored only.
        options: Kind-specific configuration.
    """

    field_id: str = NO_ID
    name: str = ""
    kind: str = ""
    label: str = ""

    default_value: tuple[DefaultValue, ...] = field(default=(), hash=False)
    max_length: int | float = 0

    is_required: bool = False
    is_private: bool = False
    is_multi: bool = False
    is_system: bool = False
    is_writable: bool = False

    options: dict[str, Any] = field(default_factory=dict, hash=False)

    can_update_record_value: bool = False
    can_read_record_value: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_value", _normalize_default_values(self.default_value))
        options = self.options if isinstance(self.options, Mapping) else {}
        object.__setattr__(self, "options", copy.deepcopy(dict(options)))

        cap = self.cap
        for flag, capability in _FLAG_CAPABILITIES:
            if getattr(self, flag) and not getattr(cap, capability):
                logger.debug(
                    "Field '%s': kind '%s' does not allow '%s', clearing %s",
                    self.name,
                    self.kind,
                    capability,
                    flag,
                )
                object.__setattr__(self, flag, False)

        if self.is_system:
            object.__setattr__(self, "can_update_record_value", True)
            object.__setattr__(self, "can_read_record_value", True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ModuleField:
        """Create a field from a (partial) snapshot."""
        return cls().apply(data)

    def apply(self, partial: Mapping[str, Any] | ModuleField | None = None) -> ModuleField:
        """Return a copy of this field updated from ``partial``.

        Keys may use the wire names (``isRequired``) or attribute names
        (``is_required``). Unknown keys are ignored and absent keys keep
        their current value. ``default_value`` is replaced only by a list,
        ``options`` are deep-merged, and record access flags from input are
        ignored for system fields. Never raises on malformed input.

        Args:
            partial: Mapping or another ModuleField. Empty or falsy input
                returns self and any other non-mapping input is ignored.

        Returns:
            The updated field.
        """
        if isinstance(partial, ModuleField):
            partial = partial.to_dict()
        if not partial or not isinstance(partial, Mapping):
            return self

        source: dict[str, Any] = {}
        for key, value in partial.items():
            attr = _KEY_ALIASES.get(key, key)
            if attr in _FIELD_NAMES:
                source[attr] = value

        updates: dict[str, Any] = {}
        apply_props(updates, source, cast_id, "field_id")
        apply_props(updates, source, cast_str, "name", "label", "kind")
        apply_props(updates, source, cast_number, "max_length")
        apply_props(updates, source, cast_bool, "is_required", "is_private", "is_multi", "is_system", "is_writable")
        apply_props(updates, source, cast_bool, "can_update_record_value", "can_read_record_value")

        if isinstance(source.get("default_value"), (list, tuple)):
            updates["default_value"] = _normalize_default_values(source["default_value"])

        if isinstance(source.get("options"), Mapping):
            updates["options"] = deep_merge(self.options, source["options"])

        return dataclasses.replace(self, **updates)

    def normalized(self) -> ModuleField:
        """Copy re-checked against the current capabilities of the kind."""
        return dataclasses.replace(self)

    def clone(self) -> ModuleField:
        """Deep copy sharing no mutable state with this field."""
        return type(self).from_dict(copy.deepcopy(self.to_dict()))

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain dict with wire (camelCase) keys."""
        return {
            "fieldID": self.field_id,
            "name": self.name,
            "kind": self.kind,
            "label": self.label,
            "defaultValue": [{"value": dv.value} for dv in self.default_value],
            "maxLength": self.max_length,
            "isRequired": self.is_required,
            "isPrivate": self.is_private,
            "isMulti": self.is_multi,
            "isSystem": self.is_system,
            "isWritable": self.is_writable,
            "options": copy.deepcopy(self.options),
            "canUpdateRecordValue": self.can_update_record_value,
            "canReadRecordValue": self.can_read_record_value,
        }

    @property
    def is_valid(self) -> bool:
        """True when the name consists only of word characters."""
        return FIELD_NAME_PATTERN.fullmatch(self.name) is not None

    @property
    def cap(self) -> Capabilities:
        """Capabilities of this field's kind."""
        return registry.capabilities(self.kind)

    def validate_value(self, value: str | list[str] | None) -> ValidationResult:
        """Validate a candidate record value for this field.

        Required fields reject empty values. Otherwise the kind's validator,
        if any, decides. ``max_length`` is not checked.
        """
        if self.is_required and is_empty(value):
            return ValidationResult.fail("missing required value", code="required", field=self.name)

        kind = registry.find(self.kind)
        if kind is not None and kind.validate is not None:
            return kind.validate(self, value)
        return ValidationResult.ok()

    @property
    def resource_type(self) -> str:
        return RESOURCE_TYPE

    @property
    def resource_id(self) -> str:
        return f"{self.resource_type}:{self.field_id}"


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(ModuleField))
