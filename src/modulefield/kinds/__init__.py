"""Field kinds: capabilities and value validators per kind name.

Usage::

    from modulefield.kinds import Capabilities, FieldKind, registry

    registry.register(FieldKind("Rating", Capabilities(multi=False)))
"""

from __future__ import annotations

from modulefield.kinds.builtin import BUILTIN_KINDS
from modulefield.kinds.loader import KindDefinition, load_kinds, parse_kinds
from modulefield.kinds.registry import KIND_NAME_PATTERN, FieldKindRegistry, registry
from modulefield.kinds.types import BASE_CAPABILITIES, Capabilities, FieldKind

__all__ = [
    "BASE_CAPABILITIES",
    "BUILTIN_KINDS",
    "Capabilities",
    "FieldKind",
    "FieldKindRegistry",
    "KIND_NAME_PATTERN",
    "KindDefinition",
    "load_kinds",
    "parse_kinds",
    "registry",
]
