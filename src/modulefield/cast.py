"""Cast rules used when applying partial input onto a module field.

Casts never raise. Input that cannot be interpreted falls back to the
type's zero value (``NO_ID``, ``""``, ``0`` or ``False``).
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Mapping

__all__ = [
    "NO_ID",
    "cast_id",
    "cast_str",
    "cast_number",
    "cast_bool",
    "apply_props",
]

NO_ID = "0"

_ID_PATTERN = re.compile(r"^[0-9]+$")
_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def cast_id(value: Any) -> str:
    """Cast to an identifier string.

    Accepts non-negative integers and all-digit strings. Anything else,
    including booleans, becomes ``NO_ID``.
    """
    if isinstance(value, bool):
        return NO_ID
    if isinstance(value, int):
        return str(value) if value >= 0 else NO_ID
    if isinstance(value, str):
        value = value.strip()
        if _ID_PATTERN.match(value):
            return value
    return NO_ID


def cast_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def cast_number(value: Any) -> int | float:
    """Cast to a number, preferring ``int`` when the value is integral."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return cast_number(float(value))
        except ValueError:
            return 0
    return 0


def cast_bool(value: Any) -> bool:
    """Cast to a boolean.

    Strings such as ``"false"``, ``"0"`` or ``"off"`` are false, any other
    non-empty string is true. Other values use Python truthiness.
    """
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def apply_props(
    target: dict[str, Any],
    source: Mapping[str, Any],
    cast: Callable[[Any], Any],
    *props: str,
) -> None:
    """Copy each prop present in ``source`` into ``target`` through ``cast``.

    Props missing from ``source`` are left untouched in ``target``.
    """
    for prop in props:
        if prop in source:
            target[prop] = cast(source[prop])
