"""Recursive merge of option mappings."""

from __future__ import annotations

import copy
from typing import Any, Mapping

__all__ = ["deep_merge"]


def deep_merge(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``incoming`` into a copy of ``base`` and return the copy.

    Nested mappings are merged key by key and lists are merged index by
    index, so keys absent from ``incoming`` survive. On any other conflict
    the ``incoming`` value wins. Neither argument is modified and the
    result shares no mutable state with them.

    Args:
        base: Existing options.
        incoming: Options to merge on top.

    Returns:
        A new merged dict.
    """
    result = copy.deepcopy(dict(base))
    for key, value in incoming.items():
        result[key] = _merge_value(result.get(key), value)
    return result


def _merge_value(current: Any, value: Any) -> Any:
    if isinstance(value, Mapping):
        if isinstance(current, Mapping):
            return deep_merge(current, value)
        return deep_merge({}, value)
    if isinstance(value, list):
        if isinstance(current, list):
            merged = list(current)
            for i, item in enumerate(value):
                if i < len(merged):
                    merged[i] = _merge_value(merged[i], item)
                else:
                    merged.append(_merge_value(None, item))
            return merged
        return [_merge_value(None, item) for item in value]
    return copy.deepcopy(value)
