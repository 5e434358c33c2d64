"""Loading module field definitions from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml

from modulefield.errors import ConfigNotFoundError, FieldDefinitionError
from modulefield.field import ModuleField

logger = logging.getLogger(__name__)

__all__ = ["load_fields", "dump_fields"]


def load_fields(path: str | Path) -> list[ModuleField]:
    """Load field definitions from a YAML file with a top-level ``fields`` list.

    Entries use the wire keys (``isRequired``, ``defaultValue``, ...).
    Entries with an invalid name are kept and logged.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        FieldDefinitionError: If the YAML is invalid or the document shape is wrong.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFoundError(config_path=str(path))

    content = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise FieldDefinitionError(file_path=str(path), reason=f"invalid YAML: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise FieldDefinitionError(file_path=str(path), reason="document must be a mapping")
    raw_fields = data.get("fields")
    if not isinstance(raw_fields, list):
        raise FieldDefinitionError(file_path=str(path), reason="'fields' must be a list")

    fields: list[ModuleField] = []
    for i, entry in enumerate(raw_fields):
        if not isinstance(entry, dict):
            raise FieldDefinitionError(
                file_path=str(path),
                reason=f"field {i} must be a mapping, got {type(entry).__name__}",
            )
        module_field = ModuleField.from_dict(entry)
        if not module_field.is_valid:
            logger.warning("Field %d in %s has an invalid name: %r", i, path, module_field.name)
        fields.append(module_field)

    logger.debug("Loaded %d fields from %s", len(fields), path)
    return fields


def dump_fields(fields: Iterable[ModuleField]) -> str:
    """Render fields as a YAML document readable by ``load_fields``."""
    return yaml.safe_dump({"fields": [f.to_dict() for f in fields]}, sort_keys=False)
