"""Loading field kind definitions from YAML."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modulefield.errors import ConfigError, ConfigNotFoundError
from modulefield.kinds.types import Capabilities, FieldKind

logger = logging.getLogger(__name__)

__all__ = ["KindDefinition", "parse_kinds", "load_kinds"]


class CapabilitiesDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    configurable: bool = True
    multi: bool = True
    writable: bool = True
    required: bool = True
    private: bool = True


class KindDefinition(BaseModel):
    """One entry of a ``kinds`` list.

    Example::

        kinds:
          - name: Rating
            description: Star rating
            capabilities:
              multi: false
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(pattern=r"^\w+$")
    description: str = ""
    capabilities: CapabilitiesDefinition = Field(default_factory=CapabilitiesDefinition)

    def to_kind(self) -> FieldKind:
        return FieldKind(
            name=self.name,
            capabilities=Capabilities(**self.capabilities.model_dump()),
            description=self.description,
        )


def parse_kinds(raw: Any, source: str = "<config>") -> list[FieldKind]:
    """Validate a raw ``kinds`` list and convert it to FieldKind objects.

    Raises:
        ConfigError: If ``raw`` is not a list or an entry fails validation.
    """
    if not isinstance(raw, list):
        raise ConfigError(f"'kinds' in {source} must be a list, got {type(raw).__name__}")

    kinds: list[FieldKind] = []
    for i, entry in enumerate(raw):
        try:
            definition = KindDefinition.model_validate(entry)
        except ValidationError as e:
            raise ConfigError(f"Kind {i} in {source} is invalid: {e}", cause=e) from e
        kinds.append(definition.to_kind())
    return kinds


def load_kinds(yaml_path: str) -> list[FieldKind]:
    """Load field kind definitions from a YAML file with a top-level ``kinds`` list.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the YAML is invalid or has structural errors.
    """
    if not os.path.isfile(yaml_path):
        raise ConfigNotFoundError(config_path=yaml_path)

    with open(yaml_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Kind file must be a mapping, got {type(data).__name__}")
    if "kinds" not in data:
        raise ConfigError(f"Kind file {yaml_path} missing required 'kinds' key")

    kinds = parse_kinds(data["kinds"], source=yaml_path)
    logger.debug("Loaded %d field kinds from %s", len(kinds), yaml_path)
    return kinds
