"""Configuration loading and dot-path access."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from modulefield.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["Config"]


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        An empty file yields an empty configuration.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or the top level is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            logger.debug("Config file %s is empty", yaml_path)
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
