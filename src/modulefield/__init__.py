"""modulefield - Schema descriptors for fields of user-defined data modules."""

from __future__ import annotations

# Core
from modulefield.field import FIELD_NAME_PATTERN, RESOURCE_TYPE, DefaultValue, ModuleField

# Casting
from modulefield.cast import NO_ID

# Validation
from modulefield.validator import ValidationResult, ValidatorError, is_empty

# Kinds
from modulefield.kinds import Capabilities, FieldKind, FieldKindRegistry, load_kinds, registry

# Loading
from modulefield.loader import dump_fields, load_fields

# Config
from modulefield.config import Config

# Errors
from modulefield.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    FieldDefinitionError,
    FieldKindNotFoundError,
    FieldKindRegistrationError,
    InvalidInputError,
    ModuleFieldError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ModuleField",
    "DefaultValue",
    "FIELD_NAME_PATTERN",
    "RESOURCE_TYPE",
    "NO_ID",
    # Validation
    "ValidationResult",
    "ValidatorError",
    "is_empty",
    # Kinds
    "Capabilities",
    "FieldKind",
    "FieldKindRegistry",
    "load_kinds",
    "registry",
    # Loading
    "load_fields",
    "dump_fields",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ModuleFieldError",
    "ConfigError",
    "ConfigNotFoundError",
    "FieldDefinitionError",
    "FieldKindNotFoundError",
    "FieldKindRegistrationError",
    "InvalidInputError",
]
