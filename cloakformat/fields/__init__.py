"""Field definitions and the registry that resolves them."""

from .builtin import BUILTIN_FIELDS, default_registry, pattern_formatter
from .loader import load_fields, load_fields_from_string, register_fields
from .registry import (
    FieldDefinition,
    FieldRegistry,
    SecretMode,
    plain_field_name,
)

__all__ = [
    "BUILTIN_FIELDS",
    "default_registry",
    "pattern_formatter",
    "load_fields",
    "load_fields_from_string",
    "register_fields",
    "FieldDefinition",
    "FieldRegistry",
    "SecretMode",
    "plain_field_name",
]
