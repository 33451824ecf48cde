"""CloakFormat: positional pattern formatting and partial masking of values.

CloakFormat fills patterns such as ``###.###.###-##`` with raw values and
produces secret variants that hide part of a value while keeping separators
and special characters visible. Each formatter remembers the raw value last
supplied per field.
"""

import logging
from typing import Optional

__version__ = "0.1.0"
__author__ = "CloakFormat Team"
__email__ = "contact@example.com"

from .core import (
    MASK_CHAR,
    CloakFormatError,
    FieldConfigError,
    FieldError,
    FieldNotFoundError,
    FieldRegistrationError,
    FormatOptions,
    FormatterConfig,
    OriginalValueStore,
    SecretSpan,
    SpecialSecretSpan,
    ValidationError,
    apply_pattern,
    get_config,
    letters_only,
    mask,
    mask_segmented,
    numeric_only,
    reset_config,
)
from .fields import (
    FieldDefinition,
    FieldRegistry,
    SecretMode,
    default_registry,
    load_fields,
    register_fields,
)
from .formatter import Formatter
from .logging_cfg import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

_default_formatter: Optional[Formatter] = None


def get_default_formatter() -> Formatter:
    """Shared formatter with the built-in fields, created on first use."""
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = Formatter()
    return _default_formatter


__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "Formatter",
    "get_default_formatter",
    "configure_logging",
    # Engines
    "apply_pattern",
    "mask",
    "mask_segmented",
    "numeric_only",
    "letters_only",
    "MASK_CHAR",
    # Value objects
    "FormatOptions",
    "SecretSpan",
    "SpecialSecretSpan",
    "OriginalValueStore",
    # Fields
    "FieldDefinition",
    "FieldRegistry",
    "SecretMode",
    "default_registry",
    "load_fields",
    "register_fields",
    # Configuration
    "FormatterConfig",
    "get_config",
    "reset_config",
    # Errors
    "CloakFormatError",
    "ValidationError",
    "FieldError",
    "FieldNotFoundError",
    "FieldRegistrationError",
    "FieldConfigError",
]
