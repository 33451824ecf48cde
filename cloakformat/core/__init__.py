"""Core formatting and masking engines."""

from . import classifier, numbers, secret, template
from .classifier import classify, letters_only, numeric_only, to_lower, to_upper
from .config import FormatterConfig, get_config, reset_config
from .exceptions import (
    CloakFormatError,
    FieldConfigError,
    FieldError,
    FieldNotFoundError,
    FieldRegistrationError,
    ValidationError,
)
from .secret import mask, mask_segmented
from .store import OriginalValueStore
from .template import apply_pattern, count_slots
from .types import MASK_CHAR, FormatOptions, SecretSpan, SpecialSecretSpan

__all__ = [
    "classifier",
    "numbers",
    "secret",
    "template",
    "classify",
    "letters_only",
    "numeric_only",
    "to_lower",
    "to_upper",
    "FormatterConfig",
    "get_config",
    "reset_config",
    "CloakFormatError",
    "FieldConfigError",
    "FieldError",
    "FieldNotFoundError",
    "FieldRegistrationError",
    "ValidationError",
    "mask",
    "mask_segmented",
    "OriginalValueStore",
    "apply_pattern",
    "count_slots",
    "MASK_CHAR",
    "FormatOptions",
    "SecretSpan",
    "SpecialSecretSpan",
]
