"""Character classification applied to values before a pattern is filled."""

import re
from typing import Optional

from .types import FormatOptions

_NON_DIGIT = re.compile(r"[^0-9]")
_NON_DIGIT_SECRET = re.compile(r"[^0-9*]")
_NON_LETTER = re.compile(r"[^a-zA-Z]")
_NON_LETTER_SECRET = re.compile(r"[^a-zA-Z*]")


def numeric_only(value: str, secret_mode: bool = False) -> str:
    """Strip everything that is not an ASCII digit.

    In secret mode the mask character survives as well, so an already
    masked value can be run through a field pattern again.
    """
    pattern = _NON_DIGIT_SECRET if secret_mode else _NON_DIGIT
    return pattern.sub("", value)


def letters_only(value: str, secret_mode: bool = False) -> str:
    """Strip everything that is not an ASCII letter (keeps ``*`` in secret mode)."""
    pattern = _NON_LETTER_SECRET if secret_mode else _NON_LETTER
    return pattern.sub("", value)


def to_upper(value: str) -> str:
    return value.upper()


def to_lower(value: str) -> str:
    return value.lower()


def classify(value: str, options: Optional[FormatOptions] = None, secret_mode: bool = False) -> str:
    """Apply the classifiers and case folding selected by ``options``."""
    options = options or FormatOptions()

    if options.numbers_only:
        value = numeric_only(value, secret_mode)
    if options.letters_only:
        value = letters_only(value, secret_mode)
    if options.to_upper:
        value = to_upper(value)
    if options.to_lower:
        value = to_lower(value)
    return value
