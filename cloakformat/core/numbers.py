"""Locale-aware currency and percent rendering backed by Babel."""

import re
from decimal import Decimal
from typing import Union

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from .exceptions import ValidationError

Number = Union[int, float, Decimal]

# Babel separates symbols with (narrow) no-break spaces
_NO_BREAK_SPACES = re.compile("[\u00a0\u202f]")


def normalize_locale(locale: str) -> str:
    """Convert ``pt-BR`` style tags into Babel's ``pt_BR`` identifiers."""
    return locale.strip().replace("-", "_")


def parse_locale(locale: str) -> Locale:
    """Parse a locale tag, raising ``ValidationError`` when Babel does not know it."""
    try:
        return Locale.parse(normalize_locale(locale))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ValidationError(
            f"Unknown locale {locale!r}: {e}",
            field_name="locale",
            actual_value=locale,
        ) from e


def format_currency(amount: Number, currency: str, locale: str) -> str:
    """Render ``amount`` as ``currency`` in ``locale``, e.g. ``R$ 1.234,56``."""
    rendered = babel_numbers.format_currency(amount, currency, locale=parse_locale(locale))
    return _NO_BREAK_SPACES.sub(" ", rendered)


def _percent_pattern(locale: Locale, fraction_digits: int) -> str:
    positive = locale.percent_formats[None].pattern.split(";")[0]
    if fraction_digits <= 0:
        return positive
    # Widen the last integer digit placeholder into a fixed fraction
    return re.sub(r"0(?!.*0)", "0." + "0" * fraction_digits, positive, count=1)


def format_percent(ratio: Number, locale: str, fraction_digits: int = 2) -> str:
    """Render ``ratio`` as a percentage with a fixed number of fraction digits.

    ``0.0123`` becomes ``1,23%`` in ``pt-BR`` and ``1.23%`` in ``en-US``.
    """
    parsed = parse_locale(locale)
    pattern = _percent_pattern(parsed, fraction_digits)
    rendered = babel_numbers.format_percent(ratio, format=pattern, locale=parsed)
    return _NO_BREAK_SPACES.sub(" ", rendered)


def scaled_decimal(digits: str, scale: int) -> Decimal:
    """Interpret a digit string as an integer divided by ``scale``."""
    if not digits:
        return Decimal(0)
    return Decimal(digits) / Decimal(scale)
