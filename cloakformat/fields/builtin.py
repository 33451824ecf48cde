"""Built-in Brazilian document, contact and amount fields."""

from typing import TYPE_CHECKING

from ..core.classifier import numeric_only
from ..core.numbers import format_currency, format_percent, scaled_decimal
from ..core.template import apply_pattern, count_slots
from ..core.types import FormatOptions, SecretSpan, SpecialSecretSpan
from .registry import FieldDefinition, FieldRegistry, SecretMode

if TYPE_CHECKING:
    from ..formatter import Formatter

NUMBERS = FormatOptions(only_numbers=True)

CPF_PATTERN = "###.###.###-##"
CNPJ_PATTERN = "##.###.###/####-##"
MOBILE_PATTERN = "(##) # ####-####"
LANDLINE_PATTERN = "(##) ####-####"
CEP_PATTERN = "#####-###"
CARD_NUMBER_PATTERN = "#### #### #### ####"
OAB_PATTERN = "###.###"

MOBILE_DIGITS = count_slots(MOBILE_PATTERN)


def pattern_formatter(pattern: str, options: FormatOptions = NUMBERS):
    """Plain formatter that fills ``pattern`` with the value."""

    def _format(formatter: "Formatter", value: str, secret_mode: bool) -> str:
        return apply_pattern(value, pattern, options, secret_mode)

    return _format


def format_phone(formatter: "Formatter", value: str, secret_mode: bool) -> str:
    digits = numeric_only(value, secret_mode)
    pattern = MOBILE_PATTERN if len(digits) == MOBILE_DIGITS else LANDLINE_PATTERN
    return apply_pattern(digits, pattern, NUMBERS, secret_mode)


def format_real_currency(formatter: "Formatter", value: str, secret_mode: bool) -> str:
    amount = scaled_decimal(numeric_only(value), 100)
    return format_currency(amount, formatter.currency, formatter.locale)


def format_percentage(formatter: "Formatter", value: str, secret_mode: bool) -> str:
    ratio = scaled_decimal(numeric_only(value), 10000)
    return format_percent(ratio, formatter.locale, fraction_digits=2)


BUILTIN_FIELDS = (
    FieldDefinition(
        name="cpf",
        plain=pattern_formatter(CPF_PATTERN),
        span=SecretSpan(start=3, end=2, is_visible=False),
        description="Brazilian individual taxpayer number",
    ),
    FieldDefinition(
        name="cnpj",
        plain=pattern_formatter(CNPJ_PATTERN),
        span=SecretSpan(start=4, end=3),
        description="Brazilian company taxpayer number",
    ),
    FieldDefinition(
        name="phone",
        plain=format_phone,
        span=SecretSpan(start=0, end=4),
        description="Landline or mobile phone number",
    ),
    FieldDefinition(
        name="cep",
        plain=pattern_formatter(CEP_PATTERN),
        span=SecretSpan(start=0, end=3),
        description="Brazilian postal code",
    ),
    FieldDefinition(
        name="real_currency",
        plain=format_real_currency,
        span=SecretSpan(start=1, escape_start=2, end=3),
        mode=SecretMode.FROM,
        description="Amount in cents rendered as currency",
    ),
    FieldDefinition(
        name="percent",
        plain=format_percentage,
        span=SecretSpan(start=0, end=3, escape_end=1),
        mode=SecretMode.FROM,
        description="Basis points rendered as a percentage",
    ),
    FieldDefinition(
        name="card_number",
        plain=pattern_formatter(CARD_NUMBER_PATTERN),
        span=SecretSpan(start=0, end=4),
        description="Payment card number",
    ),
    FieldDefinition(
        name="email",
        span=SpecialSecretSpan(start=(2, 1), end=0, special_characters=("@", ".")),
        mode=SecretMode.SEGMENTED,
        description="Email address",
    ),
    FieldDefinition(
        name="oab",
        plain=pattern_formatter(OAB_PATTERN, FormatOptions(uppercase=True)),
        span=SecretSpan(start=2, end=1),
        description="Brazilian bar association registration",
    ),
)


def default_registry() -> FieldRegistry:
    """Fresh registry holding the built-in fields."""
    registry = FieldRegistry()
    for definition in BUILTIN_FIELDS:
        registry.register(definition)
    return registry
