"""Formatter - high-level API for pattern formatting and secret masking."""

import logging
from typing import Optional, Union

from cloakformat.core import secret as secret_engine
from cloakformat.core import template
from cloakformat.core.config import FormatterConfig, get_config
from cloakformat.core.exceptions import FieldError
from cloakformat.core.numbers import parse_locale
from cloakformat.core.store import OriginalValueStore
from cloakformat.core.types import FormatOptions, SecretSpan, SpecialSecretSpan
from cloakformat.fields.builtin import default_registry
from cloakformat.fields.loader import register_fields
from cloakformat.fields.registry import (
    FieldDefinition,
    FieldRegistry,
    SecretMode,
    plain_field_name,
)

logger = logging.getLogger(__name__)


class Formatter:
    """Formats values with positional patterns and produces masked variants.

    Every plain call remembers the raw input under the field name, so the
    pre-formatted value can be read back with :meth:`get_original_value`.

    Examples:
        # Built-in fields
        formatter = Formatter()
        formatter.cpf("12345678909")          # '123.456.789-09'
        formatter.secret_cpf("12345678909")   # '***.456.789-**'
        formatter.get_original_value("cpf")   # '12345678909'

        # Ad-hoc patterns
        formatter.apply_pattern("abc", "#-#-#", key="code")   # 'a-b-c'

        # One formatter per locale
        us = Formatter(locale="en-US")
        us.percent("123")                     # '1.23%'
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        registry: Optional[FieldRegistry] = None,
        config: Optional[FormatterConfig] = None,
    ):
        """Initialize a formatter.

        Args:
            locale: Locale for currency and percent fields (config default if None)
            registry: Field registry (built-in fields plus the configured
                field file if None)
            config: Formatter configuration (environment if None)
        """
        self._config = config or get_config()
        self._locale = self._config.locale
        if locale is not None:
            self.set_locale(locale)

        if registry is None:
            registry = default_registry()
            if self._config.fields_file:
                register_fields(registry, self._config.fields_file, replace=True)
        self._registry = registry
        self._store = OriginalValueStore()

    # -- state -------------------------------------------------------------

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def currency(self) -> str:
        return self._config.currency

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    @property
    def original_values(self) -> OriginalValueStore:
        return self._store

    def set_locale(self, locale: str) -> "Formatter":
        """Set the locale used by currency and percent fields.

        Returns:
            Self for method chaining

        Raises:
            ValidationError: If the locale is unknown
        """
        parse_locale(locale)
        self._locale = locale
        return self

    def get_original_value(self, key: str) -> str:
        """Raw value last supplied for ``key``, or an empty string."""
        return self._store.get(key)

    # -- primitives --------------------------------------------------------

    def apply_pattern(
        self,
        value: str,
        pattern: str,
        options: Optional[FormatOptions] = None,
        key: Optional[str] = None,
        secret_mode: bool = False,
    ) -> str:
        """Fill ``pattern`` with ``value``, recording the raw value under ``key``."""
        if key and not secret_mode:
            self._store.record(key, value)
        return template.apply_pattern(value, pattern, options, secret_mode)

    def mask(self, value: str, span: SecretSpan, key: Optional[str] = None) -> str:
        """Mask ``value`` with ``span``, recording the raw value under ``key``."""
        if key:
            self._store.record(key, value)
        return secret_engine.mask(value, span)

    def mask_segmented(
        self, value: str, span: SpecialSecretSpan, key: Optional[str] = None
    ) -> str:
        """Mask each delimiter-separated segment, recording the raw value under ``key``."""
        if key:
            self._store.record(key, value)
        return secret_engine.mask_segmented(value, span)

    # -- dispatch ----------------------------------------------------------

    def _field_name(self, field: str) -> tuple[Optional[FieldDefinition], str]:
        definition = self._registry.get(field)
        name = definition.name if definition else plain_field_name(field)
        return definition, name

    def secret_for(self, value: str, span: SecretSpan, field: str) -> str:
        """Mask the raw value, then reapply the field's plain formatter.

        The plain formatter runs in secret mode, so classifiers keep the
        ``*`` characters and separators end up around them. Without a plain
        formatter the masked value is returned as-is.
        """
        definition, name = self._field_name(field)
        masked = self.mask(value, span, key=name)

        if definition is None or definition.plain is None:
            logger.debug(f"No plain formatter for {field}, returning masked value")
            return masked
        return definition.plain(self, masked, True)

    def secret_from(self, value: str, span: SecretSpan, field: str) -> str:
        """Run the field's plain formatter, then mask its output.

        Used when the display format (currency symbol, decimal point) must
        exist before characters are hidden. Without a plain formatter the
        value is returned unchanged.
        """
        definition, name = self._field_name(field)
        if definition is None or definition.plain is None:
            logger.warning(f"No plain formatter for {field}, returning value unchanged")
            return value

        formatted = definition.plain(self, value, False)
        masked = secret_engine.mask(formatted, span)
        self._store.record(name, value)
        return masked

    def format(self, field: str, value: str, secret_mode: bool = False) -> str:
        """Format ``value`` with a registered field's plain formatter.

        Raises:
            FieldNotFoundError: If the field is not registered
            FieldError: If the field only has a secret form
        """
        definition = self._registry.require(field)
        if definition.plain is None:
            raise FieldError(f"Field {definition.name} has no plain form", field=definition.name)

        if not secret_mode:
            self._store.record(definition.name, value)
        return definition.plain(self, value, secret_mode)

    def secret(self, field: str, value: str) -> str:
        """Produce the masked form of a registered field.

        Raises:
            FieldNotFoundError: If the field is not registered
            FieldError: If the field has no secret form
        """
        definition = self._registry.require(field)
        span = definition.span
        if span is None:
            raise FieldError(f"Field {definition.name} has no secret form", field=definition.name)

        logger.debug(f"Masking {definition.name} (mode={definition.mode.value})")
        if definition.mode == SecretMode.SEGMENTED:
            return self.mask_segmented(value, span, key=definition.name)  # type: ignore[arg-type]
        if definition.mode == SecretMode.FROM:
            return self.secret_from(value, span, definition.name)  # type: ignore[arg-type]
        return self.secret_for(value, span, definition.name)  # type: ignore[arg-type]

    # -- built-in fields ---------------------------------------------------

    def cpf(self, value: str) -> str:
        return self.format("cpf", value)

    def secret_cpf(self, value: str) -> str:
        return self.secret("cpf", value)

    def cnpj(self, value: str) -> str:
        return self.format("cnpj", value)

    def secret_cnpj(self, value: str) -> str:
        return self.secret("cnpj", value)

    def phone(self, value: str) -> str:
        """Mobile numbers (11 digits) get the extra leading digit group."""
        return self.format("phone", value)

    def secret_phone(self, value: str) -> str:
        return self.secret("phone", value)

    def cep(self, value: str) -> str:
        return self.format("cep", value)

    def secret_cep(self, value: str) -> str:
        return self.secret("cep", value)

    def real_currency(self, value: Union[str, int]) -> str:
        """Render an amount given in cents, e.g. ``"123456"`` -> ``"R$ 1.234,56"``."""
        return self.format("real_currency", str(value))

    def secret_real_currency(self, value: Union[str, int]) -> str:
        return self.secret("real_currency", str(value))

    def percent(self, value: Union[str, int]) -> str:
        """Render basis points, e.g. ``"123"`` -> ``"1,23%"``."""
        return self.format("percent", str(value))

    def secret_percent(self, value: Union[str, int]) -> str:
        return self.secret("percent", str(value))

    def card_number(self, value: str) -> str:
        return self.format("card_number", value)

    def secret_card_number(self, value: str) -> str:
        return self.secret("card_number", value)

    def secret_email(self, value: str) -> str:
        return self.secret("email", value)

    def oab(self, value: str) -> str:
        return self.format("oab", value)

    def secret_oab(self, value: str) -> str:
        return self.secret("oab", value)
