"""Formatter configuration from environment variables.

This module provides centralized configuration for CloakFormat defaults:
the locale handed to the number renderer, the currency used by the
currency field and an optional YAML file with extra field definitions.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import ValidationError
from .numbers import parse_locale

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "pt-BR"
DEFAULT_CURRENCY = "BRL"


@dataclass
class FormatterConfig:
    """Formatter defaults loaded from the environment.

    Attributes:
        locale: Locale tag used for currency and percent rendering
        currency: ISO 4217 code used by the currency field
        fields_file: Optional YAML file with extra field definitions
    """

    locale: str = DEFAULT_LOCALE
    currency: str = DEFAULT_CURRENCY
    fields_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_locale()
        self._validate_currency()

        logger.debug(
            f"FormatterConfig initialized: locale={self.locale}, currency={self.currency}"
        )

    def _validate_locale(self) -> None:
        """Fall back to the default locale when the tag is blank or unknown."""
        if not isinstance(self.locale, str) or not self.locale.strip():
            logger.warning(f"Invalid locale {self.locale!r}, using '{DEFAULT_LOCALE}'")
            self.locale = DEFAULT_LOCALE
            return
        try:
            parse_locale(self.locale)
        except ValidationError as e:
            logger.warning(f"{e.message}, using '{DEFAULT_LOCALE}'")
            self.locale = DEFAULT_LOCALE

    def _validate_currency(self) -> None:
        """Validate and normalize the currency code."""
        currency = self.currency.strip().upper() if isinstance(self.currency, str) else ""
        if len(currency) != 3 or not currency.isalpha():
            logger.warning(
                f"currency must be a 3-letter ISO code, got {self.currency!r}, "
                f"using '{DEFAULT_CURRENCY}'"
            )
            currency = DEFAULT_CURRENCY
        self.currency = currency

    @classmethod
    def from_environment(cls) -> "FormatterConfig":
        """Load configuration from environment variables.

        Environment Variables:
            CLOAKFORMAT_LOCALE: Locale tag (default pt-BR)
            CLOAKFORMAT_CURRENCY: Currency code (default BRL)
            CLOAKFORMAT_FIELDS_FILE: Path to a YAML field definition file

        Returns:
            FormatterConfig instance with values from environment or defaults
        """
        config = cls(
            locale=cls._get_env_string("CLOAKFORMAT_LOCALE", DEFAULT_LOCALE),
            currency=cls._get_env_string("CLOAKFORMAT_CURRENCY", DEFAULT_CURRENCY),
            fields_file=cls._get_env_string("CLOAKFORMAT_FIELDS_FILE", "") or None,
        )
        logger.info(f"Loaded configuration from environment: {config}")
        return config

    @staticmethod
    def _get_env_string(key: str, default: str) -> str:
        """Get string value from environment with default fallback."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip()

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "locale": self.locale,
            "currency": self.currency,
            "fields_file": self.fields_file,
        }


_config: Optional[FormatterConfig] = None


def get_config() -> FormatterConfig:
    """Get the global formatter configuration, creating it if needed."""
    global _config
    if _config is None:
        _config = FormatterConfig.from_environment()
    return _config


def reset_config() -> None:
    """Reset the global configuration for testing purposes."""
    global _config
    _config = None
