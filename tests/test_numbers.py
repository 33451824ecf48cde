"""Tests for locale-aware number rendering."""

from decimal import Decimal

import pytest

from cloakformat.core.exceptions import ValidationError
from cloakformat.core.numbers import (
    format_currency,
    format_percent,
    normalize_locale,
    parse_locale,
    scaled_decimal,
)


class TestLocaleParsing:
    """Test locale tag handling."""

    def test_normalize_locale(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"
        assert normalize_locale(" en_US ") == "en_US"

    def test_parse_locale(self) -> None:
        locale = parse_locale("pt-BR")
        assert locale.language == "pt"
        assert locale.territory == "BR"

    def test_unknown_locale(self) -> None:
        with pytest.raises(ValidationError, match="Unknown locale") as exc_info:
            parse_locale("xx-YY")
        assert exc_info.value.context["field_name"] == "locale"


class TestCurrency:
    """Test currency rendering."""

    def test_brazilian_real(self) -> None:
        assert format_currency(Decimal("1234.56"), "BRL", "pt-BR") == "R$ 1.234,56"

    def test_no_break_spaces_replaced(self) -> None:
        assert "\u00a0" not in format_currency(Decimal("1"), "BRL", "pt-BR")

    def test_us_dollar(self) -> None:
        assert format_currency(Decimal("1234.56"), "USD", "en-US") == "$1,234.56"


class TestPercent:
    """Test percent rendering."""

    def test_brazilian_percent(self) -> None:
        assert format_percent(Decimal("0.0123"), "pt-BR") == "1,23%"

    def test_us_percent(self) -> None:
        assert format_percent(Decimal("0.0123"), "en-US") == "1.23%"

    def test_fraction_digits(self) -> None:
        assert format_percent(Decimal("0.5"), "en-US", fraction_digits=0) == "50%"
        assert format_percent(Decimal("0.5"), "en-US", fraction_digits=1) == "50.0%"


class TestScaledDecimal:
    """Test digit string scaling."""

    def test_scaled(self) -> None:
        assert scaled_decimal("123456", 100) == Decimal("1234.56")
        assert scaled_decimal("123", 10000) == Decimal("0.0123")

    def test_empty_digits(self) -> None:
        assert scaled_decimal("", 100) == Decimal(0)
