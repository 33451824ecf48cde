"""Tests for the template engine."""

from cloakformat.core.template import apply_pattern, count_slots
from cloakformat.core.types import FormatOptions

NUMBERS = FormatOptions(only_numbers=True)


class TestApplyPattern:
    """Test filling patterns with values."""

    def test_empty_value_returns_empty_string(self) -> None:
        assert apply_pattern("", "#") == ""
        assert apply_pattern("", "###.###-##", NUMBERS) == ""

    def test_digits(self) -> None:
        assert apply_pattern("123", "#.#.#") == "1.2.3"

    def test_cpf(self) -> None:
        assert apply_pattern("12345678909", "###.###.###-##", NUMBERS) == "123.456.789-09"

    def test_cep(self) -> None:
        assert apply_pattern("12345678", "#####-###", NUMBERS) == "12345-678"

    def test_card_number(self) -> None:
        result = apply_pattern("1234567812345678", "#### #### #### ####", NUMBERS)
        assert result == "1234 5678 1234 5678"

    def test_mixed_value_without_classification(self) -> None:
        assert apply_pattern("a1b2c3", "#.#.#") == "a.1.b"

    def test_special_characters_pass_through(self) -> None:
        assert apply_pattern("@1$2%3", "#.#.#") == "@.1.$"

    def test_empty_pattern(self) -> None:
        assert apply_pattern("123", "") == ""

    def test_literal_characters(self) -> None:
        assert apply_pattern("123", "A.#.#") == "A.1.2"

    def test_only_numbers(self) -> None:
        assert apply_pattern("a1b2c3", "#.#.#", NUMBERS) == "1.2.3"

    def test_only_letters(self) -> None:
        assert apply_pattern("a1b2c3", "#.#.#", FormatOptions(only_letters=True)) == "a.b.c"

    def test_conflicting_flags_are_ignored(self) -> None:
        options = FormatOptions(only_numbers=True, only_letters=True)
        assert apply_pattern("a1b2c3", "#.#.#", options) == "a.1.b"

    def test_custom_separator(self) -> None:
        assert apply_pattern("123", "@ @ @", FormatOptions(pattern_separator="@")) == "1 2 3"

    def test_short_value_keeps_literals(self) -> None:
        assert apply_pattern("1234", "###.###-##", NUMBERS) == "123.4-"

    def test_overlong_value_is_truncated(self) -> None:
        assert apply_pattern("123456789", "###-###", NUMBERS) == "123-456"

    def test_uppercase(self) -> None:
        assert apply_pattern("abc123", "###-###", FormatOptions(uppercase=True)) == "ABC-123"

    def test_lowercase(self) -> None:
        assert apply_pattern("ABC", "#.#.#", FormatOptions(lowercase=True)) == "a.b.c"

    def test_secret_mode_keeps_stars(self) -> None:
        result = apply_pattern("***456789**", "###.###.###-##", NUMBERS, secret_mode=True)
        assert result == "***.456.789-**"

    def test_stars_dropped_outside_secret_mode(self) -> None:
        assert apply_pattern("***456", "###-###", NUMBERS) == "456-"


class TestCountSlots:
    """Test separator slot counting."""

    def test_counts_default_separator(self) -> None:
        assert count_slots("###.###.###-##") == 11

    def test_counts_custom_separator(self) -> None:
        assert count_slots("@@-@@", "@") == 4
        assert count_slots("@@-@@") == 0
