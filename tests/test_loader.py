"""Tests for loading field definitions from YAML."""

from pathlib import Path

import pytest

from cloakformat import Formatter, FormatterConfig
from cloakformat.core.exceptions import FieldConfigError, FieldRegistrationError
from cloakformat.core.types import SecretSpan, SpecialSecretSpan
from cloakformat.fields.builtin import default_registry
from cloakformat.fields.loader import load_fields, load_fields_from_string, register_fields
from cloakformat.fields.registry import FieldRegistry, SecretMode


class TestLoadFields:
    """Test YAML parsing and validation."""

    def test_load_from_string(self, fields_yaml: str) -> None:
        definitions = {d.name: d for d in load_fields_from_string(fields_yaml)}
        assert set(definitions) == {"plate", "login"}

        plate = definitions["plate"]
        assert plate.description == "Vehicle plate"
        assert plate.mode == SecretMode.FOR
        assert plate.span == SecretSpan(start=3, end=0)

        login = definitions["login"]
        assert login.plain is None
        assert login.mode == SecretMode.SEGMENTED
        assert login.span == SpecialSecretSpan(start=(2, 1), end=0, special_characters=("@", "."))

    def test_load_from_file(self, fields_file: Path) -> None:
        assert len(load_fields(fields_file)) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_fields(tmp_path / "missing.yaml")

    def test_empty_document(self) -> None:
        assert load_fields_from_string("") == []

    def test_loaded_plain_formatter(self, fields_yaml: str, config: FormatterConfig) -> None:
        registry = FieldRegistry()
        for definition in load_fields_from_string(fields_yaml):
            registry.register(definition)
        formatter = Formatter(registry=registry, config=config)
        assert formatter.format("plate", "abc1234") == "ABC-1234"
        assert formatter.secret("plate", "abc1234") == "ABC-****"

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FieldConfigError, match="Invalid YAML"):
            load_fields_from_string("fields: [unclosed")

    def test_field_without_pattern_or_secret(self) -> None:
        with pytest.raises(FieldConfigError, match="Field validation failed"):
            load_fields_from_string("fields:\n  empty:\n    description: nothing\n")

    def test_pattern_mode_without_pattern(self) -> None:
        text = "fields:\n  code:\n    secret: {start: 1, end: 0, mode: for}\n"
        with pytest.raises(FieldConfigError, match="requires a pattern"):
            load_fields_from_string(text)

    def test_count_lists_only_for_segmented(self) -> None:
        text = 'fields:\n  code:\n    pattern: "##"\n    secret: {start: [1, 2], end: 0}\n'
        with pytest.raises(FieldConfigError, match="only allowed for segmented"):
            load_fields_from_string(text)

    @pytest.mark.parametrize(
        "option",
        ["is_visible: false", "escape_start: 1", "escape_end: 2"],
    )
    def test_segmented_rejects_window_options(self, option: str) -> None:
        text = (
            "fields:\n  login:\n    secret: {mode: segmented, start: [2, 1], end: 0, "
            f'special_characters: ["@", "."], {option}}}\n'
        )
        with pytest.raises(FieldConfigError, match="Segmented fields do not accept"):
            load_fields_from_string(text)

    def test_invalid_mode(self) -> None:
        text = 'fields:\n  code:\n    pattern: "##"\n    secret: {start: 1, end: 0, mode: sideways}\n'
        with pytest.raises(FieldConfigError):
            load_fields_from_string(text)

    def test_invalid_field_name(self) -> None:
        text = 'fields:\n  Bad-Name:\n    pattern: "##"\n'
        with pytest.raises(FieldConfigError, match="snake_case"):
            load_fields_from_string(text)

    def test_negative_count(self) -> None:
        text = 'fields:\n  code:\n    pattern: "##"\n    secret: {start: -1, end: 0}\n'
        with pytest.raises(FieldConfigError, match="Invalid field definition"):
            load_fields_from_string(text)

    def test_multi_character_separator(self) -> None:
        text = 'fields:\n  code:\n    pattern: "@@"\n    options: {pattern_separator: "@@"}\n'
        with pytest.raises(FieldConfigError):
            load_fields_from_string(text)

    def test_error_context_names_source(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("fields: [unclosed", encoding="utf-8")
        with pytest.raises(FieldConfigError) as exc_info:
            load_fields(path)
        assert exc_info.value.context["source"] == str(path)


class TestRegisterFields:
    """Test registering loaded fields."""

    def test_register_fields(self, fields_file: Path) -> None:
        registry = default_registry()
        definitions = register_fields(registry, fields_file)
        assert [d.name for d in definitions] == ["plate", "login"]
        assert "plate" in registry
        assert "cpf" in registry

    def test_conflicting_names(self, tmp_path: Path) -> None:
        path = tmp_path / "fields.yaml"
        path.write_text('fields:\n  cpf:\n    pattern: "###########"\n', encoding="utf-8")
        registry = default_registry()
        with pytest.raises(FieldRegistrationError):
            register_fields(registry, path)
        register_fields(registry, path, replace=True)
        assert registry.get("cpf").span is None

    def test_rejection_is_logged_with_error_details(self, caplog: pytest.LogCaptureFixture) -> None:
        with pytest.raises(FieldConfigError) as exc_info:
            load_fields_from_string("fields: [unclosed", source="inline.yaml")

        error = exc_info.value
        assert error.error_code == "FIELDCONFIG_ERROR"
        assert error.recovery_suggestions == ["Check the field definitions in inline.yaml"]
        assert "Field file rejected" in caplog.text
        assert "'source': 'inline.yaml'" in caplog.text
