"""Shared fixtures for CloakFormat tests."""

from pathlib import Path

import pytest

from cloakformat import Formatter, FormatterConfig, reset_config

FORMATTER_ENV_VARS = (
    "CLOAKFORMAT_LOCALE",
    "CLOAKFORMAT_CURRENCY",
    "CLOAKFORMAT_FIELDS_FILE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep formatter environment variables and the global config out of tests."""
    for name in FORMATTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> FormatterConfig:
    """Default pt-BR configuration."""
    return FormatterConfig()


@pytest.fixture
def formatter(config: FormatterConfig) -> Formatter:
    """Formatter with the built-in fields and pt-BR locale."""
    return Formatter(config=config)


@pytest.fixture
def fields_yaml() -> str:
    """YAML document with a pattern field and a segmented field."""
    return """
version: "1.0"
fields:
  plate:
    description: Vehicle plate
    pattern: "###-####"
    options:
      uppercase: true
    secret:
      start: 3
      end: 0
  login:
    secret:
      mode: segmented
      start: [2, 1]
      end: 0
      special_characters: ["@", "."]
"""


@pytest.fixture
def fields_file(tmp_path: Path, fields_yaml: str) -> Path:
    """Field definition file written to a temporary directory."""
    path = tmp_path / "fields.yaml"
    path.write_text(fields_yaml, encoding="utf-8")
    return path
