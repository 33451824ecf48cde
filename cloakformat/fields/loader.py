"""Loading pattern-based field definitions from YAML files.

A field file looks like::

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
          mode: for

Segmented fields may omit ``pattern`` and give per-segment counts::

      login:
        secret:
          mode: segmented
          start: [2, 1]
          end: 0
          special_characters: ["@", "."]
"""

import logging
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..core.exceptions import CloakFormatError, FieldConfigError
from ..core.types import FormatOptions, SecretSpan, SpecialSecretSpan
from .builtin import pattern_formatter
from .registry import FieldDefinition, FieldRegistry, SecretMode

logger = logging.getLogger(__name__)

_FIELD_NAME = re.compile(r"^[a-z][a-z0-9_]*$")
_WINDOW_OPTIONS = {"is_visible", "escape_start", "escape_end"}


class OptionsConfig(BaseModel):
    """Pydantic model for pattern options."""

    only_numbers: bool = False
    only_letters: bool = False
    uppercase: bool = False
    lowercase: bool = False
    pattern_separator: str = Field("#", min_length=1, max_length=1)


class SecretConfig(BaseModel):
    """Pydantic model for the secret form of a field."""

    mode: SecretMode = Field(SecretMode.FOR, description="How masking is chained")
    start: Union[int, list[int]] = Field(..., description="Visible characters at the start")
    end: Union[int, list[int]] = Field(..., description="Visible characters at the end")
    is_visible: bool = Field(True, description="False hides the edges instead")
    escape_start: Optional[int] = Field(None, ge=0)
    escape_end: Optional[int] = Field(None, ge=0)
    special_characters: list[str] = Field(default_factory=list)

    @field_validator("special_characters")
    @classmethod
    def validate_special_characters(cls, v: Any) -> Any:
        """Special characters must be single characters."""
        for char in v:
            if len(char) != 1:
                raise ValueError(f"Special characters must be single characters, got '{char}'")
        return v

    @model_validator(mode="after")
    def validate_counts(self) -> "SecretConfig":
        """Count lists are for segmented fields, which take no window options."""
        if self.mode != SecretMode.SEGMENTED:
            if isinstance(self.start, list) or isinstance(self.end, list):
                raise ValueError("start/end lists are only allowed for segmented fields")
            return self

        unsupported = sorted(_WINDOW_OPTIONS & self.model_fields_set)
        if unsupported:
            raise ValueError(f"Segmented fields do not accept {', '.join(unsupported)}")
        return self

    def to_span(self) -> Union[SecretSpan, SpecialSecretSpan]:
        if self.mode == SecretMode.SEGMENTED:
            return SpecialSecretSpan(
                start=self.start if isinstance(self.start, int) else tuple(self.start),
                end=self.end if isinstance(self.end, int) else tuple(self.end),
                special_characters=tuple(self.special_characters),
            )
        return SecretSpan(
            start=self.start,  # type: ignore[arg-type]
            end=self.end,  # type: ignore[arg-type]
            is_visible=self.is_visible,
            escape_start=self.escape_start,
            escape_end=self.escape_end,
            special_characters=tuple(self.special_characters),
        )


class PatternFieldConfig(BaseModel):
    """Pydantic model for a single field entry."""

    description: str = ""
    pattern: Optional[str] = Field(None, description="Positional pattern")
    options: OptionsConfig = Field(default_factory=OptionsConfig)
    secret: Optional[SecretConfig] = None

    @model_validator(mode="after")
    def validate_has_form(self) -> "PatternFieldConfig":
        if self.pattern is None and self.secret is None:
            raise ValueError("A field needs a pattern, a secret section, or both")
        if self.pattern is None and self.secret.mode != SecretMode.SEGMENTED:  # type: ignore[union-attr]
            raise ValueError(f"Secret mode '{self.secret.mode.value}' requires a pattern")  # type: ignore[union-attr]
        return self


class FieldFileSchema(BaseModel):
    """Pydantic model for field file schema validation."""

    version: str = Field("1.0", description="Field file schema version")
    fields: dict[str, PatternFieldConfig] = Field(default_factory=dict)

    @field_validator("fields")
    @classmethod
    def validate_names(cls, v: Any) -> Any:
        """Field names are snake_case identifiers."""
        for name in v:
            if not _FIELD_NAME.match(name):
                raise ValueError(f"Field name must be snake_case, got '{name}'")
        return v


def _to_definition(name: str, config: PatternFieldConfig) -> FieldDefinition:
    plain = None
    if config.pattern is not None:
        options = FormatOptions(**config.options.model_dump())
        plain = pattern_formatter(config.pattern, options)

    secret = config.secret
    return FieldDefinition(
        name=name,
        plain=plain,
        span=secret.to_span() if secret else None,
        mode=secret.mode if secret else SecretMode.FOR,
        description=config.description,
    )


def _rejected(message: str, source: str) -> FieldConfigError:
    error = FieldConfigError(message, source=source)
    error.add_recovery_suggestion(f"Check the field definitions in {source}")
    logger.error(f"Field file rejected: {error.to_dict()}")
    return error


def load_fields_from_string(text: str, source: str = "<string>") -> list[FieldDefinition]:
    """
    Parse field definitions from YAML text.

    Raises:
        FieldConfigError: If the YAML is malformed or fails validation
    """
    try:
        data = yaml.safe_load(text) or {}
        schema = FieldFileSchema.model_validate(data)
        definitions = [_to_definition(name, config) for name, config in schema.fields.items()]
    except yaml.YAMLError as e:
        raise _rejected(f"Invalid YAML in {source}: {e}", source) from e
    except ValidationError as e:
        raise _rejected(f"Field validation failed for {source}: {e}", source) from e
    except CloakFormatError as e:
        raise _rejected(f"Invalid field definition in {source}: {e}", source) from e

    logger.info(f"Loaded {len(definitions)} field definitions from {source}")
    return definitions


def load_fields(path: Union[str, Path]) -> list[FieldDefinition]:
    """
    Load field definitions from a YAML file.

    Raises:
        FieldConfigError: If the file is malformed or fails validation
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    return load_fields_from_string(path.read_text(encoding="utf-8"), source=str(path))


def register_fields(
    registry: FieldRegistry, path: Union[str, Path], replace: bool = False
) -> list[FieldDefinition]:
    """Load a field file and register every definition it contains."""
    definitions = load_fields(path)
    for definition in definitions:
        registry.register(definition, replace=replace)
    return definitions
