"""Registry tying each secret field to its plain formatter and mask span."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Iterator, Optional, Union

from ..core.exceptions import FieldNotFoundError, FieldRegistrationError
from ..core.types import SecretSpan, SpecialSecretSpan

if TYPE_CHECKING:
    from ..formatter import Formatter

logger = logging.getLogger(__name__)

SECRET_MARKER = "secret"

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

PlainFormatter = Callable[["Formatter", str, bool], str]


class SecretMode(Enum):
    """Order in which a secret field combines masking and plain formatting."""

    # mask the raw value, then reapply the plain pattern in secret mode
    FOR = "for"
    # run the plain formatter, then mask its output
    FROM = "from"
    # split on delimiters and mask each segment
    SEGMENTED = "segmented"


@dataclass(frozen=True)
class FieldDefinition:
    """
    A named field with its plain formatter and secret configuration.

    Attributes:
        name: Canonical field name, also the original-value store key
        plain: Callable ``(formatter, value, secret_mode) -> str`` or None for
            fields that only have a secret form
        span: Mask configuration used by the secret form
        mode: How masking and plain formatting are chained
        description: Human-readable description
    """

    name: str
    plain: Optional[PlainFormatter] = None
    span: Optional[Union[SecretSpan, SpecialSecretSpan]] = None
    mode: SecretMode = SecretMode.FOR
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise FieldRegistrationError("Field name must be a non-empty string")
        if self.mode == SecretMode.SEGMENTED:
            if self.span is not None and not isinstance(self.span, SpecialSecretSpan):
                raise FieldRegistrationError(
                    f"Segmented field {self.name} requires a SpecialSecretSpan", field=self.name
                )
        elif self.span is not None and not isinstance(self.span, SecretSpan):
            raise FieldRegistrationError(
                f"Field {self.name} requires a SecretSpan", field=self.name
            )

    @property
    def has_secret(self) -> bool:
        return self.span is not None

    @property
    def secret_name(self) -> str:
        """Snake-case name of the secret variant, e.g. ``secret_cpf``."""
        return f"{SECRET_MARKER}_{self.name}"


def plain_field_name(secret_name: str) -> str:
    """
    Derive the plain field name from a secret field name.

    The ``secret`` marker is removed and the remainder is converted to
    snake_case, so ``secretCardNumber`` and ``secret_card_number`` both map
    to ``card_number``. Names without the marker are returned unchanged.
    """
    if SECRET_MARKER not in secret_name:
        return secret_name
    remainder = secret_name.replace(SECRET_MARKER, "", 1).lstrip("_")
    if not remainder:
        return secret_name
    return _CAMEL_BOUNDARY.sub(r"\1_\2", remainder).lower()


class FieldRegistry:
    """
    Registry of field definitions resolved by explicit name.

    Secret names (``secret_card_number``, ``secretCardNumber``) resolve to
    their plain field through :func:`plain_field_name`.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, FieldDefinition] = {}

    def register(self, definition: FieldDefinition, replace: bool = False) -> None:
        """
        Register a field definition.

        Raises:
            FieldRegistrationError: If the name is taken and ``replace`` is False
        """
        if definition.name in self._fields and not replace:
            raise FieldRegistrationError(
                f"Field {definition.name} is already registered", field=definition.name
            )
        self._fields[definition.name] = definition
        logger.debug(f"Field {definition.name} registered (mode={definition.mode.value})")

    def unregister(self, name: str) -> Optional[FieldDefinition]:
        """Remove a field, returning its definition if it was registered."""
        return self._fields.pop(self._resolve(name), None)

    def _resolve(self, name: str) -> str:
        if name in self._fields:
            return name
        return plain_field_name(name)

    def get(self, name: str) -> Optional[FieldDefinition]:
        """Definition for a plain or secret field name, or None."""
        return self._fields.get(self._resolve(name))

    def require(self, name: str) -> FieldDefinition:
        """
        Definition for a plain or secret field name.

        Raises:
            FieldNotFoundError: If the field is unknown
        """
        definition = self.get(name)
        if definition is None:
            raise FieldNotFoundError(
                f"Field {name} is not registered", field=name
            )
        return definition

    def names(self) -> list[str]:
        return sorted(self._fields)

    def copy(self) -> "FieldRegistry":
        """Independent registry holding the same definitions."""
        clone = FieldRegistry()
        clone._fields = dict(self._fields)
        return clone

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)
