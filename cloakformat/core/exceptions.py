"""CloakFormat exception hierarchy.

The formatting and masking engines never raise on input strings. Exceptions
are reserved for configuration mistakes: invalid option or span values,
unknown locales, unknown fields and malformed field definition files.
"""

from typing import Any, Dict, List, Optional


class CloakFormatError(Exception):
    """Base exception for all CloakFormat-related errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error context and metadata
        recovery_suggestions: List of suggested recovery actions
        component: Component where the error originated
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
        component: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        self.component = component or self._infer_component()

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def _infer_component(self) -> str:
        """Infer component name from exception class."""
        name = self.__class__.__name__.lower()
        if "validation" in name:
            return "validation"
        elif "field" in name:
            return "fields"
        else:
            return "core"

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def add_recovery_suggestion(self, suggestion: str) -> None:
        """Add a recovery suggestion to help users resolve the error."""
        if suggestion not in self.recovery_suggestions:
            self.recovery_suggestions.append(suggestion)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
        }


class ValidationError(CloakFormatError, ValueError):
    """Raised when an option, span or locale value is invalid."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        expected_type: Optional[str] = None,
        actual_value: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context("field_name", field_name)
        if expected_type:
            self.add_context("expected_type", expected_type)
        if actual_value is not None:
            self.add_context("actual_value", str(actual_value))


class FieldError(CloakFormatError):
    """Base class for field registry errors."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        if field:
            self.add_context("field", field)


class FieldNotFoundError(FieldError, KeyError):
    """Raised when a field name is not present in the registry."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class FieldRegistrationError(FieldError):
    """Raised when a field cannot be registered."""


class FieldConfigError(FieldError):
    """Raised when a field definition file cannot be parsed or validated."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if source:
            self.add_context("source", source)


def create_validation_error(
    message: str,
    field_name: str,
    expected: Any,
    actual: Any,
) -> ValidationError:
    """Create a validation error with standard context."""
    expected_str = expected.__name__ if isinstance(expected, type) else str(expected)

    error = ValidationError(
        message=message,
        field_name=field_name,
        expected_type=expected_str,
        actual_value=actual,
    )

    error.add_recovery_suggestion(f"Ensure {field_name} is of type {expected_str}")
    return error
