"""Rule-builder error classes.

These classes provide package-specific error handling for rule accumulation,
snapshot building and facade dispatch.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

from ryandata_validation_rules.core.errors import RyanDataValidationError

# Package identifier for error context
PACKAGE_NAME = "ryandata_validation_rules"


class RuleBuilderError(PydanticCustomError):
    """Custom exception for ryandata_validation_rules that wraps Pydantic errors.

    Inherits from PydanticCustomError so it can be raised from inside Pydantic
    validators and still surface as a regular ``ValueError`` elsewhere.
    """

    @classmethod
    def create(cls, error_type: str, message: str, **context: Any) -> RuleBuilderError:
        """Build an error whose context always carries the package name.

        Args:
            error_type: Type/category of the error.
            message: Message template; ``{placeholders}`` are filled from context.
            **context: Additional context values.

        Returns:
            RuleBuilderError instance.
        """
        return cls(error_type, message, {"package": PACKAGE_NAME, **context})


class RulesValidationError(RyanDataValidationError):
    """Wraps a pydantic.ValidationError raised while building a rules snapshot."""

    def __init__(self, validation_error: Exception, context: dict | None = None):
        super().__init__(PACKAGE_NAME, validation_error, context)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RulesValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)


class UnknownRuleMethodError(AttributeError):
    """Raised when the facade is asked for something that is not a rule method."""

    def __init__(self, name: str, class_name: str = "ValidationRules") -> None:
        self.method_name = name
        super().__init__(f"method {class_name}.{name}() does not exist.")
