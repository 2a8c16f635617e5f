"""Generic error classes with package identification.

These classes provide a foundation for package-specific error handling
that can be extended by domain-specific packages.
"""

from __future__ import annotations


class RyanDataValidationError(Exception):
    """Exception wrapper for pydantic.ValidationError with package identification.

    Provides access to the original error while adding package context.
    """

    def __init__(
        self,
        package_name: str,
        validation_error: Exception,
        context: dict | None = None,
    ):
        from pydantic import ValidationError as PydanticValidationError

        self.package_name = package_name
        self.original_error = validation_error
        self.context = {"package": package_name, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.original_error!r}, context={self.context})"
