"""Custom exception classes for the application.

The calculation core never raises; these exceptions belong to the layers
around it (form validation, configuration) and are turned into user-facing
messages by `core.error_handlers`.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        code: Short machine-readable error category.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        code: str = "app_error",
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            code: Error category (default: "app_error").
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Exception raised when form input is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Message shown to the user, e.g. "Please select a goal".
            field: Optional form field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, code="validation_error", details=details)

    @property
    def field(self) -> Optional[str]:
        """Name of the form field that failed, if known."""
        return self.details.get("field")


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.

        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="configuration_error", details=details)
