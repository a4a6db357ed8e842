"""
Base exception classes for the storefront core.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for display or logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StorefrontError):
    """Input violated a documented precondition."""

    pass


class ConfigurationError(StorefrontError):
    """A component was used without the setup it requires."""

    pass


class StorageError(StorefrontError):
    """Error reading from or writing to persistent client storage."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.path = path
        if path is not None:
            self.details["path"] = path
