"""
Session module exceptions.

Corrupt persisted data is repaired silently and never raised; the only
session error is using the store outside an open scope.
"""

from shared.exceptions import ConfigurationError


class SessionScopeError(ConfigurationError):
    """Raised when the session store is requested outside an open scope."""

    def __init__(self, message: str = "Session store accessed outside an open SessionScope"):
        super().__init__(message, code="SESSION_SCOPE_CLOSED")
