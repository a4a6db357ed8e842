"""
Session module.

Tracks whether the client is signed in, and as whom, with a durable
mirror in client storage.

Public API:
- ISessionStore: Interface for session operations
- SessionStore: Implementation backed by a KeyValueStorage
- SessionScope: Owns the store's lifecycle
- User, SessionState: Data models
- SessionScopeError: Raised when the store is used outside a scope
"""

from .interfaces import ISessionStore
from .models import User, SessionState
from .service import SessionStore
from .scope import (
    SessionScope,
    open_session_scope,
    get_session_store,
    close_session_scope,
)
from .exceptions import SessionScopeError

__all__ = [
    # Interface
    "ISessionStore",
    # Models
    "User",
    "SessionState",
    # Implementation
    "SessionStore",
    "SessionScope",
    "open_session_scope",
    "get_session_store",
    "close_session_scope",
    # Exceptions
    "SessionScopeError",
]
