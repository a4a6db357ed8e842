"""
Session scope.

Owns the lifecycle of the SessionStore: constructed and hydrated when the
scope opens, dropped when it closes. Consumers receive the store from an
open scope; asking for it anywhere else is a programming error and fails
immediately instead of creating a store on the fly.
"""

import logging
from typing import Optional

from shared.config import Settings, get_settings
from shared.storage import KeyValueStorage, get_storage

from .exceptions import SessionScopeError
from .service import SessionStore

logger = logging.getLogger(__name__)


class SessionScope:
    """
    Container for the session store instance.

    Usage:
        with SessionScope(storage) as store:
            store.sign_in(user)

    When no storage is given, the file-backed storage from settings is used.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._storage = storage
        self._settings = settings
        self._store: Optional[SessionStore] = None

    @property
    def is_open(self) -> bool:
        return self._store is not None

    @property
    def store(self) -> SessionStore:
        """Get the session store. Raises SessionScopeError if the scope is closed."""
        if self._store is None:
            raise SessionScopeError()
        return self._store

    def open(self) -> SessionStore:
        """Construct and hydrate the store. Opening an open scope returns the same store."""
        if self._store is not None:
            return self._store

        settings = self._settings or get_settings()
        storage = self._storage if self._storage is not None else get_storage()
        store = SessionStore(storage, settings)
        store.hydrate()
        self._store = store
        logger.debug("Session scope opened")
        return store

    def close(self) -> None:
        self._store = None
        logger.debug("Session scope closed")

    def __enter__(self) -> SessionStore:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# Module-level current scope
_current_scope: Optional[SessionScope] = None


def open_session_scope(
    storage: Optional[KeyValueStorage] = None,
    settings: Optional[Settings] = None,
) -> SessionStore:
    """
    Open the application-wide session scope.

    Called once at startup. Calling it again while a scope is open returns
    the existing store.
    """
    global _current_scope
    if _current_scope is None:
        _current_scope = SessionScope(storage, settings)
    return _current_scope.open()


def get_session_store() -> SessionStore:
    """
    Get the session store of the application-wide scope.

    Raises:
        SessionScopeError: If open_session_scope() has not been called
    """
    if _current_scope is None:
        raise SessionScopeError("No session scope is open. Call open_session_scope() at startup.")
    return _current_scope.store


def close_session_scope() -> None:
    """Close the application-wide scope (process exit, or between tests)."""
    global _current_scope
    if _current_scope is not None:
        _current_scope.close()
    _current_scope = None
