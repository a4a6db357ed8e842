"""
Session store implementation.

Holds the client's authentication state and mirrors it to client storage
under two keys: an opaque auth token and the JSON-serialized user.
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.storage import KeyValueStorage

from .interfaces import ISessionStore
from .models import SessionState, User

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionState], None]


class SessionStore(ISessionStore):
    """
    Single source of truth for whether the client is authenticated, and as whom.

    The store starts signed out. hydrate() restores a previous session from
    storage; sign_in() and sign_out() are the only other mutators. The auth
    token itself is written by the external credential flow and is only
    ever checked for presence here.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self._storage = storage
        self._token_key = settings.auth_token_key
        self._user_key = settings.user_key

        self._is_signed_in = False
        self._user: Optional[User] = None
        self._hydrated = False
        self._listeners: list[SessionListener] = []

    @property
    def is_signed_in(self) -> bool:
        return self._is_signed_in

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def state(self) -> SessionState:
        return SessionState(is_signed_in=self._is_signed_in, user=self._user)

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def hydrate(self) -> None:
        """
        Restore the session from client storage.

        Both entries present with a valid user record signs the session in.
        Any other non-empty combination is treated as corrupt: both entries
        are removed and the session stays signed out. With nothing stored,
        the current state is left as is.
        """
        if self._hydrated:
            logger.debug("Session already hydrated, re-reading client storage")
        self._hydrated = True
        self._sync_from_storage(reset_when_empty=False)

    def revalidate(self) -> None:
        """
        Re-check client storage against the in-memory session.

        Unlike hydrate(), an empty mirror also signs the in-memory session
        out, so a credential cleared by another window is picked up.
        """
        self._sync_from_storage(reset_when_empty=True)

    def sign_in(self, user: Optional[User] = None) -> None:
        self._is_signed_in = True
        if user is not None:
            self._user = user
            self._storage.set_item(self._user_key, user.to_storage())
            logger.info(f"Signed in as {user.email_id}")
        else:
            logger.info("Signed in without a user payload")
        self._notify()

    def sign_out(self) -> None:
        self._is_signed_in = False
        self._user = None
        self._clear_storage()
        logger.info("Signed out")
        self._notify()

    def subscribe(self, callback: SessionListener) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _sync_from_storage(self, reset_when_empty: bool) -> None:
        token = self._storage.get_item(self._token_key)
        stored_user = self._storage.get_item(self._user_key)

        if token is None and stored_user is None:
            if reset_when_empty:
                self._is_signed_in = False
                self._user = None
                self._notify()
            return

        user = self._parse_user(stored_user) if token is not None else None

        if user is None:
            logger.warning(
                "Discarding corrupt session data "
                f"(token present: {token is not None}, user present: {stored_user is not None})"
            )
            self._clear_storage()
            self._is_signed_in = False
            self._user = None
        else:
            self._is_signed_in = True
            self._user = user
            logger.debug(f"Restored session for {user.email_id}")

        self._notify()

    def _parse_user(self, raw: Optional[str]) -> Optional[User]:
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except PydanticValidationError:
            return None

    def _clear_storage(self) -> None:
        self._storage.remove_item(self._token_key)
        self._storage.remove_item(self._user_key)

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            listener(state)
