"""
Session module interface.

Presentation code should depend on ISessionStore, not the concrete
implementation. This keeps consumers testable with simple fakes.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from .models import SessionState, User


@runtime_checkable
class ISessionStore(Protocol):
    """
    Interface for the client authentication session.

    This protocol defines the surface the session module exposes to the
    rest of the application.
    """

    @property
    def is_signed_in(self) -> bool:
        """Whether the client is currently signed in."""
        ...

    @property
    def user(self) -> Optional[User]:
        """The signed-in user, if one was supplied."""
        ...

    def sign_in(self, user: Optional[User] = None) -> None:
        """
        Mark the session signed in.

        Args:
            user: Identity to record and persist. When omitted, the current
                user (possibly None) is kept.
        """
        ...

    def sign_out(self) -> None:
        """Clear the session and both persisted entries."""
        ...

    def subscribe(self, callback: Callable[[SessionState], None]) -> Callable[[], None]:
        """
        Register a callback invoked with the new state after each change.

        Returns:
            A callable that removes the subscription
        """
        ...
