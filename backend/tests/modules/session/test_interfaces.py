"""Tests for modules/session/interfaces.py."""

from modules.session.interfaces import ISessionStore
from modules.session.service import SessionStore


class TestSessionStoreInterface:
    def test_interface_methods_exist(self):
        """ISessionStore should define the public session surface."""
        for name in ["is_signed_in", "user", "sign_in", "sign_out", "subscribe"]:
            assert hasattr(ISessionStore, name)

    def test_store_has_interface_methods(self):
        """SessionStore should provide every ISessionStore member."""
        for name in ["sign_in", "sign_out", "subscribe"]:
            assert callable(getattr(SessionStore, name))

    def test_store_instance_satisfies_protocol(self, store):
        """A SessionStore instance should pass the runtime protocol check."""
        assert isinstance(store, ISessionStore)
