"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from shared.config import Settings, get_settings
from shared.storage import MemoryStorage, reset_storage
from modules.session import SessionStore, User, close_session_scope


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, storage and the session scope around each test."""
    get_settings.cache_clear()
    reset_storage()
    close_session_scope()
    yield
    close_session_scope()
    reset_storage()
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing storage at a temporary directory."""
    return Settings(storage_path=tmp_path / "storage.json")


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty in-memory client storage."""
    return MemoryStorage()


@pytest.fixture
def test_user() -> User:
    """Provide a consistent test user."""
    return User(email_id="a@b.com")


@pytest.fixture
def store(memory_storage, test_settings) -> SessionStore:
    """A hydrated session store over empty in-memory storage."""
    session_store = SessionStore(memory_storage, test_settings)
    session_store.hydrate()
    return session_store
