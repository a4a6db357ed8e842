"""Tests for shared/config.py."""

from pathlib import Path
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Toto Finance"
        assert settings.app_env == "dev"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.auth_token_key == "authToken"
        assert settings.user_key == "user"
        assert settings.walletconnect_project_id == "YOUR_PROJECT_ID"

    def test_default_storage_path_in_home(self):
        """Storage should default to a file under the home directory."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.storage_path.name == "storage.json"
        assert settings.storage_path.parent.name == ".toto"

    def test_loads_from_env(self):
        """Settings should load TOTO_-prefixed environment variables."""
        with patch.dict(os.environ, {
            "TOTO_DEBUG": "true",
            "TOTO_APP_ENV": "prod",
            "TOTO_STORAGE_PATH": "/tmp/toto-test.json",
        }):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.app_env == "prod"
            assert settings.storage_path == Path("/tmp/toto-test.json")

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"APP_NAME": "Other"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.app_name == "Toto Finance"

    def test_loads_storage_keys_from_env(self):
        """Storage key names should be configurable."""
        with patch.dict(os.environ, {
            "TOTO_AUTH_TOKEN_KEY": "token",
            "TOTO_USER_KEY": "profile",
        }):
            settings = Settings(_env_file=None)
            assert settings.auth_token_key == "token"
            assert settings.user_key == "profile"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings should return the same instance on repeated calls."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
