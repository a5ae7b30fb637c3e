"""
Unit tests for configuration management.

Tests cover:
- Default values
- Environment detection properties
- Log level validation
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from passhash.core.config import Settings, get_settings
from passhash.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettings:
    """Test Settings loading and validation."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment is Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.app_name == "passhash"
        assert settings.is_development

    def test_loads_prefixed_env_vars(self):
        env_values = {
            "PASSHASH_ENVIRONMENT": "testing",
            "PASSHASH_LOG_LEVEL": "debug",
            "PASSHASH_APP_NAME": "auth-service",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.is_testing
        assert settings.log_level == "DEBUG"
        assert settings.app_name == "auth-service"

    def test_ignores_unprefixed_env_vars(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}, clear=True):
            settings = Settings()

        assert not settings.is_production

    @pytest.mark.parametrize(
        ("env", "prop"),
        [
            ("ci", "is_ci"),
            ("production", "is_production"),
            ("development", "is_development"),
        ],
    )
    def test_environment_properties(self, env, prop):
        with patch.dict(os.environ, {"PASSHASH_ENVIRONMENT": env}, clear=True):
            settings = Settings()

        assert getattr(settings, prop) is True

    def test_invalid_log_level(self):
        with patch.dict(os.environ, {"PASSHASH_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_invalid_environment(self):
        with patch.dict(os.environ, {"PASSHASH_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_cached_instance(self, clear_container_caches):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, clear_container_caches):
        with patch.dict(os.environ, {"PASSHASH_ENVIRONMENT": "ci"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().is_ci
