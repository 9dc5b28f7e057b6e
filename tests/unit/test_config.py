"""Tests for configuration management."""

import os
import pytest
from unittest.mock import patch

from aql_paginate.config import Settings, get_settings


class TestSettings:
    """Test Settings class."""

    def test_default_values(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.default_page == 1
        assert settings.default_page_size == 30
        assert settings.max_page_size == 1000
        assert settings.log_level == "INFO"
        assert "%(levelname)s" in settings.log_format

    def test_environment_override(self):
        """Test that environment variables override defaults."""
        env_vars = {
            "DEFAULT_PAGE": "2",
            "DEFAULT_PAGE_SIZE": "25",
            "MAX_PAGE_SIZE": "100",
            "LOG_LEVEL": "DEBUG"
        }

        with patch.dict(os.environ, env_vars):
            settings = Settings()

            assert settings.default_page == 2
            assert settings.default_page_size == 25
            assert settings.max_page_size == 100
            assert settings.log_level == "DEBUG"

    def test_log_level_validation(self):
        """Test log level validation."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level.lower()}):
                assert Settings().log_level == level

        with patch.dict(os.environ, {"LOG_LEVEL": "INVALID"}):
            with pytest.raises(ValueError, match="Log level must be one of"):
                Settings()

    def test_get_settings_singleton(self):
        """Test that get_settings returns consistent instance."""
        assert get_settings() is get_settings()
