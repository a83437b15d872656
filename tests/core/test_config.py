"""
Test suite for application settings.

Run tests:
    pytest tests/core/test_config.py -v
"""

import logging

import pytest

from stripe_contracts.core.config import (
    Settings,
    cli_logger,
    get_settings,
    settings,
    stripe_logger,
)


class TestSettings:
    """Test suite for the Settings model."""

    def test_defaults(self, monkeypatch):
        """Test the documented defaults when nothing is configured."""
        for name in (
            "STRIPE_API_KEY",
            "STRIPE_API_BASE_URL",
            "STRIPE_API_VERSION",
            "STRIPE_TIMEOUT_SECONDS",
            "LOG_LEVEL",
            "SENTRY_DSN",
            "SENTRY_TRACES_SAMPLE_RATE",
        ):
            monkeypatch.delenv(name, raising=False)

        s = Settings(_env_file=None)

        assert s.STRIPE_API_KEY == ""
        assert s.STRIPE_API_BASE_URL == "https://api.stripe.com"
        assert s.STRIPE_API_VERSION == "2019-11-05"
        assert s.STRIPE_TIMEOUT_SECONDS == 80.0
        assert s.LOG_LEVEL == "INFO"
        assert s.SENTRY_DSN == ""
        assert s.SENTRY_TRACES_SAMPLE_RATE == 0.1

    def test_reads_environment(self, monkeypatch):
        """Test that values are read from environment variables."""
        monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
        monkeypatch.setenv("STRIPE_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("LOG_TO_FILE", "true")

        s = Settings(_env_file=None)

        assert s.STRIPE_API_KEY == "sk_test_env"
        assert s.STRIPE_TIMEOUT_SECONDS == 12.5
        assert s.LOG_TO_FILE is True

    def test_ignores_unknown_environment_keys(self, monkeypatch):
        """Test that unrelated variables do not break settings loading."""
        monkeypatch.setenv("SOMETHING_UNRELATED", "1")

        s = Settings(_env_file=None)

        assert not hasattr(s, "SOMETHING_UNRELATED")

    @pytest.mark.parametrize(
        "value,expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("INFO", logging.INFO)],
    )
    def test_log_level_property(self, value, expected):
        """Test that LOG_LEVEL names map to stdlib logging levels."""
        s = Settings(_env_file=None, LOG_LEVEL=value)

        assert s.log_level == expected


class TestModuleObjects:
    """Test suite for the objects the config module exposes."""

    def test_get_settings_is_cached(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()
        assert get_settings() is settings

    def test_loggers_are_configured(self):
        """Test that the module-level loggers exist with handlers attached."""
        assert stripe_logger.name == "stripe_logger"
        assert cli_logger.name == "cli_logger"
        assert stripe_logger.handlers
        assert cli_logger.handlers
