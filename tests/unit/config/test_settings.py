"""Unit tests for settings loading."""

import logging
from decimal import Decimal
from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from ledger_analytics.config import (
    Settings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.database_url == "sqlite+aiosqlite:///./ledger.db"
        assert settings.default_period_count == 12
        assert settings.comparison_window == 6
        assert settings.budget_alert_count == 3
        assert settings.heatmap_days == 84
        assert settings.trend_flat_epsilon == Decimal("1e-9")
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LEDGER_ANALYTICS_HEATMAP_DAYS", "28")
        monkeypatch.setenv("LEDGER_ANALYTICS_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        settings = Settings()

        assert settings.heatmap_days == 28
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"

    def test_env_file_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("LEDGER_ANALYTICS_COMPARISON_WINDOW=3\n")

        assert Settings().comparison_window == 3

    def test_invalid_period_count_rejected(self, monkeypatch):
        monkeypatch.setenv("LEDGER_ANALYTICS_DEFAULT_PERIOD_COUNT", "0")

        with pytest.raises(PydanticValidationError):
            Settings()


class TestGetSettings:
    def test_cached_until_cleared(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LEDGER_ANALYTICS_BUDGET_ALERT_COUNT", "5")

        assert get_settings() is first
        assert get_settings().budget_alert_count == 3

        clear_settings_cache()

        assert get_settings().budget_alert_count == 5


class TestConfigureLogging:
    def test_uses_configured_level(self, monkeypatch):
        monkeypatch.setenv("LEDGER_ANALYTICS_LOG_LEVEL", "debug")

        with patch.object(logging, "basicConfig") as basic_config:
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == "DEBUG"

    def test_explicit_level_wins(self):
        with patch.object(logging, "basicConfig") as basic_config:
            configure_logging("warning")

        assert basic_config.call_args.kwargs["level"] == "WARNING"
