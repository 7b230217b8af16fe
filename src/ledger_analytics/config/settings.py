"""Centralised configuration handling for ledger analytics."""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./ledger.db"


class Settings(BaseSettings):
    """Settings sourced from ``LEDGER_ANALYTICS_*`` env vars and an optional ``.env``."""

    database_url: str = DEFAULT_DATABASE_URL

    # Analytics defaults, used only when a caller omits the value
    default_period_count: int = Field(default=12, ge=1)
    comparison_window: int = Field(default=6, ge=1)
    budget_alert_count: int = Field(default=3, ge=0)
    heatmap_days: int = Field(default=84, ge=1)
    trend_flat_epsilon: Decimal = Decimal("1e-9")

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_ANALYTICS_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Load and cache settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(level: str | None = None) -> None:
    """Basic logging setup for host applications and scripts."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
