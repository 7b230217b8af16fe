"""Configuration for ledger analytics."""

from ledger_analytics.config.settings import (
    Settings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
