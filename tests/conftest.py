"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/          # Pure services, queries with mocked ports, config
    ├── integration/   # SQLAlchemy adapters against in-memory SQLite
    └── shared/        # Shared fixtures and factories
"""

import os

import pytest

from ledger_analytics.config import clear_settings_cache

ENV_PREFIX = "LEDGER_ANALYTICS_"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Run every test against default settings.

    Drops ``LEDGER_ANALYTICS_*`` variables and moves away from any ``.env``
    in the working directory.
    """
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()
