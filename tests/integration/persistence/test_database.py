"""Tests for engine and session factory setup."""

import pytest
from sqlalchemy import text

from ledger_analytics.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_factory,
)


class TestDatabaseSetup:
    @pytest.mark.asyncio
    async def test_engine_uses_configured_url(self, monkeypatch):
        monkeypatch.setenv("LEDGER_ANALYTICS_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

        engine = create_engine()
        try:
            assert engine.url.drivername == "sqlite+aiosqlite"
            assert engine.url.database == ":memory:"
            async with create_session_factory(engine)() as session:
                assert (await session.execute(text("SELECT 1"))).scalar_one() == 1
        finally:
            await engine.dispose()
