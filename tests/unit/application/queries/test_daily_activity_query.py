"""Unit tests for DailyActivityQuery."""

from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from ledger_analytics.application.queries.analytics import DailyActivityQuery

TODAY = date(2024, 3, 15)


class TestDailyActivityQuery:
    @pytest.mark.asyncio
    async def test_days_default_from_settings(self, mock_transaction_port):
        query = DailyActivityQuery(mock_transaction_port)

        points = await query.execute(today=TODAY)

        assert len(points) == 84
        assert points[-1].date == TODAY
        criteria = mock_transaction_port.fetch_transactions.await_args.args[0]
        assert criteria.date_from == date(2023, 12, 23)
        assert criteria.date_to == TODAY

    @pytest.mark.asyncio
    async def test_explicit_days(self, mock_transaction_port):
        query = DailyActivityQuery(mock_transaction_port)

        points = await query.execute(7, today=TODAY)

        assert [p.date for p in points][0] == date(2024, 3, 9)


class TestDailyActivityQueryDependencyInjection:
    def test_from_factory_creates_query(self):
        mock_factory = Mock()
        mock_factory.transaction_read_port.return_value = AsyncMock()

        query = DailyActivityQuery.from_factory(mock_factory)

        assert query is not None
        mock_factory.transaction_read_port.assert_called_once()
