"""Daily activity query (heatmap source data)."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING, Optional

from ledger_analytics.application.dtos.analytics import DailyActivityPoint
from ledger_analytics.application.ports.analytics import (
    TransactionFilter,
    TransactionReadPort,
)
from ledger_analytics.application.services.analytics import build_daily_activity
from ledger_analytics.config import get_settings
from ledger_analytics.domain.ledger import TransactionType
from ledger_analytics.domain.shared.time import today_utc

if TYPE_CHECKING:
    from ledger_analytics.application.factories import ReadPortFactory


class DailyActivityQuery:
    """Return a zero-filled daily series for the trailing days."""

    def __init__(self, transaction_read_port: TransactionReadPort):
        self._transactions = transaction_read_port

    @classmethod
    def from_factory(cls, factory: ReadPortFactory) -> DailyActivityQuery:
        return cls(transaction_read_port=factory.transaction_read_port())

    async def execute(
        self,
        days: Optional[int] = None,
        transaction_type: TransactionType = TransactionType.EXPENSE,
        *,
        today: Optional[date] = None,
    ) -> list[DailyActivityPoint]:
        if days is None:
            days = get_settings().heatmap_days
        end = today or today_utc()

        transactions = await self._transactions.fetch_transactions(
            TransactionFilter(
                date_from=end - timedelta(days=max(days, 1) - 1),
                date_to=end,
                transaction_types=frozenset({transaction_type}),
                include_pending=False,
            ),
        )
        return build_daily_activity(
            transactions,
            days=days,
            today=end,
            transaction_type=transaction_type,
        )
