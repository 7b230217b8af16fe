"""Category distribution query."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from ledger_analytics.application.dtos.analytics import CategorySummary
from ledger_analytics.application.ports.analytics import (
    TransactionFilter,
    TransactionReadPort,
)
from ledger_analytics.application.services.analytics import summarize_categories
from ledger_analytics.domain.ledger import TransactionType

if TYPE_CHECKING:
    from ledger_analytics.application.factories import ReadPortFactory


class CategorySummaryQuery:
    """Return per-category totals and shares, largest first."""

    def __init__(self, transaction_read_port: TransactionReadPort):
        self._transactions = transaction_read_port

    @classmethod
    def from_factory(cls, factory: ReadPortFactory) -> CategorySummaryQuery:
        return cls(transaction_read_port=factory.transaction_read_port())

    async def execute(
        self,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        transaction_type: TransactionType = TransactionType.EXPENSE,
    ) -> list[CategorySummary]:
        transactions = await self._transactions.fetch_transactions(
            TransactionFilter(
                date_from=date_from,
                date_to=date_to,
                transaction_types=frozenset({transaction_type}),
                include_pending=False,
            ),
        )
        return summarize_categories(
            transactions,
            date_from=date_from,
            date_to=date_to,
            transaction_type=transaction_type,
        )
