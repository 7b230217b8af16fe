"""Budget progress query."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from ledger_analytics.application.dtos.analytics import BudgetProgress
from ledger_analytics.application.ports.analytics import (
    BudgetReadPort,
    TransactionFilter,
    TransactionReadPort,
)
from ledger_analytics.application.services.analytics import (
    evaluate_budgets,
    select_alerts,
)
from ledger_analytics.config import get_settings
from ledger_analytics.domain.ledger import TransactionType
from ledger_analytics.domain.shared.time import today_utc

if TYPE_CHECKING:
    from ledger_analytics.application.factories import ReadPortFactory

logger = logging.getLogger(__name__)


class BudgetProgressQuery:
    """Return spend-vs-limit progress of every active budget, most consumed first."""

    def __init__(
        self,
        budget_read_port: BudgetReadPort,
        transaction_read_port: TransactionReadPort,
    ):
        self._budgets = budget_read_port
        self._transactions = transaction_read_port

    @classmethod
    def from_factory(cls, factory: ReadPortFactory) -> BudgetProgressQuery:
        return cls(
            budget_read_port=factory.budget_read_port(),
            transaction_read_port=factory.transaction_read_port(),
        )

    async def execute(self, *, today: Optional[date] = None) -> list[BudgetProgress]:
        day = today or today_utc()
        budgets = await self._budgets.fetch_budgets(day)
        if not budgets:
            return []

        transactions = await self._transactions.fetch_transactions(
            TransactionFilter(
                date_from=min(b.period_start for b in budgets),
                date_to=max(b.period_end for b in budgets),
                transaction_types=frozenset({TransactionType.EXPENSE}),
                include_pending=False,
            ),
        )
        progress = evaluate_budgets(budgets, transactions, today=day)
        logger.debug("Evaluated %d active budgets on %s", len(progress), day)
        return progress

    async def alerts(
        self,
        top_n: Optional[int] = None,
        *,
        today: Optional[date] = None,
    ) -> list[BudgetProgress]:
        """Return the ``top_n`` most consumed budgets for alerting."""
        if top_n is None:
            top_n = get_settings().budget_alert_count
        return select_alerts(await self.execute(today=today), top_n)
