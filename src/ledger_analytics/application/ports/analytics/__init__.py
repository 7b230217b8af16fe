"""Analytics ports (read side)."""

from ledger_analytics.application.ports.analytics.ledger_read_port import (
    BudgetReadPort,
    TransactionFilter,
    TransactionReadPort,
)

__all__ = ["BudgetReadPort", "TransactionFilter", "TransactionReadPort"]
