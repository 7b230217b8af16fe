"""Read port factory protocol for the application layer."""

from __future__ import annotations

from typing import Protocol

from ledger_analytics.application.ports.analytics import (
    BudgetReadPort,
    TransactionReadPort,
)


class ReadPortFactory(Protocol):
    """Protocol for creating the read ports a query needs."""

    def transaction_read_port(self) -> TransactionReadPort:
        """Get transaction read port."""
        ...

    def budget_read_port(self) -> BudgetReadPort:
        """Get budget read port."""
        ...
