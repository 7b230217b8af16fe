"""Ledger read ports.

The analytics core never talks to storage directly. It asks these ports for
complete, already-validated records and works on the final result only; a
cancelled or failed fetch leaves no partial state behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol

from ledger_analytics.domain.ledger import Budget, Transaction, TransactionType


@dataclass(frozen=True)
class TransactionFilter:
    """Selection criteria for a transaction fetch.

    ``date_from`` and ``date_to`` are inclusive calendar dates. Empty id or
    type sets mean "no restriction".
    """

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    account_ids: frozenset[str] = frozenset()
    category_ids: frozenset[str] = frozenset()
    transaction_types: frozenset[TransactionType] = frozenset()
    include_pending: bool = False


class TransactionReadPort(Protocol):
    """Read-only access to ledger transactions."""

    async def fetch_transactions(self, criteria: TransactionFilter) -> list[Transaction]:
        """Return every transaction matching ``criteria``."""
        ...


class BudgetReadPort(Protocol):
    """Read-only access to budgets."""

    async def fetch_budgets(self, active_at: date) -> list[Budget]:
        """Return budgets whose period contains ``active_at``."""
        ...
