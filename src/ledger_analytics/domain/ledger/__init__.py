"""Ledger value objects consumed by the analytics core."""

from ledger_analytics.domain.ledger.budget import Budget
from ledger_analytics.domain.ledger.granularity import Granularity
from ledger_analytics.domain.ledger.transaction import Transaction, TransactionType

__all__ = [
    "Budget",
    "Granularity",
    "Transaction",
    "TransactionType",
]
