"""Analytics read adapters."""

from ledger_analytics.infrastructure.persistence.sqlalchemy.adapters.analytics.sqlalchemy_budget_read_adapter import (  # NOQA: E501
    SqlAlchemyBudgetReadAdapter,
)
from ledger_analytics.infrastructure.persistence.sqlalchemy.adapters.analytics.sqlalchemy_transaction_read_adapter import (  # NOQA: E501
    SqlAlchemyTransactionReadAdapter,
)

__all__ = ["SqlAlchemyBudgetReadAdapter", "SqlAlchemyTransactionReadAdapter"]
