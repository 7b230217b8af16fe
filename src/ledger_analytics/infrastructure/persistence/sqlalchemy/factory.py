"""SQLAlchemy implementation of the ReadPortFactory protocol."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger_analytics.infrastructure.persistence.sqlalchemy.adapters.analytics import (
    SqlAlchemyBudgetReadAdapter,
    SqlAlchemyTransactionReadAdapter,
)


class SqlAlchemyReadPortFactory:
    """Create read adapters sharing one session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

        # Cached instances (created on demand)
        self._transaction_adapter: SqlAlchemyTransactionReadAdapter | None = None
        self._budget_adapter: SqlAlchemyBudgetReadAdapter | None = None

    def transaction_read_port(self) -> SqlAlchemyTransactionReadAdapter:
        if self._transaction_adapter is None:
            self._transaction_adapter = SqlAlchemyTransactionReadAdapter(
                self._session_factory,
            )
        return self._transaction_adapter

    def budget_read_port(self) -> SqlAlchemyBudgetReadAdapter:
        if self._budget_adapter is None:
            self._budget_adapter = SqlAlchemyBudgetReadAdapter(self._session_factory)
        return self._budget_adapter
