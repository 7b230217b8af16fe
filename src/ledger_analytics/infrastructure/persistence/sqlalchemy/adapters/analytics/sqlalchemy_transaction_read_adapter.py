"""SQLAlchemy implementation of TransactionReadPort.

Rows are mapped straight to the ``Transaction`` value object, joined with
the category name so the analytics core never looks categories up itself.
Date bounds are inclusive calendar days in UTC.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger_analytics.application.ports.analytics import (
    TransactionFilter,
    TransactionReadPort,
)
from ledger_analytics.domain.ledger import Transaction, TransactionType
from ledger_analytics.infrastructure.persistence.sqlalchemy.models import (
    CategoryModel,
    TransactionModel,
)

logger = logging.getLogger(__name__)


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class SqlAlchemyTransactionReadAdapter(TransactionReadPort):
    """SQLAlchemy transaction read adapter.

    Each fetch runs in its own session so independent fetches may be
    awaited concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def fetch_transactions(self, criteria: TransactionFilter) -> list[Transaction]:
        stmt = (
            select(TransactionModel, CategoryModel.name)
            .outerjoin(CategoryModel, CategoryModel.id == TransactionModel.category_id)
            .order_by(TransactionModel.occurred_at, TransactionModel.id)
        )

        if criteria.date_from is not None:
            stmt = stmt.where(TransactionModel.occurred_at >= _start_of_day(criteria.date_from))
        if criteria.date_to is not None:
            end_exclusive = _start_of_day(criteria.date_to + timedelta(days=1))
            stmt = stmt.where(TransactionModel.occurred_at < end_exclusive)
        if criteria.account_ids:
            # Transfers count for both the source and the destination account
            account_ids = sorted(criteria.account_ids)
            stmt = stmt.where(
                or_(
                    TransactionModel.account_id.in_(account_ids),
                    TransactionModel.destination_account_id.in_(account_ids),
                ),
            )
        if criteria.category_ids:
            stmt = stmt.where(TransactionModel.category_id.in_(sorted(criteria.category_ids)))
        if criteria.transaction_types:
            stmt = stmt.where(
                TransactionModel.type.in_(sorted(t.value for t in criteria.transaction_types)),
            )
        if not criteria.include_pending:
            stmt = stmt.where(TransactionModel.is_pending.is_(False))

        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).all()

        logger.debug("Fetched %d transactions for %s", len(rows), criteria)
        return [self._to_domain(model, category_name) for model, category_name in rows]

    @staticmethod
    def _to_domain(model: TransactionModel, category_name: str | None) -> Transaction:
        return Transaction(
            id=model.id,
            account_id=model.account_id,
            category_id=model.category_id,
            category_name=category_name,
            type=TransactionType(model.type),
            amount=model.amount,
            occurred_at=model.occurred_at,
            is_pending=model.is_pending,
        )
