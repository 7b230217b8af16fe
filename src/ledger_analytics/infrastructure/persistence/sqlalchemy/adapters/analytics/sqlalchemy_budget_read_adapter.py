"""SQLAlchemy implementation of BudgetReadPort."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger_analytics.application.ports.analytics import BudgetReadPort
from ledger_analytics.domain.ledger import Budget
from ledger_analytics.infrastructure.persistence.sqlalchemy.models import (
    BudgetModel,
    CategoryModel,
)

logger = logging.getLogger(__name__)


class SqlAlchemyBudgetReadAdapter(BudgetReadPort):
    """SQLAlchemy budget read adapter."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def fetch_budgets(self, active_at: date) -> list[Budget]:
        stmt = (
            select(BudgetModel, CategoryModel.name)
            .outerjoin(CategoryModel, CategoryModel.id == BudgetModel.category_id)
            .where(
                BudgetModel.is_active.is_(True),
                BudgetModel.period_start <= active_at,
                BudgetModel.period_end >= active_at,
            )
            .order_by(BudgetModel.name, BudgetModel.id)
        )

        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).all()

        logger.debug("Fetched %d budgets active on %s", len(rows), active_at)
        return [
            Budget(
                id=model.id,
                name=model.name,
                category_id=model.category_id,
                category_name=category_name,
                amount=model.amount,
                period_start=model.period_start,
                period_end=model.period_end,
                alert_percentage=model.alert_percentage,
            )
            for model, category_name in rows
        ]
