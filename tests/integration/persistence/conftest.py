"""
Fixtures for SQLAlchemy read adapter tests.

Each test gets a fresh in-memory SQLite database. ``StaticPool`` keeps one
connection alive so every session opened by the adapters sees the same
database.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ledger_analytics.infrastructure.persistence.sqlalchemy.models import (
    Base,
    BudgetModel,
    CategoryModel,
    TransactionModel,
)


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def seeded_session_factory(session_factory):
    """
    Session factory over a small ledger:

    - categories ``food`` and ``rent``
    - March 2024 expenses, one income, one pending expense and one transfer
    - an active food budget and an inactive one
    """

    def at(day: int, hour: int = 12) -> datetime:
        return datetime(2024, 3, day, hour, 0, tzinfo=timezone.utc)

    async with session_factory() as session:
        session.add_all(
            [
                CategoryModel(id="food", name="Food", type="expense"),
                CategoryModel(id="rent", name="Rent", type="expense"),
            ],
        )
        await session.flush()
        session.add_all(
            [
                TransactionModel(
                    id="t-1",
                    type="expense",
                    account_id="acc-1",
                    category_id="food",
                    amount=Decimal("42.50"),
                    occurred_at=at(1, 0),
                ),
                TransactionModel(
                    id="t-2",
                    type="expense",
                    account_id="acc-2",
                    category_id="rent",
                    amount=Decimal("900.00"),
                    occurred_at=at(31, 23),
                ),
                TransactionModel(
                    id="t-3",
                    type="income",
                    account_id="acc-1",
                    amount=Decimal("2500.00"),
                    occurred_at=at(15),
                ),
                TransactionModel(
                    id="t-4",
                    type="expense",
                    account_id="acc-1",
                    category_id="food",
                    amount=Decimal("10.00"),
                    occurred_at=at(16),
                    is_pending=True,
                ),
                TransactionModel(
                    id="t-5",
                    type="transfer",
                    account_id="acc-2",
                    destination_account_id="acc-3",
                    amount=Decimal("100.00"),
                    occurred_at=at(20),
                ),
                TransactionModel(
                    id="t-6",
                    type="expense",
                    account_id="acc-1",
                    category_id="food",
                    amount=Decimal("5.00"),
                    occurred_at=datetime(2024, 4, 1, 0, 0, tzinfo=timezone.utc),
                ),
            ],
        )
        session.add_all(
            [
                BudgetModel(
                    id="b-food",
                    name="Food March",
                    category_id="food",
                    amount=Decimal("300.00"),
                    period_start=date(2024, 3, 1),
                    period_end=date(2024, 3, 31),
                ),
                BudgetModel(
                    id="b-off",
                    name="Disabled",
                    amount=Decimal("50.00"),
                    period_start=date(2024, 3, 1),
                    period_end=date(2024, 3, 31),
                    is_active=False,
                ),
            ],
        )
        await session.commit()

    return session_factory
