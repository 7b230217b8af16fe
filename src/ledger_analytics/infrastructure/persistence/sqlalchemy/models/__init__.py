"""SQLAlchemy read-schema models."""

from ledger_analytics.infrastructure.persistence.sqlalchemy.models.base import Base
from ledger_analytics.infrastructure.persistence.sqlalchemy.models.budget_model import (
    BudgetModel,
)
from ledger_analytics.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from ledger_analytics.infrastructure.persistence.sqlalchemy.models.transaction_model import (  # NOQA: E501
    TransactionModel,
)

__all__ = ["Base", "BudgetModel", "CategoryModel", "TransactionModel"]
