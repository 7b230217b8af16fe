"""SQLAlchemy persistence (read side)."""

from ledger_analytics.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
)
from ledger_analytics.infrastructure.persistence.sqlalchemy.factory import (
    SqlAlchemyReadPortFactory,
)

__all__ = ["SqlAlchemyReadPortFactory", "create_engine", "create_session_factory"]
