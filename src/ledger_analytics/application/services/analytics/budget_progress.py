"""Budget burn-down: spent vs limit for each active budget."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ledger_analytics.application.dtos.analytics import BudgetProgress
from ledger_analytics.domain.ledger import Budget, Transaction

logger = logging.getLogger(__name__)

PERCENT_QUANTUM = Decimal("0.1")
DEFAULT_ALERT_COUNT = 3


def evaluate_budgets(
    budgets: Iterable[Budget],
    transactions: Sequence[Transaction],
    *,
    today: date,
) -> list[BudgetProgress]:
    """Evaluate every budget active on ``today``, most consumed first.

    Percentages are left uncapped so overspend stays visible; a zero limit
    has no defined percentage and sorts after every defined one.
    """
    expenses = [t for t in transactions if t.is_expense and not t.is_pending]

    progress: list[BudgetProgress] = []
    for budget in budgets:
        if not budget.contains(today):
            logger.debug("Skipping budget %s: not active on %s", budget.id, today)
            continue
        spent = _spent_for(budget, expenses)
        progress.append(
            BudgetProgress(
                budget_id=budget.id,
                display_name=budget.name,
                category_id=budget.category_id,
                category_name=budget.category_name,
                limit_amount=budget.amount,
                spent=spent,
                percentage=_percentage(spent, budget.amount),
                alert_percentage=budget.alert_percentage,
                days_remaining=(budget.period_end - today).days,
            ),
        )

    progress.sort(key=_ranking_key)
    return progress


def select_alerts(
    progress: Sequence[BudgetProgress],
    top_n: int = DEFAULT_ALERT_COUNT,
) -> list[BudgetProgress]:
    """Return the ``top_n`` most consumed budgets with a defined percentage."""
    ranked = sorted(progress, key=_ranking_key)
    return [p for p in ranked if p.percentage is not None][: max(top_n, 0)]


def _spent_for(budget: Budget, expenses: Iterable[Transaction]) -> Decimal:
    spent = Decimal("0")
    for txn in expenses:
        if budget.category_id is not None and txn.category_id != budget.category_id:
            continue
        if budget.contains(txn.occurred_at.date()):
            spent += txn.amount
    return spent


def _percentage(spent: Decimal, limit: Decimal) -> Optional[Decimal]:
    if limit == 0:
        return None
    return (spent / limit * 100).quantize(PERCENT_QUANTUM)


def _ranking_key(p: BudgetProgress) -> tuple:
    # Exact consumption ratio, not the rounded percentage, decides the order
    if p.percentage is None or p.limit_amount == 0:
        return (1, Decimal("0"), p.display_name, p.budget_id)
    return (0, -(p.spent / p.limit_amount), p.display_name, p.budget_id)
