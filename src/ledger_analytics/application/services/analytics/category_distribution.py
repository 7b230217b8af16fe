"""Per-category totals and shares within a date range."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ledger_analytics.application.dtos.analytics import CategorySummary
from ledger_analytics.domain.ledger import Transaction, TransactionType
from ledger_analytics.domain.shared.exceptions import ErrorCode, ValidationError

UNCATEGORIZED_LABEL = "Uncategorized"
SHARE_QUANTUM = Decimal("0.1")


def summarize_categories(
    transactions: Iterable[Transaction],
    *,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    transaction_type: TransactionType = TransactionType.EXPENSE,
) -> list[CategorySummary]:
    """Summarize ``transaction_type`` totals by category over ``[date_from, date_to]``.

    Transactions without a category are grouped under one uncategorized row
    instead of being dropped. An all-zero result yields an empty list.
    """
    if date_from and date_to and date_from > date_to:
        raise ValidationError(
            f"date_from {date_from} is after date_to {date_to}",
            ErrorCode.INVALID_DATE_RANGE,
        )

    totals: dict[Optional[str], Decimal] = defaultdict(Decimal)
    counts: dict[Optional[str], int] = defaultdict(int)
    names: dict[Optional[str], str] = {None: UNCATEGORIZED_LABEL}

    for txn in transactions:
        if txn.is_pending or txn.type != transaction_type:
            continue
        day = txn.occurred_at.date()
        if date_from and day < date_from:
            continue
        if date_to and day > date_to:
            continue

        key = txn.category_id
        totals[key] += txn.amount
        counts[key] += 1
        if key is not None and key not in names:
            names[key] = txn.category_name or key

    grand_total = sum(totals.values(), Decimal("0"))
    if grand_total <= 0:
        return []

    rows = [
        CategorySummary(
            category_id=key,
            display_name=names[key],
            total=total,
            share=(total / grand_total * 100).quantize(SHARE_QUANTUM),
            transaction_count=counts[key],
        )
        for key, total in totals.items()
    ]
    rows.sort(key=lambda r: (-r.total, r.display_name, r.category_id or ""))
    return rows
