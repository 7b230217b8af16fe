"""Unit tests for zero-filled period bucketing."""

from datetime import date
from decimal import Decimal

import pytest

from ledger_analytics.application.services.analytics import (
    build_period_buckets,
    build_period_buckets_between,
    period_span,
)
from ledger_analytics.domain.ledger import Granularity, TransactionType
from ledger_analytics.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import TestLedgerFactory as F


class TestBuildPeriodBuckets:
    def test_empty_ledger_yields_zero_filled_buckets(self):
        buckets = build_period_buckets([], Granularity.MONTH, 12, end=date(2024, 3, 15))

        assert len(buckets) == 12
        assert buckets[0].period_key == "2023-04"
        assert buckets[-1].period_key == "2024-03"
        assert all(b.income == 0 and b.expenses == 0 for b in buckets)

    def test_sums_income_and_expenses_per_period(self):
        transactions = [
            F.income("1000", date(2024, 1, 25)),
            F.expense("300", date(2024, 1, 3)),
            F.expense("200", date(2024, 3, 1)),
        ]

        buckets = build_period_buckets(
            transactions,
            Granularity.MONTH,
            3,
            end=date(2024, 3, 15),
        )

        assert [b.period_key for b in buckets] == ["2024-01", "2024-02", "2024-03"]
        assert [b.balance for b in buckets] == [Decimal("700"), Decimal("0"), Decimal("-200")]
        assert buckets[0].period_label == "January 2024"

    def test_skips_pending_transfers_and_out_of_window(self):
        transactions = [
            F.expense("50", date(2024, 3, 2), is_pending=True),
            F.transaction(TransactionType.TRANSFER, "500", date(2024, 3, 2)),
            F.income("999", date(2023, 12, 31)),
            F.income("10", date(2024, 3, 2)),
        ]

        buckets = build_period_buckets(
            transactions,
            Granularity.MONTH,
            2,
            end=date(2024, 3, 15),
        )

        assert buckets[-1].income == Decimal("10")
        assert buckets[-1].expenses == Decimal("0")
        assert buckets[0].income == Decimal("0")

    @pytest.mark.parametrize(
        ("granularity", "count", "end", "keys"),
        [
            (Granularity.DAY, 3, date(2024, 3, 1), ["2024-02-28", "2024-02-29", "2024-03-01"]),
            (Granularity.WEEK, 3, date(2024, 1, 3), ["2023-51", "2023-52", "2024-01"]),
            (Granularity.MONTH, 2, date(2024, 1, 10), ["2023-12", "2024-01"]),
            (Granularity.YEAR, 3, date(2024, 6, 1), ["2022", "2023", "2024"]),
        ],
    )
    def test_every_granularity_is_contiguous_and_ascending(
        self,
        granularity,
        count,
        end,
        keys,
    ):
        buckets = build_period_buckets([], granularity, count, end=end)

        assert [b.period_key for b in buckets] == keys

    def test_zero_period_count_raises(self):
        with pytest.raises(ValidationError):
            build_period_buckets([], Granularity.MONTH, 0, end=date(2024, 3, 15))


class TestBuildPeriodBucketsBetween:
    def test_covers_every_period_touching_range(self):
        transactions = [F.expense("20", date(2024, 3, 4)), F.expense("5", date(2024, 3, 17))]

        buckets = build_period_buckets_between(
            transactions,
            Granularity.WEEK,
            date(2024, 3, 1),
            date(2024, 3, 17),
        )

        assert [b.period_key for b in buckets] == ["2024-09", "2024-10", "2024-11"]
        assert [b.expenses for b in buckets] == [Decimal("0"), Decimal("20"), Decimal("5")]


class TestPeriodSpan:
    def test_span_covers_full_first_and_last_period(self):
        assert period_span(Granularity.MONTH, 3, date(2024, 3, 15)) == (
            date(2024, 1, 1),
            date(2024, 3, 31),
        )
