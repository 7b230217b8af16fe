"""Unit tests for the daily activity series and heatmap layout."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from ledger_analytics.application.dtos.analytics import DailyActivityPoint
from ledger_analytics.application.services.analytics import (
    build_daily_activity,
    build_heatmap,
)
from ledger_analytics.domain.ledger import TransactionType
from ledger_analytics.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import TestLedgerFactory as F

TODAY = date(2024, 3, 10)


def _points(values):
    start = date(2024, 3, 1)
    return [
        DailyActivityPoint(date=start + timedelta(days=i), value=Decimal(v))
        for i, v in enumerate(values)
    ]


class TestBuildDailyActivity:
    def test_zero_filled_trailing_days(self):
        transactions = [
            F.expense("20", date(2024, 3, 1)),
            F.expense("5", date(2024, 3, 10)),
            F.expense("5", date(2024, 3, 10)),
            F.expense("99", date(2024, 2, 29)),
            F.income("1000", date(2024, 3, 5)),
        ]

        points = build_daily_activity(transactions, days=10, today=TODAY)

        assert len(points) == 10
        assert points[0].date == date(2024, 3, 1)
        assert points[-1].date == TODAY
        assert points[0].value == Decimal("20")
        assert points[-1].value == Decimal("10")
        assert points[4].value == Decimal("0")

    def test_income_activity(self):
        points = build_daily_activity(
            [F.income("1000", date(2024, 3, 5))],
            days=10,
            today=TODAY,
            transaction_type=TransactionType.INCOME,
        )

        assert points[4].value == Decimal("1000")

    def test_days_must_be_positive(self):
        with pytest.raises(ValidationError):
            build_daily_activity([], days=0, today=TODAY)


class TestBuildHeatmap:
    def test_ten_days_fill_two_columns_with_padding(self):
        heatmap = build_heatmap(_points(["0"] * 9 + ["50"]))

        assert heatmap.week_count == 2
        assert all(len(column) == 7 for column in heatmap.columns)
        padding = [cell for cell in heatmap.columns[1] if cell.is_padding]
        assert len(padding) == 4
        assert all(cell.date == "" and cell.value == 0 for cell in padding)

    def test_zero_day_is_not_padding(self):
        heatmap = build_heatmap(_points(["0"] * 10))

        first = heatmap.columns[0][0]
        assert first.date == "2024-03-01"
        assert not first.is_padding
        assert first.intensity == 0.0

    def test_intensity_is_relative_to_max(self):
        heatmap = build_heatmap(_points(["25", "50"]))

        assert heatmap.max_value == Decimal("50")
        assert heatmap.columns[0][0].intensity == 0.5
        assert heatmap.columns[0][1].intensity == 1.0

    def test_small_values_are_not_scaled_up(self):
        heatmap = build_heatmap(_points(["0.5"]))

        assert heatmap.columns[0][0].intensity == 0.5

    def test_rows_are_weekday_slices(self):
        heatmap = build_heatmap(_points([str(i) for i in range(14)]))

        assert [cell.value for cell in heatmap.row(0)] == [Decimal("0"), Decimal("7")]

    def test_explicit_week_count_pads_extra_columns(self):
        heatmap = build_heatmap(_points(["1"] * 7), weeks=2)

        assert heatmap.week_count == 2
        assert all(cell.is_padding for cell in heatmap.columns[1])

    def test_too_few_weeks_raises(self):
        with pytest.raises(ValidationError):
            build_heatmap(_points(["1"] * 8), weeks=1)

    def test_empty_series(self):
        heatmap = build_heatmap([])

        assert heatmap.week_count == 0
        assert heatmap.max_value == Decimal("0")
