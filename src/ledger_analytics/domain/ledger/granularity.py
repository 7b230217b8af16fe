"""Calendar granularity used for period bucketing."""

from enum import Enum


class Granularity(str, Enum):
    """Calendar unit a trend series is bucketed by."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
