"""Shared domain primitives."""

from ledger_analytics.domain.shared.exceptions import (
    AnalyticsDataUnavailableError,
    DomainException,
    ErrorCode,
    InvalidPeriodKeyError,
    ValidationError,
)

__all__ = [
    "AnalyticsDataUnavailableError",
    "DomainException",
    "ErrorCode",
    "InvalidPeriodKeyError",
    "ValidationError",
]
