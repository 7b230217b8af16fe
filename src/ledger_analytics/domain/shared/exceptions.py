"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy for the analytics core.
Insufficient data and degenerate arithmetic are *not* exceptions here: they
are returned as ``None`` results. Exceptions are reserved for caller errors
(invalid arguments, malformed period keys) and for a failed primary fetch.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PERIOD_KEY = "INVALID_PERIOD_KEY"
    INVALID_PERIOD_COUNT = "INVALID_PERIOD_COUNT"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    WINDOW_LENGTH_MISMATCH = "WINDOW_LENGTH_MISMATCH"

    # Upstream Errors
    DATA_SOURCE_UNAVAILABLE = "DATA_SOURCE_UNAVAILABLE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all analytics errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged, not meant for end users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when an argument passed to the analytics core is invalid."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class InvalidPeriodKeyError(ValidationError):
    """Raised when a period key cannot be parsed for its granularity."""

    def __init__(self, key: str, granularity: str):
        super().__init__(
            f"Invalid period key {key!r} for granularity {granularity!r}",
            ErrorCode.INVALID_PERIOD_KEY,
            {"key": key, "granularity": granularity},
        )
        self.key = key
        self.granularity = granularity


class AnalyticsDataUnavailableError(DomainException):
    """Raised when the primary trend data could not be fetched."""

    def __init__(self, section: str, reason: str):
        super().__init__(
            f"Analytics data unavailable ({section}): {reason}",
            ErrorCode.DATA_SOURCE_UNAVAILABLE,
            {"section": section, "reason": reason},
        )
        self.section = section
        self.reason = reason
