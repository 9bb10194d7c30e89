"""
Custom exception hierarchy for the trading journal.

This module defines domain-specific exceptions for better error handling.
"""

from typing import Any


class JournalException(Exception):
    """Base exception for all journal-related errors."""

    pass


class ValidationError(JournalException):
    """Raised when input validation fails."""

    pass


class InvalidTradeRecord(ValidationError):
    """Raised when a trade record cannot be constructed from its fields."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid trade record: {field}={value!r} ({reason})")


class DataError(JournalException):
    """Raised when journal storage or import fails."""

    pass


class TradeNotFoundError(JournalException):
    """Raised when trying to operate on a trade that is not in the journal."""

    def __init__(self, trade_id: str):
        self.trade_id = trade_id
        super().__init__(f"Trade not found: {trade_id}")


class CoachingError(JournalException):
    """Raised when the coaching service cannot produce an analysis."""

    pass


class ConfigurationError(JournalException):
    """Raised when configuration is invalid."""

    pass
