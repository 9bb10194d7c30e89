"""
Trade side and status enumerations.

This module defines the allowed trade directions and lifecycle states.
"""

from enum import StrEnum


class TradeSide(StrEnum):
    """
    Allowed trade sides.

    Defines the direction of exposure, which determines the P/L sign.
    """

    LONG = "LONG"
    SHORT = "SHORT"

    @property
    def is_long(self) -> bool:
        """Check if side is long."""
        return self == self.LONG

    @property
    def multiplier(self) -> int:
        """Sign applied to the price move when computing P/L."""
        return 1 if self.is_long else -1

    @classmethod
    def from_string(cls, value: str) -> "TradeSide":
        """Convert a string to TradeSide, case-insensitive."""
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            raise ValueError(f"Unsupported trade side: {value}") from e


class TradeStatus(StrEnum):
    """
    Allowed trade lifecycle states.

    Only closed trades contribute to realized statistics.
    """

    OPEN = "OPEN"
    CLOSED = "CLOSED"

    @property
    def is_closed(self) -> bool:
        """Check if status is closed."""
        return self == self.CLOSED

    @classmethod
    def from_string(cls, value: str) -> "TradeStatus":
        """Convert a string to TradeStatus, case-insensitive."""
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            raise ValueError(f"Unsupported trade status: {value}") from e
