"""
Core type definitions and protocols.

The analytics read trades through this protocol so that any record with
the same attributes (ORM rows, API models) can be analysed directly.
"""

from typing import Protocol

from zentrade.core.enums import TradeStatus


class ITrade(Protocol):
    """Protocol defining the attributes the analytics read from a trade."""

    status: TradeStatus
    entry_date: str
    strategy: str
    pnl: float | None


# Type aliases for commonly used types
StrategyBreakdown = dict[str, float]
