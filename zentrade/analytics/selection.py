"""
Trade selection and ordering shared by the analytics.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from zentrade.core.enums import TradeStatus
from zentrade.core.protocols import ITrade


def is_realized(trade: ITrade) -> bool:
    """A trade qualifies for realized statistics iff it is CLOSED and has a P/L."""
    return trade.status == TradeStatus.CLOSED and trade.pnl is not None


def realized_trades[T: ITrade](trades: Iterable[T]) -> list[T]:
    """Return the qualifying closed trades in input order."""
    return [trade for trade in trades if is_realized(trade)]


def _entry_day(trade: ITrade) -> date:
    return date.fromisoformat(trade.entry_date[:10])


def chronological[T: ITrade](trades: Sequence[T]) -> list[T]:
    """Return a new list sorted ascending by entry date.

    sorted() is stable, so trades sharing an entry date keep their input order.
    """
    return sorted(trades, key=_entry_day)
