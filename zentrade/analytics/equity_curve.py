"""
Equity curve builder.

Produces the cumulative realized P/L series charted on the dashboard.
"""

from collections.abc import Iterable

from zentrade.core.models.stats import ChartData
from zentrade.core.protocols import ITrade

from .selection import chronological, realized_trades


def build_equity_curve(trades: Iterable[ITrade]) -> list[ChartData]:
    """Build the equity curve for the given trades.

    Each realized trade contributes one point dated by its entry date,
    carrying its own P/L and the running total. A baseline point labelled
    INITIAL_POINT_LABEL leads the curve when there is at least one point.

    Returns:
        Points in ascending date order, or an empty list when no trade qualifies
    """
    ordered = chronological(realized_trades(trades))
    if not ordered:
        return []

    curve = [ChartData.baseline()]
    equity = 0.0
    for trade in ordered:
        equity += trade.pnl
        curve.append(ChartData(date=trade.entry_date, equity=equity, pnl=trade.pnl))
    return curve
