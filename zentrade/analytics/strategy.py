"""
Strategy aggregator.
"""

from collections.abc import Iterable

from zentrade.core.protocols import ITrade, StrategyBreakdown


def aggregate_by_strategy(trades: Iterable[ITrade]) -> StrategyBreakdown:
    """Sum P/L per strategy label.

    Unlike the realized statistics, every trade is included and a missing
    P/L counts as zero. Labels are grouped verbatim (case-sensitive) and
    appear in first-encounter order.
    """
    totals: StrategyBreakdown = {}
    for trade in trades:
        totals[trade.strategy] = totals.get(trade.strategy, 0.0) + (trade.pnl or 0.0)
    return totals
