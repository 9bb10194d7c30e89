"""
Trade performance analytics.

Pure functions over a trade collection: summary statistics, the equity
curve and per-strategy P/L.
"""

from .equity_curve import build_equity_curve
from .selection import chronological, is_realized, realized_trades
from .statistics import compute_stats, max_drawdown
from .strategy import aggregate_by_strategy
from .summary import summarize_journal

__all__ = [
    "compute_stats",
    "build_equity_curve",
    "aggregate_by_strategy",
    "summarize_journal",
    "max_drawdown",
    "realized_trades",
    "chronological",
    "is_realized",
]
