"""
Dashboard summary.

Bundles the three analytics with the tile figures shown next to them.
"""

from collections.abc import Iterable

from zentrade.core.models.stats import JournalSummary
from zentrade.core.protocols import ITrade

from .equity_curve import build_equity_curve
from .statistics import compute_stats
from .strategy import aggregate_by_strategy


def summarize_journal(trades: Iterable[ITrade]) -> JournalSummary:
    """Compute the dashboard view of a journal.

    Win/loss counts and the average trade are taken over all trades, not
    only realized ones; a missing P/L counts as zero.
    """
    trades = list(trades)
    stats = compute_stats(trades)
    pnls = [trade.pnl or 0.0 for trade in trades]

    return JournalSummary(
        stats=stats,
        equity_curve=build_equity_curve(trades),
        strategy_breakdown=aggregate_by_strategy(trades),
        win_count=sum(1 for pnl in pnls if pnl > 0),
        loss_count=sum(1 for pnl in pnls if pnl < 0),
        average_trade=stats.net_pnl / len(trades) if trades else 0.0,
    )
