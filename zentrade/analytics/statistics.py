"""
Statistics aggregator.

Reduces a trade collection to summary metrics. Every call is a full pass
over the input; nothing is cached and the trades are never modified.
"""

from collections.abc import Iterable, Sequence

from loguru import logger

from zentrade.core.models.stats import TradeStats
from zentrade.core.protocols import ITrade

from .selection import chronological, realized_trades


def compute_stats(trades: Iterable[ITrade]) -> TradeStats:
    """Compute performance statistics for the given trades.

    Only closed trades with a realized P/L are counted. Trades with a P/L of
    exactly zero count toward the total and the net, but are neither wins
    nor losses.

    Args:
        trades: Journal trades, in any order

    Returns:
        TradeStats. All fields are zero when no trade qualifies.
    """
    closed = realized_trades(trades)
    if not closed:
        return TradeStats.empty()

    pnls = [trade.pnl for trade in closed]
    wins = [pnl for pnl in pnls if pnl > 0]
    losses = [pnl for pnl in pnls if pnl < 0]

    gross_win = sum(wins)
    gross_loss = abs(sum(losses))

    # With no losing trades the profit factor falls back to the gross win
    profit_factor = gross_win / gross_loss if gross_loss != 0 else gross_win

    stats = TradeStats(
        total_trades=len(closed),
        win_rate=len(wins) / len(closed),
        net_pnl=sum(pnls),
        avg_win=gross_win / len(wins) if wins else 0.0,
        avg_loss=gross_loss / len(losses) if losses else 0.0,
        profit_factor=profit_factor,
        max_drawdown=max_drawdown(closed),
    )
    logger.debug(f"Computed stats over {stats.total_trades} realized trades")
    return stats


def max_drawdown(trades: Sequence[ITrade]) -> float:
    """Largest peak-to-trough decline of cumulative realized P/L.

    The walk starts from zero equity in entry-date order. Equity marks of open
    trades are not considered.

    Args:
        trades: Trades to walk; non-qualifying trades are ignored

    Returns:
        Maximum drawdown as a non-negative amount, 0 if equity never fell
        below a prior peak
    """
    equity = 0.0
    peak = 0.0
    worst = 0.0

    for trade in chronological(realized_trades(trades)):
        equity += trade.pnl
        if equity > peak:
            peak = equity
        else:
            worst = max(worst, peak - equity)

    return worst
