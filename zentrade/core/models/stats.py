"""
Derived analytics value objects.

TradeStats and ChartData carry no identity; they are recomputed from the
trade collection on every request.
"""

from dataclasses import dataclass, field

from zentrade.core.constants import INITIAL_POINT_LABEL


@dataclass(frozen=True)
class TradeStats:
    """Summary statistics over the realized trades of a journal."""

    total_trades: int
    win_rate: float
    net_pnl: float
    avg_win: float
    avg_loss: float
    profit_factor: float
    max_drawdown: float

    @classmethod
    def empty(cls) -> "TradeStats":
        """Statistics for a journal with no realized trades."""
        return cls(
            total_trades=0,
            win_rate=0.0,
            net_pnl=0.0,
            avg_win=0.0,
            avg_loss=0.0,
            profit_factor=0.0,
            max_drawdown=0.0,
        )

    def to_dict(self) -> dict[str, float]:
        """Convert stats to a camelCase dictionary."""
        return {
            "totalTrades": self.total_trades,
            "winRate": self.win_rate,
            "netPnl": self.net_pnl,
            "avgWin": self.avg_win,
            "avgLoss": self.avg_loss,
            "profitFactor": self.profit_factor,
            "maxDrawdown": self.max_drawdown,
        }


@dataclass(frozen=True)
class ChartData:
    """One point of the equity curve."""

    date: str
    equity: float
    pnl: float

    @classmethod
    def baseline(cls) -> "ChartData":
        """Synthetic starting point placed before the first realized trade."""
        return cls(date=INITIAL_POINT_LABEL, equity=0.0, pnl=0.0)

    def to_dict(self) -> dict[str, str | float]:
        return {"date": self.date, "equity": self.equity, "pnl": self.pnl}


@dataclass(frozen=True)
class JournalSummary:
    """Everything the dashboard shows, computed in one pass over the journal."""

    stats: TradeStats
    equity_curve: list[ChartData] = field(default_factory=list)
    strategy_breakdown: dict[str, float] = field(default_factory=dict)
    win_count: int = 0
    loss_count: int = 0
    average_trade: float = 0.0

    def to_dict(self) -> dict:
        """Convert summary to dictionary."""
        return {
            "stats": self.stats.to_dict(),
            "equityCurve": [point.to_dict() for point in self.equity_curve],
            "strategyBreakdown": dict(self.strategy_breakdown),
            "winCount": self.win_count,
            "lossCount": self.loss_count,
            "averageTrade": self.average_trade,
        }
