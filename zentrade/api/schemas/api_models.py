"""
Pydantic schemas for API request/response models.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from zentrade.core.constants import DEFAULT_STRATEGY
from zentrade.core.enums import TradeSide, TradeStatus
from zentrade.core.models.stats import ChartData, JournalSummary, TradeStats
from zentrade.core.models.trade import Trade


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TradeDraft(CamelModel):
    """Request model for logging a new trade."""

    symbol: str = Field(..., min_length=1, max_length=32, description="Instrument symbol")
    side: TradeSide = Field(default=TradeSide.LONG, description="LONG or SHORT")
    status: TradeStatus = Field(default=TradeStatus.CLOSED, description="OPEN or CLOSED")
    entry_date: date = Field(default_factory=date.today, description="Date the position opened")
    exit_date: date | None = Field(default=None, description="Date the position closed")
    entry_price: float = Field(..., gt=0, description="Entry price")
    exit_price: float | None = Field(default=None, ge=0, description="Exit price (0 = none)")
    quantity: float = Field(..., ge=0, description="Position size")
    fees: float = Field(default=0.0, ge=0, description="Total fees")
    strategy: str = Field(default=DEFAULT_STRATEGY, description="Strategy label")
    notes: str = Field(default="", description="Free-text notes")


class TradeUpdate(CamelModel):
    """Request model for editing a trade; only the sent fields change."""

    symbol: str | None = Field(default=None, min_length=1, max_length=32)
    side: TradeSide | None = None
    status: TradeStatus | None = None
    entry_date: date | None = None
    exit_date: date | None = None
    entry_price: float | None = Field(default=None, gt=0)
    exit_price: float | None = Field(default=None, ge=0)
    quantity: float | None = Field(default=None, ge=0)
    fees: float | None = Field(default=None, ge=0)
    strategy: str | None = None
    notes: str | None = None


class TradeResponse(CamelModel):
    """Response model for a single trade."""

    id: str
    symbol: str
    side: TradeSide
    status: TradeStatus
    entry_date: str
    exit_date: str | None = None
    entry_price: float
    exit_price: float | None = None
    quantity: float
    fees: float
    strategy: str
    notes: str
    pnl: float | None = None

    @classmethod
    def from_trade(cls, trade: Trade) -> "TradeResponse":
        return cls.model_validate(trade.to_dict())


class TradeListResponse(CamelModel):
    """Response model for a trade listing."""

    trades: list[TradeResponse]
    count: int


class StatsResponse(CamelModel):
    """Response model for summary statistics."""

    total_trades: int
    win_rate: float
    net_pnl: float
    avg_win: float
    avg_loss: float
    profit_factor: float
    max_drawdown: float

    @classmethod
    def from_stats(cls, stats: TradeStats) -> "StatsResponse":
        return cls.model_validate(stats.to_dict())


class ChartPointResponse(CamelModel):
    """Response model for one equity curve point."""

    date: str
    equity: float
    pnl: float

    @classmethod
    def from_point(cls, point: ChartData) -> "ChartPointResponse":
        return cls(date=point.date, equity=point.equity, pnl=point.pnl)


class EquityCurveResponse(CamelModel):
    """Response model for the equity curve."""

    points: list[ChartPointResponse]


class StrategyBreakdownResponse(CamelModel):
    """Response model for P/L per strategy."""

    strategies: dict[str, float]


class SummaryResponse(CamelModel):
    """Response model for the dashboard summary."""

    stats: StatsResponse
    equity_curve: list[ChartPointResponse]
    strategy_breakdown: dict[str, float]
    win_count: int
    loss_count: int
    average_trade: float

    @classmethod
    def from_summary(cls, summary: JournalSummary) -> "SummaryResponse":
        return cls(
            stats=StatsResponse.from_stats(summary.stats),
            equity_curve=[ChartPointResponse.from_point(p) for p in summary.equity_curve],
            strategy_breakdown=summary.strategy_breakdown,
            win_count=summary.win_count,
            loss_count=summary.loss_count,
            average_trade=summary.average_trade,
        )


class CoachingResponse(CamelModel):
    """Response model for a coaching request."""

    analysis: str | None = None


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
    details: dict | None = None
