"""
Analytics API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from zentrade.journal import TradeJournal

from ..dependencies import get_journal
from ..schemas.api_models import (
    ChartPointResponse,
    EquityCurveResponse,
    StatsResponse,
    StrategyBreakdownResponse,
    SummaryResponse,
)

router = APIRouter()

JournalDep = Annotated[TradeJournal, Depends(get_journal)]


@router.get("/stats", response_model=StatsResponse)
def get_stats(journal: JournalDep) -> StatsResponse:
    """Summary statistics over realized trades."""
    return StatsResponse.from_stats(journal.stats())


@router.get("/equity-curve", response_model=EquityCurveResponse)
def get_equity_curve(journal: JournalDep) -> EquityCurveResponse:
    """Cumulative realized P/L in entry-date order."""
    points = [ChartPointResponse.from_point(point) for point in journal.equity_curve()]
    return EquityCurveResponse(points=points)


@router.get("/strategies", response_model=StrategyBreakdownResponse)
def get_strategy_breakdown(journal: JournalDep) -> StrategyBreakdownResponse:
    """P/L summed per strategy label."""
    return StrategyBreakdownResponse(strategies=journal.strategy_breakdown())


@router.get("/summary", response_model=SummaryResponse)
def get_summary(journal: JournalDep) -> SummaryResponse:
    """Everything the dashboard shows."""
    return SummaryResponse.from_summary(journal.summary())
