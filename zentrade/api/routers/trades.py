"""
Trade API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from zentrade.journal import TradeJournal, build_trade

from ..dependencies import get_journal
from ..schemas.api_models import TradeDraft, TradeListResponse, TradeResponse, TradeUpdate

router = APIRouter()

JournalDep = Annotated[TradeJournal, Depends(get_journal)]


@router.get("/", response_model=TradeListResponse)
def list_trades(
    journal: JournalDep, q: Annotated[str | None, Query(max_length=100)] = None
) -> TradeListResponse:
    """List trades, newest first, optionally filtered by symbol or strategy."""
    trades = [TradeResponse.from_trade(trade) for trade in journal.search(q)]
    return TradeListResponse(trades=trades, count=len(trades))


@router.post("/", response_model=TradeResponse, status_code=status.HTTP_201_CREATED)
def create_trade(draft: TradeDraft, journal: JournalDep) -> TradeResponse:
    """Log a new trade; P/L is computed when the trade is closed."""
    trade = journal.add(build_trade(draft.model_dump()))
    return TradeResponse.from_trade(trade)


@router.get("/{trade_id}", response_model=TradeResponse)
def get_trade(trade_id: str, journal: JournalDep) -> TradeResponse:
    """Get a trade by ID."""
    return TradeResponse.from_trade(journal.get(trade_id))


@router.put("/{trade_id}", response_model=TradeResponse)
def update_trade(trade_id: str, changes: TradeUpdate, journal: JournalDep) -> TradeResponse:
    """Edit a trade; P/L is recomputed from the edited fields."""
    existing = journal.get(trade_id)
    trade = journal.update(build_trade(changes.model_dump(exclude_unset=True), existing))
    return TradeResponse.from_trade(trade)


@router.delete("/{trade_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trade(trade_id: str, journal: JournalDep) -> None:
    """Delete a trade."""
    journal.delete(trade_id)
