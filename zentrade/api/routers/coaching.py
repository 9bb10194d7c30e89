"""
Coaching API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from zentrade.coaching import CoachingService
from zentrade.journal import TradeJournal

from ..dependencies import get_coaching_service, get_journal
from ..schemas.api_models import CoachingResponse

router = APIRouter()


@router.post("/", response_model=CoachingResponse)
def request_coaching(
    journal: Annotated[TradeJournal, Depends(get_journal)],
    service: Annotated[CoachingService, Depends(get_coaching_service)],
) -> CoachingResponse:
    """Request an AI coaching narrative for the whole journal."""
    return CoachingResponse(analysis=service.analyze(journal.trades))
