"""
Request dependencies.
"""

from fastapi import HTTPException, Request, status

from zentrade.coaching import CoachingService
from zentrade.journal import TradeJournal


def get_journal(request: Request) -> TradeJournal:
    """The journal served by this application."""
    return request.app.state.journal


def get_coaching_service(request: Request) -> CoachingService:
    """The configured coaching service.

    Raises:
        HTTPException: 503 when no coaching client is configured
    """
    service = request.app.state.coaching_service
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Coaching service is not configured",
        )
    return service
