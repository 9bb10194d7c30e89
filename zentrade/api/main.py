"""
FastAPI application for the ZenTrade journal.

Run with: uvicorn zentrade.api.main:create_app --factory
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from zentrade import __version__
from zentrade.coaching import CoachingService, ICoachingClient
from zentrade.core.config import JournalSettings, setup_logging
from zentrade.core.exceptions.journal import (
    DataError,
    InvalidTradeRecord,
    JournalException,
    TradeNotFoundError,
    ValidationError,
)
from zentrade.infrastructure.storage import JsonTradeStore
from zentrade.journal import TradeJournal

from .routers import analytics, coaching, trades
from .schemas.api_models import ErrorResponse

_ERROR_STATUS: list[tuple[type[JournalException], int]] = [
    (TradeNotFoundError, 404),
    (ValidationError, 422),
    (DataError, 500),
]


async def journal_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate journal exceptions into ErrorResponse bodies."""
    status_code = 500
    for exc_type, code in _ERROR_STATUS:
        if isinstance(exc, exc_type):
            status_code = code
            break

    details = None
    if isinstance(exc, InvalidTradeRecord):
        details = {"field": exc.field, "reason": exc.reason}
    elif isinstance(exc, TradeNotFoundError):
        details = {"trade_id": exc.trade_id}

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    body = ErrorResponse(error=type(exc).__name__, message=str(exc), details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(
    settings: JournalSettings | None = None,
    journal: TradeJournal | None = None,
    coaching_client: ICoachingClient | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        settings: Runtime settings; read from the environment when omitted
        journal: Journal to serve; loaded from settings.journal_path when omitted
        coaching_client: Text-generation client; coaching returns 503 without one
    """
    settings = settings or JournalSettings.from_env()
    setup_logging(level=settings.log_level)

    app = FastAPI(
        title="ZenTrade Journal API",
        version=__version__,
        description="API for recording trades and reviewing trading performance",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    app.state.settings = settings
    if journal is None:
        journal = TradeJournal.load(JsonTradeStore(settings.journal_path))
    app.state.journal = journal
    app.state.coaching_service = (
        CoachingService(coaching_client, model=settings.coaching_model)
        if coaching_client is not None
        else None
    )

    app.add_exception_handler(JournalException, journal_exception_handler)
    app.include_router(trades.router, prefix="/api/trades", tags=["trades"])
    app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"])
    app.include_router(coaching.router, prefix="/api/coaching", tags=["coaching"])

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": "ZenTrade Journal API", "version": __version__, "status": "running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "trades": str(len(app.state.journal))}

    return app
