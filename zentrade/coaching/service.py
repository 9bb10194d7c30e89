"""
Coaching service.

Requests a coaching narrative for the journal. Failures of the external
service never reach the caller; they become a fixed message.
"""

from collections.abc import Iterable

from loguru import logger

from zentrade.core.constants import (
    ANALYSIS_FAILED_MESSAGE,
    DEFAULT_COACHING_MODEL,
    NO_ANALYSIS_MESSAGE,
)
from zentrade.core.interfaces.coaching import ICoachingClient
from zentrade.core.models.trade import Trade

from .prompt import build_coaching_prompt


class CoachingService:
    """Single-shot coaching requests against an ICoachingClient."""

    def __init__(self, client: ICoachingClient, model: str = DEFAULT_COACHING_MODEL):
        self.client = client
        self.model = model

    def analyze(self, trades: Iterable[Trade]) -> str | None:
        """Return the coaching narrative for the trades.

        Returns:
            None for an empty journal (no request is made), otherwise the
            generated text or a fallback message
        """
        trades = list(trades)
        if not trades:
            return None

        prompt = build_coaching_prompt(trades, model=self.model)
        logger.info(f"Requesting coaching analysis for {len(trades)} trades ({self.model})")
        try:
            text = self.client.generate(prompt)
        except Exception as e:
            logger.error(f"AI analysis failed ({type(e).__name__}): {e}")
            return ANALYSIS_FAILED_MESSAGE

        if not text:
            logger.warning("Coaching service returned no text")
            return NO_ANALYSIS_MESSAGE
        return text
