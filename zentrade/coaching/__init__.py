"""
AI coaching boundary: prompt composition and the request service.
"""

from zentrade.core.interfaces.coaching import CoachingPrompt, ICoachingClient

from .prompt import build_coaching_prompt, summarize_trade
from .service import CoachingService

__all__ = [
    "CoachingPrompt",
    "CoachingService",
    "ICoachingClient",
    "build_coaching_prompt",
    "summarize_trade",
]
