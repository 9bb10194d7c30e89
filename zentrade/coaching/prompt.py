"""
Coaching prompt composition.
"""

import json
from collections.abc import Iterable
from typing import Any

from zentrade.core.constants import DEFAULT_COACHING_MODEL
from zentrade.core.interfaces.coaching import CoachingPrompt
from zentrade.core.models.trade import Trade

REPORT_SECTIONS = (
    "Performance Summary",
    "Strategy Effectiveness",
    "Risk Management Review",
    "Psychological Insights (based on notes)",
    "Actionable Recommendations",
)

INSTRUCTIONS = (
    "Analyze these trades from my trading journal. Identify strengths, weaknesses, "
    "psychological patterns, and suggestions for strategy improvement. "
    "Focus on risk management and consistent patterns."
)


def summarize_trade(trade: Trade) -> dict[str, Any]:
    """The fields of a trade that are shared with the coaching service."""
    return {
        "symbol": trade.symbol,
        "pnl": trade.pnl,
        "strategy": trade.strategy,
        "side": str(trade.side),
        "notes": trade.notes,
    }


def build_coaching_prompt(
    trades: Iterable[Trade], model: str = DEFAULT_COACHING_MODEL
) -> CoachingPrompt:
    """Compose the coaching request for a trade history."""
    history = json.dumps([summarize_trade(trade) for trade in trades], indent=2)
    sections = "\n".join(f"{number}. {title}" for number, title in enumerate(REPORT_SECTIONS, 1))

    contents = (
        f"{INSTRUCTIONS}\n\n"
        f"Trade History:\n{history}\n\n"
        f"Provide the response in a structured Markdown format with sections for:\n{sections}"
    )
    return CoachingPrompt(contents=contents, model=model)
