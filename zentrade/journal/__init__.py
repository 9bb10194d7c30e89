"""
Trade journal: the trade collection and how trades enter it.
"""

from .factory import build_trade, default_draft, generate_trade_id
from .service import TradeJournal

__all__ = ["TradeJournal", "build_trade", "default_draft", "generate_trade_id"]
