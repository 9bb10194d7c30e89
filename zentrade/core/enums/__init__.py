"""
Core enumerations for the trading journal.

This module provides centralized enumerations for trade direction
and trade lifecycle state.
"""

from .trade_types import TradeSide, TradeStatus

__all__ = ["TradeSide", "TradeStatus"]
