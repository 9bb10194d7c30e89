"""
Shared fixtures for journal tests.
"""

from collections.abc import Callable
from itertools import count
from typing import Any

import pytest

from zentrade.core.models.trade import Trade

TradeFactory = Callable[..., Trade]


@pytest.fixture
def make_trade() -> TradeFactory:
    """Factory for valid trades; keyword arguments override the defaults."""
    ids = count(1)

    def _make(**overrides: Any) -> Trade:
        fields: dict[str, Any] = {
            "id": f"t{next(ids)}",
            "symbol": "BTCUSDT",
            "side": "LONG",
            "status": "CLOSED",
            "entry_date": "2024-01-01",
            "entry_price": 100.0,
            "quantity": 1.0,
            "fees": 0.0,
            "strategy": "Breakout",
            "pnl": 0.0,
        }
        fields.update(overrides)
        return Trade(**fields)

    return _make


@pytest.fixture
def closed_with_pnls(make_trade: TradeFactory) -> Callable[..., list[Trade]]:
    """Build closed trades with the given P/Ls on consecutive days."""

    def _build(*pnls: float) -> list[Trade]:
        return [
            make_trade(entry_date=f"2024-01-{day:02d}", pnl=pnl)
            for day, pnl in enumerate(pnls, start=1)
        ]

    return _build
