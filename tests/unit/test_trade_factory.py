"""
Unit tests for the trade factory.
"""

from datetime import date

import pytest

from zentrade.core.constants import DEFAULT_STRATEGY, TRADE_ID_ALPHABET, TRADE_ID_LENGTH
from zentrade.core.enums import TradeSide, TradeStatus
from zentrade.core.exceptions.journal import InvalidTradeRecord
from zentrade.journal import build_trade, default_draft, generate_trade_id


class TestGenerateTradeId:
    """Test suite for trade id generation."""

    def test_should_generate_base36_ids(self) -> None:
        """Test id length and alphabet."""
        trade_id = generate_trade_id()

        assert len(trade_id) == TRADE_ID_LENGTH
        assert set(trade_id) <= set(TRADE_ID_ALPHABET)

    def test_should_generate_distinct_ids(self) -> None:
        """Test that ids do not repeat in practice."""
        assert len({generate_trade_id() for _ in range(200)}) == 200


class TestBuildTrade:
    """Test suite for build_trade."""

    def test_should_start_from_form_defaults(self) -> None:
        """Test the blank form values."""
        draft = default_draft()

        assert draft["side"] is TradeSide.LONG
        assert draft["status"] is TradeStatus.CLOSED
        assert draft["strategy"] == DEFAULT_STRATEGY
        assert draft["entry_date"] == date.today().isoformat()

    def test_should_compute_pnl_for_closed_long_trade(self) -> None:
        """Test P/L computed at submission."""
        trade = build_trade(
            {"symbol": "btcusdt", "entryPrice": 100, "exitPrice": 110, "quantity": 2, "fees": 1}
        )

        assert trade.symbol == "BTCUSDT"
        assert trade.pnl == 19.0
        assert trade.strategy == DEFAULT_STRATEGY
        assert len(trade.id) == TRADE_ID_LENGTH

    def test_should_compute_pnl_for_closed_short_trade(self) -> None:
        """Test the short multiplier."""
        trade = build_trade(
            {"symbol": "ES", "side": "SHORT", "entry_price": 50, "exit_price": 45, "quantity": 4}
        )

        assert trade.pnl == 20.0

    def test_should_leave_pnl_unset_for_open_trade(self) -> None:
        """Test that open trades are not realized."""
        trade = build_trade(
            {"symbol": "ES", "status": "OPEN", "entry_price": 50, "exit_price": 55, "quantity": 1}
        )

        assert trade.pnl is None
        assert trade.status is TradeStatus.OPEN

    @pytest.mark.parametrize("missing", [{"exit_price": None}, {"exit_price": 0}, {"quantity": 0}])
    def test_should_leave_pnl_unset_without_exit_or_size(self, missing) -> None:
        """Test that P/L needs entry price, exit price and quantity."""
        draft = {"symbol": "NQ", "entry_price": 10, "exit_price": 12, "quantity": 3, **missing}

        trade = build_trade(draft)

        assert trade.pnl is None
        assert trade.exit_price is None or trade.exit_price > 0

    def test_should_ignore_submitted_pnl(self) -> None:
        """Test that P/L always comes from the prices."""
        trade = build_trade(
            {"symbol": "NQ", "entry_price": 10, "exit_price": 12, "quantity": 1, "pnl": 999}
        )

        assert trade.pnl == 2.0

    def test_should_apply_edit_over_existing_trade(self, make_trade) -> None:
        """Test editing keeps the id and recomputes P/L."""
        existing = make_trade(
            id="keepme123", status="OPEN", pnl=None, notes="waiting", entry_price=100.0
        )

        edited = build_trade({"status": "CLOSED", "exitPrice": 105, "quantity": 2}, existing)

        assert edited.id == "keepme123"
        assert edited.notes == "waiting"
        assert edited.pnl == 10.0

    def test_should_ignore_id_in_draft(self, make_trade) -> None:
        """Test that a draft cannot overwrite the id."""
        existing = make_trade(id="original1")

        assert build_trade({"id": "hijack"}, existing).id == "original1"

    def test_should_raise_for_invalid_draft(self) -> None:
        """Test that validation happens at the construction boundary."""
        with pytest.raises(InvalidTradeRecord, match="symbol"):
            build_trade({"symbol": "", "entry_price": 10, "quantity": 1})

        with pytest.raises(InvalidTradeRecord, match="entry_price"):
            build_trade({"symbol": "ES", "quantity": 1})
