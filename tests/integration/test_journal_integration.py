"""
Integration tests for the file-backed journal.

Exercises factory, journal, JSON store, CSV import and analytics together.
"""

from pathlib import Path

from zentrade.analytics import build_equity_curve, compute_stats
from zentrade.infrastructure.storage import CSVTradeImporter, JsonTradeStore
from zentrade.journal import TradeJournal, build_trade


class TestJournalIntegration:
    """Integration tests for journal persistence and analytics."""

    def test_should_persist_across_sessions(self, tmp_path: Path) -> None:
        """Test that a reloaded journal reproduces the same analytics."""
        path = tmp_path / "journal.json"
        journal = TradeJournal.load(JsonTradeStore(path))

        journal.add(build_trade({"symbol": "ES", "entryDate": "2024-03-01", "entryPrice": 100,
                                 "exitPrice": 120, "quantity": 1}))
        journal.add(build_trade({"symbol": "NQ", "entryDate": "2024-03-02", "entryPrice": 100,
                                 "exitPrice": 95, "quantity": 2, "fees": 1}))
        open_trade = journal.add(build_trade({"symbol": "CL", "status": "OPEN",
                                              "entryDate": "2024-03-03", "entryPrice": 80,
                                              "quantity": 1}))

        reloaded = TradeJournal.load(JsonTradeStore(path))

        assert reloaded.trades == journal.trades
        assert reloaded.get(open_trade.id).pnl is None
        assert reloaded.stats() == journal.stats()
        assert reloaded.stats().net_pnl == 9.0
        assert reloaded.stats().max_drawdown == 11.0

    def test_should_import_csv_into_journal(self, tmp_path: Path) -> None:
        """Test importing an export and analysing it."""
        csv_path = tmp_path / "export.csv"
        csv_path.write_text(
            "symbol,side,status,entry_date,entry_price,exit_price,quantity,strategy,pnl\n"
            "ES,LONG,CLOSED,2024-01-02,100,150,1,Trend,50\n"
            "NQ,LONG,CLOSED,2024-01-01,100,80,1,Trend,-20\n"
        )
        journal = TradeJournal.load(JsonTradeStore(tmp_path / "journal.json"))

        for trade in CSVTradeImporter().load(csv_path):
            journal.add(trade)

        assert compute_stats(journal.trades).net_pnl == 30.0
        assert [p.equity for p in build_equity_curve(journal.trades)] == [0.0, -20.0, 30.0]
        assert journal.strategy_breakdown() == {"Trend": 30.0}
