"""
Unit tests for the JSON trade store.
"""

import json
from pathlib import Path

import pytest

from zentrade.core.exceptions.journal import DataError
from zentrade.infrastructure.storage import InMemoryTradeStore, JsonTradeStore


class TestJsonTradeStore:
    """Test suite for JsonTradeStore."""

    @pytest.fixture
    def journal_path(self, tmp_path: Path) -> Path:
        return tmp_path / "data" / "trades.json"

    def test_should_load_empty_journal_when_file_missing(self, journal_path: Path) -> None:
        """Test that a missing file is an empty journal."""
        assert JsonTradeStore(journal_path).load() == []

    def test_should_round_trip_trades(self, journal_path: Path, make_trade) -> None:
        """Test save then load, including optional fields."""
        trades = [
            make_trade(id="a", pnl=None, status="OPEN"),
            make_trade(id="b", exit_price=130.0, exit_date="2024-01-09", pnl=30.0),
        ]
        store = JsonTradeStore(journal_path)

        store.save(trades)

        assert store.load() == trades

    def test_should_write_record_shape(self, journal_path: Path, make_trade) -> None:
        """Test the JSON layout on disk."""
        JsonTradeStore(journal_path).save([make_trade(id="a", pnl=12.5)])

        raw = json.loads(journal_path.read_text())
        assert raw[0]["id"] == "a"
        assert raw[0]["entryDate"] == "2024-01-01"
        assert raw[0]["pnl"] == 12.5
        assert "exitPrice" not in raw[0]

    def test_should_create_parent_directories(self, journal_path: Path) -> None:
        """Test saving into a directory that does not exist yet."""
        JsonTradeStore(journal_path).save([])

        assert journal_path.exists()
        assert list(journal_path.parent.glob("*.tmp")) == []

    def test_should_treat_empty_file_as_empty_journal(self, journal_path: Path) -> None:
        """Test a zero-byte file."""
        journal_path.parent.mkdir(parents=True)
        journal_path.write_text("")

        assert JsonTradeStore(journal_path).load() == []

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("{not json", "Malformed"),
            ('{"id": "a"}', "list of trades"),
            ('["oops"]', "not an object"),
            ('[{"id": "a", "symbol": "X"}]', "record 0 is invalid"),
        ],
    )
    def test_should_raise_data_error_for_bad_content(
        self, journal_path: Path, content: str, message: str
    ) -> None:
        """Test corrupt journal files."""
        journal_path.parent.mkdir(parents=True)
        journal_path.write_text(content)

        with pytest.raises(DataError, match=message):
            JsonTradeStore(journal_path).load()


class TestInMemoryTradeStore:
    """Test suite for InMemoryTradeStore."""

    def test_should_keep_copies(self, make_trade) -> None:
        """Test that callers cannot mutate stored lists."""
        store = InMemoryTradeStore()
        trades = [make_trade()]

        store.save(trades)
        trades.clear()

        assert len(store.load()) == 1
        assert store.save_count == 1
