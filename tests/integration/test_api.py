"""
Integration tests for the journal API.

Runs the FastAPI application against an in-memory journal.
"""

import pytest
from fastapi.testclient import TestClient

from zentrade.api.main import create_app
from zentrade.coaching import CoachingPrompt, ICoachingClient
from zentrade.core.config import JournalSettings
from zentrade.infrastructure.storage import InMemoryTradeStore
from zentrade.journal import TradeJournal


class EchoClient(ICoachingClient):
    def generate(self, prompt: CoachingPrompt) -> str:
        return f"analysed with {prompt.model}"


@pytest.fixture
def store() -> InMemoryTradeStore:
    return InMemoryTradeStore()


@pytest.fixture
def client(store: InMemoryTradeStore, tmp_path) -> TestClient:
    settings = JournalSettings(journal_path=str(tmp_path / "unused.json"))
    app = create_app(settings, journal=TradeJournal.load(store), coaching_client=EchoClient())
    return TestClient(app)


def _create(client: TestClient, **overrides) -> dict:
    payload = {
        "symbol": "btcusdt",
        "side": "LONG",
        "status": "CLOSED",
        "entryDate": "2024-01-01",
        "entryPrice": 100,
        "exitPrice": 110,
        "quantity": 1,
        "fees": 0,
        "strategy": "Breakout",
        **overrides,
    }
    response = client.post("/api/trades/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestServiceEndpoints:
    """Test root and health endpoints."""

    def test_should_report_running(self, client: TestClient) -> None:
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_should_report_healthy(self, client: TestClient) -> None:
        """Test health endpoint."""
        assert client.get("/health").json()["status"] == "healthy"


class TestTradeEndpoints:
    """Test trade CRUD endpoints."""

    def test_should_create_trade_with_computed_pnl(self, client, store) -> None:
        """Test POST computes P/L and persists."""
        body = _create(client, fees=1.5)

        assert body["symbol"] == "BTCUSDT"
        assert body["pnl"] == 8.5
        assert body["entryDate"] == "2024-01-01"
        assert len(body["id"]) == 9
        assert store.save_count == 1

    def test_should_list_newest_first_and_search(self, client) -> None:
        """Test GET listing and search."""
        _create(client, symbol="AAPL", strategy="Earnings")
        _create(client, symbol="ETHUSDT", strategy="Breakout")

        listing = client.get("/api/trades/").json()
        assert listing["count"] == 2
        assert [t["symbol"] for t in listing["trades"]] == ["ETHUSDT", "AAPL"]

        found = client.get("/api/trades/", params={"q": "earn"}).json()
        assert [t["symbol"] for t in found["trades"]] == ["AAPL"]

    def test_should_get_update_and_delete_trade(self, client) -> None:
        """Test the trade lifecycle."""
        created = _create(client, status="OPEN", exitPrice=None)
        assert created["pnl"] is None
        trade_id = created["id"]

        fetched = client.get(f"/api/trades/{trade_id}")
        assert fetched.json()["status"] == "OPEN"

        updated = client.put(
            f"/api/trades/{trade_id}", json={"status": "CLOSED", "exitPrice": 90}
        )
        assert updated.status_code == 200
        assert updated.json()["id"] == trade_id
        assert updated.json()["pnl"] == -10.0

        assert client.delete(f"/api/trades/{trade_id}").status_code == 204
        assert client.get(f"/api/trades/{trade_id}").status_code == 404

    def test_should_return_404_for_unknown_trade(self, client) -> None:
        """Test error body for a missing trade."""
        response = client.delete("/api/trades/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "TradeNotFoundError"
        assert response.json()["details"] == {"trade_id": "missing"}

    def test_should_reject_invalid_payload(self, client) -> None:
        """Test request validation."""
        response = client.post("/api/trades/", json={"symbol": "ES", "entryPrice": -1})

        assert response.status_code == 422

    def test_should_reject_invalid_edit_at_trade_boundary(self, client) -> None:
        """Test that domain validation errors become 422 responses."""
        trade_id = _create(client)["id"]

        response = client.put(f"/api/trades/{trade_id}", json={"symbol": "   "})

        assert response.status_code == 422
        assert response.json()["error"] == "InvalidTradeRecord"
        assert response.json()["details"]["field"] == "symbol"


class TestAnalyticsEndpoints:
    """Test analytics endpoints."""

    def test_should_return_zero_stats_for_empty_journal(self, client) -> None:
        """Test the empty-journal policy over HTTP."""
        stats = client.get("/api/analytics/stats").json()

        assert stats == {
            "totalTrades": 0,
            "winRate": 0.0,
            "netPnl": 0.0,
            "avgWin": 0.0,
            "avgLoss": 0.0,
            "profitFactor": 0.0,
            "maxDrawdown": 0.0,
        }
        assert client.get("/api/analytics/equity-curve").json() == {"points": []}

    def test_should_compute_analytics_from_trades(self, client) -> None:
        """Test stats, curve, strategies and summary."""
        _create(client, entryDate="2024-01-01", exitPrice=200, strategy="Breakout")
        _create(client, entryDate="2024-01-02", exitPrice=50, strategy="breakout")
        _create(client, entryDate="2024-01-03", status="OPEN", exitPrice=None, strategy="Swing")

        stats = client.get("/api/analytics/stats").json()
        assert stats["totalTrades"] == 2
        assert stats["netPnl"] == 50.0
        assert stats["profitFactor"] == 2.0
        assert stats["maxDrawdown"] == 50.0

        points = client.get("/api/analytics/equity-curve").json()["points"]
        assert [(p["date"], p["equity"]) for p in points] == [
            ("Initial", 0.0),
            ("2024-01-01", 100.0),
            ("2024-01-02", 50.0),
        ]

        strategies = client.get("/api/analytics/strategies").json()["strategies"]
        assert strategies == {"Swing": 0.0, "breakout": -50.0, "Breakout": 100.0}

        summary = client.get("/api/analytics/summary").json()
        assert summary["winCount"] == 1
        assert summary["lossCount"] == 1
        assert summary["averageTrade"] == pytest.approx(50.0 / 3)


class TestCoachingEndpoint:
    """Test the coaching endpoint."""

    def test_should_return_null_analysis_for_empty_journal(self, client) -> None:
        """Test no request is made without trades."""
        assert client.post("/api/coaching/").json() == {"analysis": None}

    def test_should_return_analysis(self, client) -> None:
        """Test a coaching request."""
        _create(client)

        body = client.post("/api/coaching/").json()

        assert body["analysis"].startswith("analysed with")

    def test_should_return_503_without_client(self, tmp_path) -> None:
        """Test coaching is unavailable when not configured."""
        settings = JournalSettings(journal_path=str(tmp_path / "j.json"))
        client = TestClient(create_app(settings, journal=TradeJournal()))

        assert client.post("/api/coaching/").status_code == 503
