"""
Trade journal service.

Owns the journal's single trade collection. Analytics are recomputed from
the full collection on every call.
"""

import threading
from collections.abc import Iterator

from loguru import logger

from zentrade.analytics import (
    aggregate_by_strategy,
    build_equity_curve,
    compute_stats,
    summarize_journal,
)
from zentrade.core.constants import MAX_SEARCH_TERM_LENGTH, MAX_TRADES_IN_JOURNAL
from zentrade.core.exceptions.journal import TradeNotFoundError, ValidationError
from zentrade.core.interfaces.storage import ITradeRepository
from zentrade.core.models.stats import ChartData, JournalSummary, TradeStats
from zentrade.core.models.trade import Trade
from zentrade.core.protocols import StrategyBreakdown
from zentrade.core.utils.decorators import log_operation, require_trade
from zentrade.core.utils.validation import validate_search_term


class TradeJournal:
    """In-memory trade collection, newest first, with optional persistence.

    Every mutation writes the full collection back to the store when one
    is attached; a mutation whose write fails is not applied.
    """

    def __init__(
        self,
        trades: list[Trade] | None = None,
        store: ITradeRepository | None = None,
        max_trades: int = MAX_TRADES_IN_JOURNAL,
    ) -> None:
        trades = list(trades or [])
        if len(trades) > max_trades:
            raise ValidationError(f"Journal limit exceeded: {len(trades)} > {max_trades} trades")

        ids = [trade.id for trade in trades]
        if len(set(ids)) != len(ids):
            raise ValidationError("Journal contains duplicate trade ids")

        self._trades = trades
        self._store = store
        self._max_trades = max_trades
        self._lock = threading.RLock()

    @classmethod
    def load(
        cls, store: ITradeRepository, max_trades: int = MAX_TRADES_IN_JOURNAL
    ) -> "TradeJournal":
        """Create a journal from the trades held in a store."""
        trades = store.load()
        logger.info(f"Loaded journal with {len(trades)} trades")
        return cls(trades, store=store, max_trades=max_trades)

    # ---------- queries ----------
    @property
    def trades(self) -> tuple[Trade, ...]:
        """Snapshot of the collection, newest first."""
        with self._lock:
            return tuple(self._trades)

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(self.trades)

    def contains(self, trade_id: str) -> bool:
        with self._lock:
            return any(trade.id == trade_id for trade in self._trades)

    def get(self, trade_id: str) -> Trade:
        """Return the trade with the given id.

        Raises:
            TradeNotFoundError: If no trade has this id
        """
        with self._lock:
            for trade in self._trades:
                if trade.id == trade_id:
                    return trade
        raise TradeNotFoundError(trade_id)

    def search(self, term: str | None = None) -> list[Trade]:
        """Trades whose symbol or strategy contains the term, case-insensitive."""
        needle = validate_search_term(term, MAX_SEARCH_TERM_LENGTH).lower()
        trades = self.trades
        if not needle:
            return list(trades)
        return [
            trade
            for trade in trades
            if needle in trade.symbol.lower() or needle in trade.strategy.lower()
        ]

    # ---------- mutations ----------
    @log_operation
    def add(self, trade: Trade) -> Trade:
        """Add a new trade at the front of the journal.

        Raises:
            ValidationError: If the id is already used or the journal is full
        """
        with self._lock:
            if self.contains(trade.id):
                raise ValidationError(f"Trade id already exists: {trade.id}")
            if len(self._trades) >= self._max_trades:
                raise ValidationError(f"Journal limit reached: {self._max_trades} trades")
            self._commit([trade, *self._trades])
        return trade

    @log_operation
    @require_trade("trade")
    def update(self, trade: Trade) -> Trade:
        """Replace the stored trade that has the same id, keeping its position."""
        with self._lock:
            self._commit([trade if t.id == trade.id else t for t in self._trades])
        return trade

    @log_operation
    @require_trade("trade_id")
    def delete(self, trade_id: str) -> Trade:
        """Remove a trade and return it."""
        with self._lock:
            removed = self.get(trade_id)
            self._commit([t for t in self._trades if t.id != trade_id])
        return removed

    def _commit(self, trades: list[Trade]) -> None:
        """Save the new collection, then make it current.

        A failed save leaves the journal unchanged.
        """
        if self._store is not None:
            self._store.save(list(trades))
        self._trades = trades

    # ---------- analytics ----------
    def stats(self) -> TradeStats:
        return compute_stats(self.trades)

    def equity_curve(self) -> list[ChartData]:
        return build_equity_curve(self.trades)

    def strategy_breakdown(self) -> StrategyBreakdown:
        return aggregate_by_strategy(self.trades)

    def summary(self) -> JournalSummary:
        return summarize_journal(self.trades)
