"""
Trade storage interfaces.
"""

from abc import ABC, abstractmethod

from zentrade.core.models.trade import Trade


class ITradeRepository(ABC):
    """Abstract interface for persisting the journal's trade collection.

    The journal always reads and writes the whole collection.
    """

    @abstractmethod
    def load(self) -> list[Trade]:
        """Load all stored trades, newest first."""
        pass

    @abstractmethod
    def save(self, trades: list[Trade]) -> None:
        """Replace the stored collection."""
        pass
